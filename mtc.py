#! /usr/bin/env python3

import argparse
import os
import sys

from mt.lexer    import Lexer
from mt.parser   import Parser
from mt.reporter import Reporter, Error

# ====================================================================
# Parse command line arguments

def parse_args(argv = None):
    parser = argparse.ArgumentParser(prog = os.path.basename(sys.argv[0]))

    parser.add_argument('input', help = 'input file (.mt)')
    parser.add_argument('--tokens', action = 'store_true',
                        help = 'only dump the token stream')
    parser.add_argument('--flat', action = 'store_true',
                        help = 'dump one line per top level node instead of the tree')

    aout = parser.parse_args(argv)

    if os.path.splitext(aout.input)[1].lower() != '.mt':
        parser.error('input filename must end with the .mt extension')

    return aout

# ====================================================================
# Main entry point

def main(argv = None):
    """
    usage:
    python3 mtc.py <filename>.mt [--tokens] [--flat]

    prints the token stream, then the syntax tree
    """
    args     = parse_args(argv)
    reporter = Reporter()

    try:
        with open(args.input, 'r', encoding = 'utf-8') as stream:
            source = stream.read()

    except (IOError, UnicodeDecodeError) as e:
        reporter.crash(f'cannot read input file {args.input}: {e}')

    try:
        tokens = Lexer(reporter).tokenize(source)

        for token in tokens:
            print(token)

        if args.tokens:
            return

        print("\n")

        tree = Parser(reporter).parse(tokens)

    except Error as e:
        reporter.section = None     # already named by the error
        reporter.crash(str(e))

    for node in tree:
        print(node if args.flat else node.pprint())

# --------------------------------------------------------------------
if __name__ == '__main__':
    main()
