from .lexer     import Lexer, Token, Category, tokenize
from .parser    import Parser, parse, build_syntax_tree
from .reporter  import Reporter, Error
