from .ast           import *
from .classifier    import Classifier
from .lexer         import Token
from .position      import Range
from .reporter      import Reporter

### FOLDING PASSES ###

# each pass rewrites the node list in place with one forward scan:
# a node is either copied through or starts a matched window that is
# replaced by a single composite node
# order is fixed: blocks, then assignments, then variable definitions
# nested lists are found with an explicit stack, so depth is not bounded
# by the interpreter's recursion limit

def _node_lists(nodes: list[Node]) -> list[list[Node]]:
    """
    every node list in the tree, outer lists before the lists they contain
    """
    found   = []
    lists   = [nodes]

    while lists:
        current = lists.pop()
        found.append(current)

        pending = list(current)
        while pending:
            match pending.pop():
                case Block(content = content):
                    lists.append(content)
                case Assignment(value = value):
                    pending.append(value)
                case VariableDefinition(assignment = assignment):
                    pending.append(assignment)

    return found

def build_blocks(nodes: list[Node]):
    """
    nest the nodes between matching curly brackets into Block nodes

    an unmatched closing bracket stays in place as a bare symbol,
    an unmatched opening bracket stays in place and the nodes after it
    remain at the enclosing level
    """
    frames  = []        # (opening symbol, enclosing list)
    current = []

    for node in nodes:
        match node:
            case SymbolNode(symbol = Symbol.OPEN_CURLY):
                frames.append((node, current))
                current = []

            case SymbolNode(symbol = Symbol.CLOSED_CURLY) if frames:
                opener, enclosing = frames.pop()
                enclosing.append(Block(
                    current,
                    position    = Range.span(opener.position, node.position),
                ))
                current = enclosing

            case _:
                current.append(node)

    while frames:
        opener, enclosing = frames.pop()
        enclosing.append(opener)
        enclosing.extend(current)
        current = enclosing

    nodes[:] = current

def _fold_assignments(nodes: list[Node]):
    folded  = []
    index   = 0

    while index < len(nodes):
        match nodes[index:index + 3]:
            case [NameNode() as name, OperatorNode(operator = Operator.ASSIGN), value]:
                folded.append(Assignment(
                    name,
                    value,
                    position    = Range.span(name.position, value.position),
                ))
                index += 3

            case _:
                folded.append(nodes[index])
                index += 1

    nodes[:] = folded

def build_assignments(nodes: list[Node]):
    """
    fold (name, =, value) windows into Assignment nodes, at every depth
    """
    for current in reversed(_node_lists(nodes)):
        _fold_assignments(current)

def _fold_variable_definitions(nodes: list[Node]):
    folded  = []
    index   = 0

    while index < len(nodes):
        match nodes[index:index + 2]:
            case [TypeNode() as type_, Assignment() as assignment]:
                folded.append(VariableDefinition(
                    type_,
                    assignment,
                    position    = Range.span(type_.position, assignment.position),
                ))
                index += 2

            case _:
                folded.append(nodes[index])
                index += 1

    nodes[:] = folded

def build_variable_definitions(nodes: list[Node]):
    """
    fold (type, assignment) pairs into VariableDefinition nodes, at every depth
    """
    for current in reversed(_node_lists(nodes)):
        _fold_variable_definitions(current)

### PARSER ###

class Parser:
    passes = (
        ("blocks"       , build_blocks              ),
        ("assignments"  , build_assignments         ),
        ("definitions"  , build_variable_definitions),
    )

    def __init__(self, reporter = None):
        self.reporter   = reporter or Reporter()
        self.classifier = Classifier(self.reporter)

    def parse(self, tokens: list[Token]) -> list[Node]:
        nodes = self.classifier.classify(tokens)

        for section, fold in self.passes:
            self.reporter.checkpoint(section)
            fold(nodes)

        self.reporter.checkpoint()
        return nodes

def parse(tokens: list[Token], reporter = None) -> list[Node]:
    return Parser(reporter).parse(tokens)

build_syntax_tree = parse
