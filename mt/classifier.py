from .ast       import *
from .lexer     import Category, Token
from .reporter  import Reporter, ClassificationError, NumberOverflow

### CLASSIFIER ###

# maps raw tokens to leaf nodes by table lookup
# word priority: type, boolean, number, keyword, then name as the catch-all

OPERATORS   = {op.value: op for op in Operator if len(op.value) == 1}
SYMBOLS     = {sym.value: sym for sym in Symbol}
TYPES       = {ty.value: ty for ty in Type}
KEYWORDS    = {kw.value: kw for kw in Keyword}
BOOLEANS    = {"true": True, "false": False}

NUMBER_MAX  = (1 << 63) - 1

def is_number(content: str) -> bool:
    return content.isascii() and content.isdigit()

class Classifier:
    def __init__(self, reporter = None):
        self.reporter = reporter or Reporter()

    def operator(self, token: Token) -> OperatorNode:
        if token.content not in OPERATORS:
            self.reporter.fail(ClassificationError, "unknown operator",
                               this = token.content, position = token.position)
        return OperatorNode(OPERATORS[token.content], position = token.position)

    def symbol(self, token: Token) -> SymbolNode:
        if token.content not in SYMBOLS:
            self.reporter.fail(ClassificationError, "unknown symbol",
                               this = token.content, position = token.position)
        return SymbolNode(SYMBOLS[token.content], position = token.position)

    def type_(self, token: Token) -> TypeNode:
        if token.content not in TYPES:
            self.reporter.fail(ClassificationError, "unknown type",
                               this = token.content, position = token.position)
        return TypeNode(TYPES[token.content], position = token.position)

    def keyword(self, token: Token) -> KeywordNode:
        if token.content not in KEYWORDS:
            self.reporter.fail(ClassificationError, "unknown keyword",
                               this = token.content, position = token.position)
        return KeywordNode(KEYWORDS[token.content], position = token.position)

    def number(self, token: Token) -> NumberNode:
        value = int(token.content)
        if value > NUMBER_MAX:
            self.reporter.fail(NumberOverflow, "integer literal out of range",
                               this = token.content, position = token.position)
        return NumberNode(value, position = token.position)

    def word(self, token: Token) -> Node:
        content = token.content

        if content in TYPES:
            return self.type_(token)
        if content in BOOLEANS:
            return BooleanNode(BOOLEANS[content], position = token.position)
        if is_number(content):
            return self.number(token)
        if content in KEYWORDS:
            return self.keyword(token)
        return NameNode(content, position = token.position)

    def classify(self, tokens: list[Token]) -> list[Node]:
        self.reporter.checkpoint("classify")

        nodes = []
        for token in tokens:
            match token.category:
                case Category.SYMBOL if token.content in OPERATORS:
                    nodes.append(self.operator(token))
                case Category.SYMBOL:
                    nodes.append(self.symbol(token))
                case Category.WORD:
                    nodes.append(self.word(token))
                case Category.WHITESPACE | Category.SEPARATOR:
                    pass

        return nodes

def classify(tokens: list[Token], reporter = None) -> list[Node]:
    return Classifier(reporter).classify(tokens)
