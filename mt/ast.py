import dataclasses as dc
import enum

from .position import Range

### AST ###

# enum payloads carry their canonical source text
# every node keeps the source range it covers
# two renderings:
# str(node)             -> one line, "<Kind> <payload> l, c -> l, c"
# node.pprint(depth)    -> indented tree, one " | " marker per depth level

INDENT = " | "

class Keyword(enum.Enum):
    IF      = "if"
    FOREVER = "forever"
    RETURN  = "return"

    def pprint(self):
        return self.name.capitalize()

class Type(enum.Enum):
    I32     = "i32"
    U32     = "u32"
    F32     = "f32"
    STRING  = "string"
    BOOLEAN = "bool"
    VOID    = "void"

    def pprint(self):
        match self:
            case Type.I32 | Type.U32 | Type.F32:
                return self.name
            case _:
                return self.name.capitalize()

class Operator(enum.Enum):
    BITWISE_AND           = "&"
    BITWISE_OR            = "|"
    AND                   = "&&"
    OR                    = "||"
    LESS_THAN             = "<"
    LESS_THAN_OR_EQUAL    = "<="
    GREATER_THAN          = ">"
    GREATER_THAN_OR_EQUAL = ">="
    ASSIGN                = "="
    EQUAL                 = "=="
    ADD                   = "+"
    SUBTRACT              = "-"
    MULTIPLY              = "*"
    DIVIDE                = "/"
    MODULO                = "%"
    ACCESS                = "."

    def pprint(self):
        return self.value

class Symbol(enum.Enum):
    OPEN_PAREN   = "("
    CLOSED_PAREN = ")"
    COMMA        = ","
    QUOTE        = '"'
    SINGLE_QUOTE = "'"
    OPEN_CURLY   = "{"
    CLOSED_CURLY = "}"

    def pprint(self):
        return self.value

@dc.dataclass
class Node:
    position    : Range = dc.field(kw_only = True)

    kind = "Node"

    def payload(self):
        return ""

    def __str__(self):
        return f"{self.kind} {self.payload()} {self.position}"

    def pprint(self, depth = 0):
        return f"{INDENT * depth}{self.kind} {self.payload()}"

### LEAVES ###

@dc.dataclass
class KeywordNode(Node):
    keyword     : Keyword

    kind = "Keyword"

    def payload(self):
        return self.keyword.pprint()

@dc.dataclass
class TypeNode(Node):
    type_       : Type

    kind = "Type"

    def payload(self):
        return self.type_.pprint()

@dc.dataclass
class OperatorNode(Node):
    operator    : Operator

    kind = "Operator"

    def payload(self):
        return self.operator.pprint()

@dc.dataclass
class SymbolNode(Node):
    symbol      : Symbol

    kind = "Symbol"

    def payload(self):
        return self.symbol.pprint()

@dc.dataclass
class NumberNode(Node):
    value       : int

    kind = "Number"

    def payload(self):
        return str(self.value)

@dc.dataclass
class BooleanNode(Node):
    value       : bool

    kind = "Boolean"

    def payload(self):
        return "true" if self.value else "false"

@dc.dataclass
class NameNode(Node):
    value       : str

    kind = "Name"

    def payload(self):
        return self.value

### COMPOSITES ###

# own their children exclusively, range is the union of first and last child

@dc.dataclass
class Block(Node):
    content     : list[Node]

    kind = "Block"

    def payload(self):
        return "{" + "; ".join(str(node) for node in self.content) + "}"

    def pprint(self, depth = 0):
        lines = [f"{INDENT * depth}{self.kind}"]
        lines += [node.pprint(depth + 1) for node in self.content]
        return "\n".join(lines)

@dc.dataclass
class Assignment(Node):
    name        : NameNode
    value       : Node

    kind = "Assignment"

    def payload(self):
        return f"{self.name} = {self.value}"

    def pprint(self, depth = 0):
        return "\n".join((
            f"{INDENT * depth}{self.kind}",
            self.name.pprint(depth + 1),
            self.value.pprint(depth + 1),
        ))

@dc.dataclass
class VariableDefinition(Node):
    type_       : TypeNode
    assignment  : Assignment

    kind = "Variable Definition"

    def payload(self):
        return f"{self.type_} {self.assignment}"

    def pprint(self, depth = 0):
        return "\n".join((
            f"{INDENT * depth}{self.kind}",
            self.type_.pprint(depth + 1),
            self.assignment.pprint(depth + 1),
        ))
