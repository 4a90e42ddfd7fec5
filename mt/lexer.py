import dataclasses as dc
import enum
import ply.lex

from .position  import Range
from .reporter  import Reporter, LexicalError

### TOKENS ###

# raw lexemes: every character of the source ends up in exactly one token
# whitespace and separators only delimit words, the classifier drops them

class Category(enum.Enum):
    WHITESPACE = "White Space"
    SEPARATOR  = "Separator"
    SYMBOL     = "Symbol"
    WORD       = "Word"

@dc.dataclass
class Token:
    content     : str
    category    : Category
    position    : Range

    def __str__(self):
        match self.category:
            case Category.WHITESPACE | Category.SEPARATOR:
                content = self.content.encode("unicode_escape").decode("ascii")
            case _:
                content = self.content
        return f"'{content}' - {self.category.value} {self.position}"

class Lexer:
    tokens = (
        'WHITESPACE',
        'SEPARATOR' ,
        'SYMBOL'    ,
        'WORD'      ,
    )

    categories = {
        'WHITESPACE': Category.WHITESPACE,
        'SEPARATOR' : Category.SEPARATOR,
        'SYMBOL'    : Category.SYMBOL,
        'WORD'      : Category.WORD,
    }

    def __init__(self, reporter = None):
        self.reporter = reporter or Reporter()
        self.lexer    = ply.lex.lex(module = self)

    def _locate(self, t):
        t.column = t.lexpos - t.lexer.line_start

    def t_WHITESPACE(self, t):
        r'[ \t\r]'
        self._locate(t)
        return t

    def t_SEPARATOR(self, t):
        r'\n'
        self._locate(t)
        t.lexer.lineno     += 1
        t.lexer.line_start  = t.lexpos + 1
        return t

    def t_SYMBOL(self, t):
        r"""[+\-/*=(),"'<>{}&|.%]"""
        self._locate(t)
        return t

    def t_WORD(self, t):
        r"""[^ \t\r\n+\-/*=(),"'<>{}&|.%]+"""
        self._locate(t)
        return t

    def t_error(self, t):
        self.reporter.log(LexicalError(
            "illegal character -- skipping",
            this        = t.value[0],
            position    = Range.point(t.lineno, t.lexpos - t.lexer.line_start),
        ))
        t.lexer.skip(1)

    def tokenize(self, source: str) -> list[Token]:
        self.reporter.checkpoint("tokenize")

        self.lexer.input(source)
        self.lexer.lineno     = 0
        self.lexer.line_start = 0

        result = []
        for t in self.lexer:
            result.append(Token(
                content     = t.value,
                category    = self.categories[t.type],
                position    = Range(
                    (t.lineno, t.column),
                    (t.lineno, t.column + len(t.value) - 1),
                ),
            ))

        self.reporter.checkpoint()
        return result

def tokenize(source: str, reporter = None) -> list[Token]:
    return Lexer(reporter).tokenize(source)
