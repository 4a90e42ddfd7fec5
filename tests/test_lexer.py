import pytest

from mt.lexer    import Category, Lexer, Token, tokenize
from mt.position import Range

def contents(source):
    return [token.content for token in tokenize(source)]

def categories(source):
    return [token.category for token in tokenize(source)]

SOURCES = [
    "",
    "x = 5",
    "i32 x = 5\n",
    "{ x = 5 }",
    "if (a < b) {\n\treturn a % b\n}\n",
    "string s = \"hello, world\"\r\n",
    "héllo=ñ.ü&&|| 12ab",
    "\n\n  \n",
    "y",
]

def test_assignment_tokens():
    assert tokenize("x = 5") == [
        Token("x", Category.WORD,       Range.point(0, 0)),
        Token(" ", Category.WHITESPACE, Range.point(0, 1)),
        Token("=", Category.SYMBOL,     Range.point(0, 2)),
        Token(" ", Category.WHITESPACE, Range.point(0, 3)),
        Token("5", Category.WORD,       Range.point(0, 4)),
    ]

def test_separator_moves_to_next_line():
    assert tokenize("ab\ncd") == [
        Token("ab", Category.WORD,      Range((0, 0), (0, 1))),
        Token("\n", Category.SEPARATOR, Range.point(0, 2)),
        Token("cd", Category.WORD,      Range((1, 0), (1, 1))),
    ]

def test_carriage_return_is_whitespace():
    assert categories("a\r\nb") == [
        Category.WORD, Category.WHITESPACE, Category.SEPARATOR, Category.WORD,
    ]

@pytest.mark.parametrize("character", list("+-/*=(),\"'<>{}&|.%"))
def test_symbols_are_single_characters(character):
    assert tokenize(character * 2) == [
        Token(character, Category.SYMBOL, Range.point(0, 0)),
        Token(character, Category.SYMBOL, Range.point(0, 1)),
    ]

def test_words_split_on_symbols():
    assert contents("a.b+c") == ["a", ".", "b", "+", "c"]

def test_trailing_word_is_flushed():
    assert tokenize("y") == [Token("y", Category.WORD, Range.point(0, 0))]

def test_empty_source():
    assert tokenize("") == []

def test_columns_count_characters_not_bytes():
    assert tokenize("é=1") == [
        Token("é", Category.WORD,   Range.point(0, 0)),
        Token("=", Category.SYMBOL, Range.point(0, 1)),
        Token("1", Category.WORD,   Range.point(0, 2)),
    ]

@pytest.mark.parametrize("source", SOURCES)
def test_tokens_cover_source(source):
    assert "".join(contents(source)) == source

@pytest.mark.parametrize("source", SOURCES)
def test_tokens_are_contiguous(source):
    tokens = tokenize(source)

    for token in tokens:
        assert token.position.start <= token.position.end
        assert token.position.lines[0] == token.position.lines[1]

    for previous, token in zip(tokens, tokens[1:]):
        line, column = previous.position.end
        if previous.category is Category.SEPARATOR:
            assert token.position.start == (line + 1, 0)
        else:
            assert token.position.start == (line, column + 1)

def test_lexer_is_reusable():
    lexer = Lexer()
    first = lexer.tokenize("a\nb\nc")
    again = lexer.tokenize("a\nb\nc")
    assert first == again
    assert again[-1].position == Range.point(2, 0)

def test_token_rendering():
    word, space, symbol, separator = tokenize("ab =\n")
    assert str(word)      == "'ab' - Word 0, 0 -> 0, 1"
    assert str(space)     == "' ' - White Space 0, 2 -> 0, 2"
    assert str(symbol)    == "'=' - Symbol 0, 3 -> 0, 3"
    assert str(separator) == "'\\n' - Separator 0, 4 -> 0, 4"

def test_tab_rendering_is_escaped():
    assert str(tokenize("\t")[0]) == "'\\t' - White Space 0, 0 -> 0, 0"
