"""
Token definitions and grammar tables for the Auralite lexer.

Auralite reads like plain English, so besides the usual keyword, operator and
symbol tables the lexer also knows a small vocabulary of multi-word phrases
("give back", "send output", ...) that are recognized as a single token.

Everything in here is read-only data shared by every lexer instance.

Author: xwest
"""

import re
from enum import Enum, auto
from dataclasses import dataclass
from typing import Any


class TokenType(Enum):
    """Token categories produced by the Auralite lexer."""

    PHRASE = auto()                 # give back, send output, repeat until
    KEYWORD = auto()                # create, when, then, ...
    OPERATOR = auto()               # =, ==, <=, &&, =>
    SYMBOL = auto()                 # ( ) [ ] { } ; ,
    STRING = auto()                 # "hello", 'hi'
    NUMBER = auto()                 # 42, 3.14
    IDENTIFIER = auto()             # anything else


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    The column is the index of the word within its source line, not a
    character offset.
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Auralite language.

    `lexeme` is the raw source text, `value` is what the rest of the pipeline
    works with: the case-folded phrase, the lower-cased keyword, the parsed
    number, or the raw text for everything else. `joined` is set when the
    token touched the previous one with no whitespace in between.
    """
    type: TokenType
    lexeme: str
    value: Any
    location: SourceLocation
    joined: bool = False

    def __str__(self) -> str:
        if self.value != self.lexeme:
            return f"{self.type.name}({self.lexeme!r} -> {self.value!r})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column

    @property
    def text(self) -> str:
        """Text used when the token is stitched back into raw expression text."""
        return str(self.value)

    @property
    def is_phrase(self) -> bool:
        return self.type == TokenType.PHRASE

    def is_word(self, word: str) -> bool:
        """Check the token's text against a literal word such as `end` or `do`."""
        return self.type != TokenType.STRING and self.value == word


# ============================================================================
# Grammar table
# ============================================================================

KEYWORDS = frozenset({
    # Construct introducers
    "create", "build", "generate", "make", "new",
    "function", "method", "class", "object", "data",

    # Control flow
    "if", "when", "unless", "else", "then",
    "loop", "repeat", "for", "while", "each",

    # Results and output
    "return", "give", "send", "output",

    # Modules
    "import", "use", "require", "include",
    "export", "share", "publish",

    # Errors
    "try", "catch", "handle", "error",

    # Concurrency
    "async", "await", "promise", "future",

    # Checks
    "test", "validate", "check", "assert",
})

OPERATORS = frozenset({
    "=", "+=", "-=", "*=", "/=", "%=",
    "==", "===", "!=", "!==",
    "<", ">", "<=", ">=",
    "+", "-", "*", "/", "%",
    "&&", "||", "!",
    "->", "=>", "::", "..",
})

SYMBOLS = frozenset({
    "(", ")", "[", "]", "{", "}", ";", ",", ".", ":",
    "@", "#", "$", "&", "|", "^", "~", "?", "!",
})

# Folded phrase -> the target construct it stands for
PHRASES = {
    "create a function": "function",
    "build a class": "class",
    "make an object": "object",
    "generate data": "data",
    "when condition": "if",
    "unless condition": "if (!condition)",
    "loop through": "for",
    "repeat until": "while",
    "give back": "return",
    "send output": "console.log",
    "use module": "import",
    "share function": "export",
    "try to": "try",
    "handle error": "catch",
    "wait for": "await",
    "test that": "assert",
}

# Longest phrase window the lexer will try
MAX_PHRASE_WORDS = 4

COMMENT_MARKER = "//"
QUOTE_CHARS = ('"', "'")

# Characters split off from surrounding words even without whitespace
SEPARATOR_CHARS = "(),;"

NUMBER_PATTERN = re.compile(r'^\d+(\.\d+)?$')
