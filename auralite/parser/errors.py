"""
Error handling for the Auralite parser.

Every structural problem is reported as a single ParseError carrying a
diagnostic and a ParseErrorKind. There is no recovery: the first error ends
the parse.

Author: xwest
"""

from enum import Enum
from typing import Optional, List

from ..lexer.tokens import Token, SourceLocation
from ..lexer.errors import Diagnostic, ErrorRecovery


class ParseErrorKind(Enum):
    """Categories of structural errors."""
    MISSING_CONSTRUCT_KEYWORD = "A001"
    MISSING_IDENTIFIER = "A002"
    UNTERMINATED_CONDITIONAL = "A003"
    UNTERMINATED_LOOP = "A004"
    UNTERMINATED_BLOCK = "A005"
    MISSING_CONDITION = "A006"

    @property
    def code(self) -> str:
        return self.value


class ParseError(Exception):
    """
    Exception raised when the parser encounters a syntax error.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        kind: ParseErrorKind,
        location: Optional[SourceLocation] = None,
        token: Optional[Token] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.token = token
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=kind.code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def location(self) -> Optional[SourceLocation]:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


# Helper functions for creating common parser errors

def create_missing_construct_keyword_error(intro: Token, expected: List[str],
                                           found: Optional[Token]) -> ParseError:
    """`create`/`build` not followed by the keyword naming what to create."""
    expected_str = " or ".join(f"'{k}'" for k in expected)
    suggestions = []
    if found is not None:
        close = ErrorRecovery.suggest_keyword_corrections(found.lexeme, expected)
        suggestions = [f"Did you mean '{k}'?" for k in close]
        message = f"Expected {expected_str} keyword after '{intro.value}', found '{found.lexeme}'"
    else:
        message = f"Expected {expected_str} keyword after '{intro.value}'"

    return ParseError(
        message=message,
        kind=ParseErrorKind.MISSING_CONSTRUCT_KEYWORD,
        location=(found or intro).location,
        token=found,
        help_text=f"'{intro.value}' must be followed by {expected_str}.",
        suggestions=suggestions
    )


def create_missing_identifier_error(what: str, previous: Token,
                                    found: Optional[Token]) -> ParseError:
    """A construct expected a name and found something else (or nothing)."""
    if found is not None:
        message = f"Expected {what} name, found {found.type.name.lower()} '{found.lexeme}'"
    else:
        message = f"Expected {what} name, reached end of input"

    return ParseError(
        message=message,
        kind=ParseErrorKind.MISSING_IDENTIFIER,
        location=(found or previous).location,
        token=found,
        help_text=f"Give the {what} a plain name after '{previous.value}'."
    )


def create_unterminated_conditional_error(intro: Token) -> ParseError:
    return ParseError(
        message=f"Expected 'then' after '{intro.value}' condition",
        kind=ParseErrorKind.UNTERMINATED_CONDITIONAL,
        location=intro.location,
        token=intro,
        help_text="Conditions are written as 'when <condition> then ... end'.",
        suggestions=["Add 'then' between the condition and the body"]
    )


def create_unterminated_loop_error(intro: Token) -> ParseError:
    return ParseError(
        message=f"Expected 'do' after '{intro.value}' condition",
        kind=ParseErrorKind.UNTERMINATED_LOOP,
        location=intro.location,
        token=intro,
        help_text="Loops are written as 'loop <items> do ... end' or 'repeat <condition> do ... end'.",
        suggestions=["Add 'do' between the loop condition and the body"]
    )


def create_unterminated_block_error(intro: Token) -> ParseError:
    return ParseError(
        message=f"Block opened by '{intro.value}' is never closed with 'end'",
        kind=ParseErrorKind.UNTERMINATED_BLOCK,
        location=intro.location,
        token=intro,
        suggestions=["Add 'end' after the last statement of the block"]
    )


def create_missing_condition_error(intro: Token, separator: str) -> ParseError:
    """Nothing between the introducer and its `then`/`do`."""
    return ParseError(
        message=f"Expected a condition between '{intro.value}' and '{separator}'",
        kind=ParseErrorKind.MISSING_CONDITION,
        location=intro.location,
        token=intro,
        help_text=f"Write the condition after '{intro.value}', before '{separator}'."
    )
