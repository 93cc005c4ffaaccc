"""
Auralite Recursive Descent Parser

Turns the flat token list into a tree of statements. The parser's only real
job is block structure: every construct has its own introducer, an optional
separator keyword (`then`, `do`) and the literal `end` closing its body.
Conditions and expressions stay raw text for the code generator.

Author: xwest
"""

from typing import List, Optional, Dict, Callable

from ..lexer.tokens import Token, TokenType
from .ast_nodes import (
    Program, Statement, FunctionDecl, ClassDecl, Conditional, Loop, Expression,
    SourceSpan, EMPTY_SPAN
)
from .errors import (
    create_missing_construct_keyword_error,
    create_missing_identifier_error, create_unterminated_conditional_error,
    create_unterminated_loop_error, create_unterminated_block_error,
    create_missing_condition_error
)


FUNCTION_KEYWORDS = ["function", "method"]
CLASS_KEYWORDS = ["class"]

BLOCK_TERMINATOR = "end"
CONDITION_SEPARATOR = "then"
LOOP_SEPARATOR = "do"
STATEMENT_SEPARATOR = ";"


def render_tokens(tokens: List[Token], prefix: str = "") -> str:
    """
    Stitch tokens back into raw text.

    Tokens are joined with single spaces, except where the token touched its
    predecessor in the source (`greet()`, `x;`).
    """
    text = prefix
    for token in tokens:
        if text and not token.joined:
            text += " "
        text += token.text
    return text


class Parser:
    """
    Auralite statement parser.

    A single dispatcher looks at the leading token and hands off to a
    construct-specific parser that owns its own terminator scanning.
    """

    def __init__(self, tokens: List[Token], strict_blocks: bool = False):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: List of tokens from the lexer
            strict_blocks: Raise instead of silently closing a block that
                reaches end of input without `end`
        """
        self.tokens = tokens
        self.current = 0
        self.strict_blocks = strict_blocks

        # Keyed on the token value of a KEYWORD or PHRASE token. The phrase
        # forms carry the construct's keyword inside the phrase itself.
        self.statement_parsers: Dict[str, Callable[[], Statement]] = {
            "create": self._parse_function,
            "create a function": self._parse_function,
            "build": self._parse_class,
            "build a class": self._parse_class,
            "when": self._parse_conditional,
            "when condition": self._parse_conditional,
            "unless": self._parse_conditional,
            "unless condition": self._parse_conditional,
            "loop": self._parse_loop,
            "loop through": self._parse_loop,
            "repeat": self._parse_loop,
            "repeat until": self._parse_loop,
        }

    def parse(self) -> Program:
        """
        Parse the token list into a Program.

        Raises:
            ParseError: On the first structural error
        """
        self.current = 0
        body = []

        while not self._is_at_end():
            statement = self._parse_statement()
            if statement is None:
                # Declined (stray `end` or `;`): skip a token and retry
                self._advance()
            else:
                body.append(statement)

        if self.tokens:
            span = SourceSpan(self.tokens[0].location, self.tokens[-1].location)
        else:
            span = EMPTY_SPAN

        return Program(body, span)

    def _parse_statement(self) -> Optional[Statement]:
        """Dispatch on the leading token."""
        token = self._peek()

        if token.type in (TokenType.KEYWORD, TokenType.PHRASE):
            statement_parser = self.statement_parsers.get(token.value)
            if statement_parser is not None:
                return statement_parser()

        return self._parse_expression()

    def _parse_function(self) -> FunctionDecl:
        """`create function name(params) ... end`"""
        intro = self._advance()
        is_method = False

        if not intro.is_phrase:
            keyword = self._consume_construct_keyword(intro, FUNCTION_KEYWORDS)
            is_method = keyword.value == "method"

        name = self._consume_identifier("function")
        parameters = self._parse_parameters()
        body = self._parse_block(intro)

        return FunctionDecl(name.value, parameters, body, self._span_from(intro), is_method=is_method)

    def _parse_class(self) -> ClassDecl:
        """`build class Name ... end`"""
        intro = self._advance()

        if not intro.is_phrase:
            self._consume_construct_keyword(intro, CLASS_KEYWORDS)

        name = self._consume_identifier("class")
        methods = self._parse_block(intro)

        return ClassDecl(name.value, methods, self._span_from(intro))

    def _parse_conditional(self) -> Conditional:
        """`when <condition> then ... end` / `unless <condition> then ... end`"""
        intro = self._advance()
        negate = self._intro_word(intro) == "unless"

        condition = self._collect_until(CONDITION_SEPARATOR)
        if self._is_at_end():
            raise create_unterminated_conditional_error(intro)
        if not condition:
            raise create_missing_condition_error(intro, CONDITION_SEPARATOR)
        self._advance()  # then

        body = self._parse_block(intro)

        # `when condition` / `unless condition` only name the construct
        return Conditional(render_tokens(condition), body, negate, self._span_from(intro))

    def _parse_loop(self) -> Loop:
        """`loop <items> do ... end` / `repeat <condition> do ... end`"""
        intro = self._advance()
        repeat_form = self._intro_word(intro) == "repeat"

        condition = self._collect_until(LOOP_SEPARATOR)
        if self._is_at_end():
            raise create_unterminated_loop_error(intro)
        if not condition:
            raise create_missing_condition_error(intro, LOOP_SEPARATOR)
        self._advance()  # do

        body = self._parse_block(intro)
        condition_text = render_tokens(condition, self._phrase_tail(intro))

        return Loop(condition_text, body, repeat_form, self._span_from(intro))

    def _parse_expression(self) -> Optional[Expression]:
        """Raw tokens up to `;` or `end`. The `end` belongs to the enclosing block."""
        start = self._peek()
        tokens = []

        while (not self._is_at_end() and
               not self._peek().is_word(STATEMENT_SEPARATOR) and
               not self._peek().is_word(BLOCK_TERMINATOR)):
            tokens.append(self._advance())

        if not tokens:
            return None

        if self._check_word(STATEMENT_SEPARATOR):
            self._advance()

        return Expression(render_tokens(tokens), SourceSpan(start.location, tokens[-1].location))

    def _parse_parameters(self) -> List[str]:
        """Optional `( a, b )` list. Anything that isn't an identifier is skipped."""
        parameters = []
        if not self._check_word("("):
            return parameters

        self._advance()
        while not self._is_at_end() and not self._check_word(")"):
            token = self._advance()
            if token.type == TokenType.IDENTIFIER:
                parameters.append(token.value)

        if not self._is_at_end():
            self._advance()  # )

        return parameters

    def _parse_block(self, intro: Token) -> List[Statement]:
        """Statements up to the literal `end`, which is consumed."""
        body = []

        while not self._is_at_end() and not self._check_word(BLOCK_TERMINATOR):
            statement = self._parse_statement()
            if statement is None:
                self._advance()
            else:
                body.append(statement)

        if self._is_at_end():
            if self.strict_blocks:
                raise create_unterminated_block_error(intro)
        else:
            self._advance()  # end

        return body

    # Utility methods

    def _consume_construct_keyword(self, intro: Token, expected: List[str]) -> Token:
        """Skip ahead to the next keyword and require it to be one of `expected`."""
        while not self._is_at_end() and self._peek().type != TokenType.KEYWORD:
            self._advance()

        if self._is_at_end():
            raise create_missing_construct_keyword_error(intro, expected, None)

        keyword = self._advance()
        if keyword.value not in expected:
            raise create_missing_construct_keyword_error(intro, expected, keyword)
        return keyword

    def _consume_identifier(self, what: str) -> Token:
        previous = self._previous()
        if self._is_at_end():
            raise create_missing_identifier_error(what, previous, None)

        token = self._peek()
        if token.type != TokenType.IDENTIFIER:
            raise create_missing_identifier_error(what, previous, token)
        return self._advance()

    def _collect_until(self, word: str) -> List[Token]:
        tokens = []
        while not self._is_at_end() and not self._check_word(word):
            tokens.append(self._advance())
        return tokens

    @staticmethod
    def _intro_word(intro: Token) -> str:
        return intro.value.split(" ", 1)[0]

    @staticmethod
    def _phrase_tail(intro: Token) -> str:
        """Words of an introducing phrase after the construct keyword (`until`, `through`)."""
        if not intro.is_phrase:
            return ""
        parts = intro.value.split(" ", 1)
        return parts[1] if len(parts) > 1 else ""

    def _span_from(self, start: Token) -> SourceSpan:
        return SourceSpan(start.location, self._previous().location)

    def _check_word(self, word: str) -> bool:
        if self._is_at_end():
            return False
        return self._peek().is_word(word)

    def _advance(self) -> Token:
        """Consume and return current token."""
        if not self._is_at_end():
            self.current += 1
        return self._previous()

    def _is_at_end(self) -> bool:
        return self.current >= len(self.tokens)

    def _peek(self) -> Optional[Token]:
        """Return current token without consuming, None past the end."""
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        return None

    def _previous(self) -> Token:
        if self.current > 0:
            return self.tokens[self.current - 1]
        return self.tokens[0]


def parse(tokens: List[Token], strict_blocks: bool = False) -> Program:
    """Convenience function to parse a token list."""
    return Parser(tokens, strict_blocks=strict_blocks).parse()


def parse_string(source: str, filename: str = "<string>", strict_blocks: bool = False) -> Program:
    """
    Convenience function to parse a source string.

    Raises:
        ParseError: If parsing fails
    """
    from ..lexer import tokenize

    return parse(tokenize(source, filename), strict_blocks=strict_blocks)
