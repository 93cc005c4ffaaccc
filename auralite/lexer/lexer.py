"""
Auralite Lexer - turns source text into a flat list of tokens

Works line by line and word by word. Multi-word phrases are tried first
(longest window wins) so that "give back" is one token and not the keyword
"give" followed by an identifier. Anything that is not a phrase, keyword,
operator, symbol or literal falls through to an identifier - there's no such
thing as an invalid token in Auralite.

xwest
"""

import re
from typing import List, Optional, Tuple

from .tokens import (
    Token, TokenType, SourceLocation, KEYWORDS, OPERATORS, SYMBOLS, PHRASES,
    MAX_PHRASE_WORDS, COMMENT_MARKER, QUOTE_CHARS, SEPARATOR_CHARS, NUMBER_PATTERN
)
from .errors import LexerWarning, create_unterminated_string_warning


# A word is a quoted string (spaces allowed, closing quote optional), one of
# the separator characters, or a run of anything else up to whitespace.
_SEPARATORS = re.escape(SEPARATOR_CHARS)
WORD_PATTERN = re.compile(
    r'"(?:[^"\\]|\\.)*"?'
    r"|'(?:[^'\\]|\\.)*'?"
    rf'|[{_SEPARATORS}]'
    rf'|[^\s{_SEPARATORS}]+'
)

_CLOSED_STRING_PATTERNS = {
    '"': re.compile(r'"(?:[^"\\]|\\.)*"'),
    "'": re.compile(r"'(?:[^'\\]|\\.)*'"),
}


class Lexer:
    """
    Auralite lexical analyzer.

    One instance per source string; `tokenize` can be called again and starts
    from scratch each time.
    """

    def __init__(self, source: str, filename: str = "<string>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Auralite source text
            filename: Name of source file for diagnostics
        """
        self.source = source
        self.filename = filename
        self.tokens: List[Token] = []
        self.warnings: List[LexerWarning] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source.

        Returns:
            Tokens in source order. There is no EOF token.
        """
        self.tokens = []
        self.warnings = []

        for line_number, raw_line in enumerate(self.source.splitlines(), start=1):
            line = raw_line.strip()
            if not line or line.startswith(COMMENT_MARKER):
                continue

            self.tokens.extend(self._tokenize_line(line, line_number))

        return self.tokens

    def _split_words(self, line: str) -> List[Tuple[str, bool]]:
        """Split a line into (word, joined-to-previous) pairs."""
        words = []
        previous_end = None

        for match in WORD_PATTERN.finditer(line):
            words.append((match.group(0), match.start() == previous_end))
            previous_end = match.end()

        return words

    def _tokenize_line(self, line: str, line_number: int) -> List[Token]:
        tokens = []
        words = self._split_words(line)

        i = 0
        while i < len(words):
            location = SourceLocation(self.filename, line_number, i)
            joined = words[i][1]

            # Phrases first, so a four word idiom beats anything shorter
            match = self._find_phrase(words, i)
            if match:
                phrase, width = match
                lexeme = ' '.join(word for word, _ in words[i:i + width])
                tokens.append(Token(TokenType.PHRASE, lexeme, phrase, location, joined))
                i += width
                continue

            tokens.append(self._classify_word(words[i][0], location, joined))
            i += 1

        return tokens

    def _find_phrase(self, words: List[Tuple[str, bool]], start: int) -> Optional[Tuple[str, int]]:
        """Return the longest phrase starting at `start` and its width in words."""
        for length in range(MAX_PHRASE_WORDS, 0, -1):
            if start + length > len(words):
                continue
            phrase = ' '.join(word for word, _ in words[start:start + length]).lower()
            if phrase in PHRASES:
                return phrase, length
        return None

    def _classify_word(self, word: str, location: SourceLocation, joined: bool) -> Token:
        """Classify a single word: keyword, operator, symbol, string, number, identifier."""
        lowered = word.lower()
        if lowered in KEYWORDS:
            return Token(TokenType.KEYWORD, word, lowered, location, joined)

        if word in OPERATORS:
            return Token(TokenType.OPERATOR, word, word, location, joined)

        if word in SYMBOLS:
            return Token(TokenType.SYMBOL, word, word, location, joined)

        if word.startswith(QUOTE_CHARS):
            if not _CLOSED_STRING_PATTERNS[word[0]].fullmatch(word):
                self.warnings.append(create_unterminated_string_warning(word, location))
            return Token(TokenType.STRING, word, word, location, joined)

        if NUMBER_PATTERN.match(word):
            value = float(word) if '.' in word else int(word)
            return Token(TokenType.NUMBER, word, value, location, joined)

        return Token(TokenType.IDENTIFIER, word, word, location, joined)

    def has_warnings(self) -> bool:
        """Check if the lexer recorded any warnings."""
        return len(self.warnings) > 0


def tokenize(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Auralite source text
        filename: Filename for diagnostics

    Returns:
        List of tokens
    """
    return Lexer(source, filename).tokenize()


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize(source, filepath)
