"""
Auralite Lexer Package

Tokenizes Auralite source text. Recognizes multi-word phrases with a greedy
longest-match strategy before falling back to keyword, operator, symbol,
literal and identifier classification.

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation
from .lexer import Lexer, tokenize, tokenize_file
from .errors import Diagnostic, LexerWarning

__all__ = [
    "Lexer",
    "tokenize",
    "tokenize_file",
    "Token",
    "TokenType",
    "SourceLocation",
    "Diagnostic",
    "LexerWarning",
]
