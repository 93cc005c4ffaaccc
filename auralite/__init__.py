"""
Auralite Transpiler Package

Converts Auralite, a natural-language flavored scripting dialect, into
JavaScript.

Architecture:
    auralite/
    ├── lexer/           # Phrase-aware tokenization
    ├── parser/          # Block structure and syntax tree
    ├── codegen/         # JavaScript emission and phrase rewriting
    ├── config.py        # Transpiler options
    └── transpiler.py    # transpile() entry point

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "dev@neuralscript.org"
__license__ = "MIT"

from .config import TranspilerOptions
from .lexer import Lexer, Token, TokenType, tokenize
from .parser import Parser, Program, ParseError, ParseErrorKind, parse
from .codegen import CodeGenerator, CodeGenerationError, generate
from .transpiler import Transpiler, transpile, transpile_file

__all__ = [
    # Entry points
    "transpile",
    "transpile_file",
    "Transpiler",
    "TranspilerOptions",

    # Pipeline stages
    "Lexer", "Token", "TokenType", "tokenize",
    "Parser", "Program", "parse",
    "CodeGenerator", "generate",

    # Errors
    "ParseError", "ParseErrorKind", "CodeGenerationError",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
