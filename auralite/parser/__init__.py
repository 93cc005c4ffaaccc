"""
Auralite Parser Package

Recursive descent parser producing a small syntax tree of function and class
declarations, conditionals, loops and raw-text expressions. Each construct
owns its own terminator keyword.

Author: xwest
"""

from .ast_nodes import *
from .parser import Parser, parse, parse_string, render_tokens
from .errors import ParseError, ParseErrorKind

__all__ = [
    # Core parser
    "Parser", "parse", "parse_string", "render_tokens",

    # Syntax tree
    "ASTNode", "ASTNodeType", "ASTVisitor", "SourceSpan",
    "Program", "Statement",
    "FunctionDecl", "ClassDecl", "Conditional", "Loop", "Expression",

    # Error handling
    "ParseError", "ParseErrorKind",
]
