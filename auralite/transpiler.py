"""
Auralite -> JavaScript transpiler entry points.

`transpile(source)` is all a caller needs: source text in, JavaScript text
out, or a ParseError. The Transpiler class exposes the individual stages for
tools that want the tokens or the tree.

Author: xwest
"""

import logging
from typing import List, Optional

from .config import TranspilerOptions, DEFAULT_OPTIONS
from .lexer import Lexer, Token
from .parser import Parser, Program, ParseError
from .codegen import CodeGenerator

logger = logging.getLogger(__name__)


class Transpiler:
    """
    Runs the lexer, parser and code generator in sequence.

    Holds only options; every call builds fresh stage objects, so one
    instance can be shared between threads.
    """

    def __init__(self, options: Optional[TranspilerOptions] = None):
        self.options = options or DEFAULT_OPTIONS

    def tokenize(self, source: str, filename: str = "<string>") -> List[Token]:
        lexer = Lexer(source, filename)
        tokens = lexer.tokenize()
        for warning in lexer.warnings:
            logger.warning("%s", warning.diagnostic.message)
        return tokens

    def parse(self, tokens: List[Token]) -> Program:
        return Parser(tokens, strict_blocks=self.options.strict_blocks).parse()

    def generate(self, program: Program) -> str:
        return CodeGenerator(self.options).generate(program)

    def transpile(self, source: str, filename: str = "<string>") -> str:
        """
        Transpile Auralite source into JavaScript.

        Raises:
            ParseError: If the source is structurally invalid. No partial
                output is produced.
        """
        logger.info("Transpiling Auralite source %s", filename)

        try:
            tokens = self.tokenize(source, filename)
            logger.debug("Lexed %d tokens", len(tokens))

            program = self.parse(tokens)
            logger.debug("Parsed %d top-level statements", len(program.body))

            output = self.generate(program)
        except ParseError as e:
            logger.error("Auralite transpilation failed: %s", e.message)
            raise

        logger.info("Auralite transpilation complete (%d characters)", len(output))
        return output


def transpile(source: str, options: Optional[TranspilerOptions] = None,
              filename: str = "<string>") -> str:
    """
    Transpile an Auralite source string to JavaScript.

    Args:
        source: Full Auralite source text
        options: Generation options (defaults to TranspilerOptions())
        filename: Name used in diagnostics

    Returns:
        JavaScript text

    Raises:
        ParseError: If parsing fails
    """
    return Transpiler(options).transpile(source, filename)


def transpile_file(filepath: str, options: Optional[TranspilerOptions] = None) -> str:
    """
    Convenience function to transpile a source file.

    Raises:
        ParseError: If parsing fails
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return transpile(source, options, filepath)
