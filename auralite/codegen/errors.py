"""
Errors raised by the code generator.

Generation cannot fail on a tree the parser produced; a CodeGenerationError
means a node the generator has no emitter for, i.e. a bug.
"""

from typing import Any


class CodeGenerationError(Exception):
    """Internal error: the generator met a node it cannot emit."""

    def __init__(self, message: str, node: Any = None):
        super().__init__(message)
        self.node = node
