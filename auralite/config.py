"""
Transpiler options.

All knobs that change the shape of the generated code live here so the
lexer/parser/generator stay free of module-level switches.
"""

import re
from dataclasses import dataclass, fields
from typing import Any, Dict


_IDENTIFIER_PATTERN = re.compile(r'^[A-Za-z_$][A-Za-z0-9_$]*$')


@dataclass(frozen=True)
class TranspilerOptions:
    """Options for a transpile run"""
    indent: str = "  "
    cumulative_indent: bool = True      # False keeps the old one-level-only indent
    loop_variable: str = "item"         # iteration variable for `loop ... do`
    strict_blocks: bool = False         # raise on a block missing its `end`
    statement_terminator: str = ";"

    def __post_init__(self):
        if self.indent.strip():
            raise ValueError(f"indent must be whitespace, got {self.indent!r}")
        if not _IDENTIFIER_PATTERN.match(self.loop_variable):
            raise ValueError(f"loop_variable must be a valid identifier, got {self.loop_variable!r}")

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> 'TranspilerOptions':
        """Build options from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ValueError(f"Unknown transpiler option(s): {', '.join(unknown)}")
        return cls(**values)


DEFAULT_OPTIONS = TranspilerOptions()
