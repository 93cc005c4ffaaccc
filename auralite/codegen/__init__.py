"""
Auralite Code Generation Package

Tree-walking JavaScript emitter plus the ordered phrase substitution rules
applied to raw expression text.

Author: xwest
"""

from .generator import CodeGenerator, generate
from .rewrite_rules import RewriteRule, expression_rules, apply_rules, rewrite_loop_condition
from .errors import CodeGenerationError

__all__ = [
    "CodeGenerator",
    "generate",
    "RewriteRule",
    "expression_rules",
    "apply_rules",
    "rewrite_loop_condition",
    "CodeGenerationError",
]
