"""
JavaScript code generator for Auralite.

Walks the syntax tree and emits JavaScript text. Block constructs become
braced blocks; expressions go through the phrase substitution rules.

Author: xwest
"""

from typing import Dict, Callable, List, Optional

from ..config import TranspilerOptions, DEFAULT_OPTIONS
from ..parser.ast_nodes import (
    ASTNode, ASTNodeType, ASTVisitor, Program, Statement,
    FunctionDecl, ClassDecl, Conditional, Loop, Expression
)
from .errors import CodeGenerationError
from .rewrite_rules import expression_rules, apply_rules, rewrite_loop_condition


class CodeGenerator(ASTVisitor):
    """
    Generates JavaScript from an Auralite syntax tree.

    Indentation is cumulative by default: a block nested two levels deep is
    indented twice. With `cumulative_indent=False` only the first line of a
    nested block is indented, matching the output of earlier Auralite tools.
    """

    def __init__(self, options: Optional[TranspilerOptions] = None):
        self.options = options or DEFAULT_OPTIONS
        self.rules = expression_rules(self.options.loop_variable)

        self.emitters: Dict[ASTNodeType, Callable[[ASTNode], str]] = {
            ASTNodeType.FUNCTION_DECL: self._generate_function,
            ASTNodeType.CLASS_DECL: self._generate_class,
            ASTNodeType.CONDITIONAL: self._generate_conditional,
            ASTNodeType.LOOP: self._generate_loop,
            ASTNodeType.EXPRESSION: self._generate_expression,
        }

    def generate(self, program: Program) -> str:
        """
        Generate JavaScript for a whole program.

        Returns:
            One rendered block per top-level statement, each followed by a newline
        """
        return "".join(self.generate_node(node) + "\n" for node in program.body)

    def generate_node(self, node: ASTNode) -> str:
        return node.accept(self)

    def visit(self, node: ASTNode) -> str:
        emitter = self.emitters.get(getattr(node, "node_type", None))
        if emitter is None:
            raise CodeGenerationError(f"No emitter for node {node!r}", node)
        return emitter(node)

    def _generate_function(self, node: FunctionDecl, as_member: bool = False) -> str:
        params = ", ".join(node.parameters)
        if as_member:
            header = f"{node.name}({params})"
        else:
            header = f"function {node.name}({params})"
        return self._emit_block(header, node.body)

    def _generate_class(self, node: ClassDecl) -> str:
        return self._emit_block(f"class {node.name}", node.methods, members=True)

    def _generate_conditional(self, node: Conditional) -> str:
        if node.negate:
            header = f"if (!({node.condition_text}))"
        else:
            header = f"if ({node.condition_text})"
        return self._emit_block(header, node.body)

    def _generate_loop(self, node: Loop) -> str:
        condition = rewrite_loop_condition(node.condition_text, node.repeat_form)
        if node.repeat_form:
            header = f"while ({condition})"
        else:
            header = f"for (let {self.options.loop_variable} of {condition})"
        return self._emit_block(header, node.body)

    def _generate_expression(self, node: Expression) -> str:
        return apply_rules(node.text, self.rules) + self.options.statement_terminator

    def _generate_member(self, node: Statement) -> str:
        """Functions directly inside a class are emitted as methods."""
        if node.node_type == ASTNodeType.FUNCTION_DECL:
            return self._generate_function(node, as_member=True)
        return self.generate_node(node)

    def _emit_block(self, header: str, statements: List[Statement], members: bool = False) -> str:
        lines = [f"{header} {{"]
        for statement in statements:
            rendered = self._generate_member(statement) if members else self.generate_node(statement)
            lines.append(self._indent(rendered))
        lines.append("}")
        return "\n".join(lines)

    def _indent(self, text: str) -> str:
        indent = self.options.indent
        if not self.options.cumulative_indent:
            return indent + text
        return "\n".join(indent + line if line else line for line in text.split("\n"))


def generate(program: Program, options: Optional[TranspilerOptions] = None) -> str:
    """Convenience function to generate JavaScript for a program."""
    return CodeGenerator(options).generate(program)
