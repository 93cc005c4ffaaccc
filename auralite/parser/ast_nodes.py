"""
Syntax tree node definitions for Auralite.

The dialect only has five statement shapes, so the tree is small: function
and class declarations, conditionals, loops and bare expressions. Conditions
and expressions are kept as raw text; the code generator does the phrase
substitution on them.

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Any
from dataclasses import dataclass
from enum import Enum

from ..lexer.tokens import SourceLocation


class ASTNodeType(Enum):
    """Enumeration of all syntax tree node types."""

    PROGRAM = "Program"
    FUNCTION_DECL = "FunctionDecl"
    CLASS_DECL = "ClassDecl"
    CONDITIONAL = "Conditional"
    LOOP = "Loop"
    EXPRESSION = "Expression"


@dataclass
class SourceSpan:
    """Represents a span of source code (start and end locations)."""
    start: SourceLocation
    end: SourceLocation

    def __str__(self) -> str:
        if self.start.filename == self.end.filename:
            return f"{self.start.filename}:{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"
        return f"{self.start}-{self.end}"


EMPTY_SPAN = SourceSpan(SourceLocation("<empty>", 1, 0), SourceLocation("<empty>", 1, 0))


class ASTVisitor(ABC):
    """Abstract visitor interface for traversing syntax tree nodes."""

    @abstractmethod
    def visit(self, node: 'ASTNode') -> Any:
        """Visit a generic node."""
        pass


class ASTNode(ABC):
    """Base class for all syntax tree nodes."""

    def __init__(self, node_type: ASTNodeType, span: SourceSpan):
        self.node_type = node_type
        self.span = span
        self.parent: Optional['ASTNode'] = None

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes."""
        pass

    def set_parent(self, parent: 'ASTNode'):
        """Set the parent node."""
        self.parent = parent

    def _adopt(self, nodes: List['ASTNode']) -> List['ASTNode']:
        for node in nodes:
            node.set_parent(self)
        return nodes

    def __str__(self) -> str:
        return f"{self.node_type.value}@{self.span}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(span={self.span})"


# ============================================================================
# Root
# ============================================================================

class Program(ASTNode):
    """Root node: top-level statements in source order."""
    body: List['Statement']

    def __init__(self, body: List['Statement'], span: SourceSpan = EMPTY_SPAN):
        super().__init__(ASTNodeType.PROGRAM, span)
        self.body = self._adopt(body)

    def children(self) -> List[ASTNode]:
        return self.body

    def __len__(self) -> int:
        return len(self.body)


# ============================================================================
# Statements
# ============================================================================

class Statement(ASTNode):
    """Base class for statements."""
    pass


class FunctionDecl(Statement):
    """`create function name(a, b) ... end`"""
    name: str
    parameters: List[str]
    body: List[Statement]
    is_method: bool = False

    def __init__(self, name: str, parameters: List[str], body: List[Statement],
                 span: SourceSpan = EMPTY_SPAN, is_method: bool = False):
        super().__init__(ASTNodeType.FUNCTION_DECL, span)
        self.name = name
        self.parameters = list(parameters)
        self.body = self._adopt(body)
        self.is_method = is_method

    def children(self) -> List[ASTNode]:
        return self.body

    def __repr__(self) -> str:
        return f"FunctionDecl({self.name!r}, {self.parameters!r}, body={self.body!r})"


class ClassDecl(Statement):
    """`build class Name ... end`"""
    name: str
    methods: List[Statement]

    def __init__(self, name: str, methods: List[Statement], span: SourceSpan = EMPTY_SPAN):
        super().__init__(ASTNodeType.CLASS_DECL, span)
        self.name = name
        self.methods = self._adopt(methods)

    def children(self) -> List[ASTNode]:
        return self.methods

    def __repr__(self) -> str:
        return f"ClassDecl({self.name!r}, methods={self.methods!r})"


class Conditional(Statement):
    """`when <condition> then ... end`, or `unless` for the negated form."""
    condition_text: str
    body: List[Statement]
    negate: bool = False

    def __init__(self, condition_text: str, body: List[Statement],
                 negate: bool = False, span: SourceSpan = EMPTY_SPAN):
        super().__init__(ASTNodeType.CONDITIONAL, span)
        self.condition_text = condition_text
        self.body = self._adopt(body)
        self.negate = negate

    def children(self) -> List[ASTNode]:
        return self.body

    def __repr__(self) -> str:
        return f"Conditional({self.condition_text!r}, negate={self.negate}, body={self.body!r})"


class Loop(Statement):
    """
    `loop <items> do ... end` iterates over a collection;
    `repeat <condition> do ... end` is the while form.
    """
    condition_text: str
    body: List[Statement]
    repeat_form: bool = False

    def __init__(self, condition_text: str, body: List[Statement],
                 repeat_form: bool = False, span: SourceSpan = EMPTY_SPAN):
        super().__init__(ASTNodeType.LOOP, span)
        self.condition_text = condition_text
        self.body = self._adopt(body)
        self.repeat_form = repeat_form

    def children(self) -> List[ASTNode]:
        return self.body

    def __repr__(self) -> str:
        return f"Loop({self.condition_text!r}, repeat_form={self.repeat_form}, body={self.body!r})"


class Expression(Statement):
    """A bare statement kept as raw text."""
    text: str

    def __init__(self, text: str, span: SourceSpan = EMPTY_SPAN):
        super().__init__(ASTNodeType.EXPRESSION, span)
        self.text = text

    def children(self) -> List[ASTNode]:
        return []

    def __repr__(self) -> str:
        return f"Expression({self.text!r})"
