"""
Defines the abstract syntax tree (AST) node structure for the TINY language.

Classes:
    Program:
        The root node, an ordered tuple of statements in execution order.

    Print, Assign:
        The two statement forms. Together they make up the closed `Statement` union.

    Num, Input, Var, Plus:
        The four expression forms. Together they make up the closed `Expression` union.

    ASTDict:
        TypedDict representation for serializing nodes to plain Python dictionaries,
        suitable for JSON output or debugging.

Every node is a frozen dataclass: it is built once by the parser and never mutated.
Each node class carries a fixed `kind` tag, which renderers use to dispatch to an
`emit_<kind>` method and which downstream consumers can match on. Source positions
(`line`, `col`) are recorded for diagnostics but take no part in equality, so a
parsed tree compares equal to the same tree built by hand.

Example:
    tree = Program((Assign("x", Plus(Num(1), Num(2))), Print(Var("x"))))
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterator, TypedDict, Union


class ASTDict(TypedDict, total=False):
    """
    TypedDict representation of a node used for serialization.

    Fields:
        kind (str): The node tag (e.g., "print", "assign", "plus").
        value (Any): The node payload: an int for `num`, a name for `var` and `assign`.
        line (int): Line number of the node's first token.
        col (int): Column number of the node's first token.
        children (List[ASTDict]): Sub-nodes, in source order.
    """

    kind: str
    value: Any
    line: int
    col: int
    children: list["ASTDict"]


def _position() -> Any:
    return field(default=0, compare=False, repr=False)


@dataclass(frozen=True)
class Num:
    """An integer literal."""

    kind: ClassVar[str] = "num"

    value: int
    line: int = _position()
    col: int = _position()

    def to_dict(self) -> ASTDict:
        return {"kind": self.kind, "value": self.value, "line": self.line, "col": self.col}


@dataclass(frozen=True)
class Input:
    """Reads one value from the program's external input at run time."""

    kind: ClassVar[str] = "input"

    line: int = _position()
    col: int = _position()

    def to_dict(self) -> ASTDict:
        return {"kind": self.kind, "line": self.line, "col": self.col}


@dataclass(frozen=True)
class Var:
    """A reference to a variable by name."""

    kind: ClassVar[str] = "var"

    name: str
    line: int = _position()
    col: int = _position()

    def to_dict(self) -> ASTDict:
        return {"kind": self.kind, "value": self.name, "line": self.line, "col": self.col}


@dataclass(frozen=True)
class Plus:
    """
    The sum of two sub-expressions.

    Only reachable through `( left + right )` in source text. Operand order is
    the textual order.
    """

    kind: ClassVar[str] = "plus"

    left: "Expression"
    right: "Expression"
    line: int = _position()
    col: int = _position()

    def to_dict(self) -> ASTDict:
        return {
            "kind": self.kind,
            "line": self.line,
            "col": self.col,
            "children": [self.left.to_dict(), self.right.to_dict()],
        }


Expression = Union[Num, Input, Var, Plus]
"""Closed set of expression node types."""


@dataclass(frozen=True)
class Print:
    """`print <expr> ;`"""

    kind: ClassVar[str] = "print"

    expr: Expression
    line: int = _position()
    col: int = _position()

    def to_dict(self) -> ASTDict:
        return {
            "kind": self.kind,
            "line": self.line,
            "col": self.col,
            "children": [self.expr.to_dict()],
        }


@dataclass(frozen=True)
class Assign:
    """`<name> = <expr> ;`"""

    kind: ClassVar[str] = "assign"

    name: str
    expr: Expression
    line: int = _position()
    col: int = _position()

    def to_dict(self) -> ASTDict:
        return {
            "kind": self.kind,
            "value": self.name,
            "line": self.line,
            "col": self.col,
            "children": [self.expr.to_dict()],
        }


Statement = Union[Print, Assign]
"""Closed set of statement node types."""


@dataclass(frozen=True)
class Program:
    """
    A whole TINY program.

    Args:
        statements (tuple[Statement, ...]): Statements in execution order. Any
            iterable is accepted and frozen into a tuple.
    """

    kind: ClassVar[str] = "program"

    statements: tuple[Statement, ...] = ()

    def __post_init__(self) -> None:
        # frozen: bypass __setattr__ to normalise lists into tuples
        object.__setattr__(self, "statements", tuple(self.statements))

    def __len__(self) -> int:
        return len(self.statements)

    def __iter__(self) -> Iterator["Statement"]:
        return iter(self.statements)

    def to_dict(self) -> ASTDict:
        return {
            "kind": self.kind,
            "children": [s.to_dict() for s in self.statements],
        }


EXPRESSION_TYPES: tuple[type, ...] = (Num, Input, Var, Plus)
STATEMENT_TYPES: tuple[type, ...] = (Print, Assign)
NODE_TYPES: tuple[type, ...] = (Program,) + STATEMENT_TYPES + EXPRESSION_TYPES

Node = Union[Program, Statement, Expression]


__all__ = [
    "ASTDict",
    "Assign",
    "EXPRESSION_TYPES",
    "Expression",
    "Input",
    "NODE_TYPES",
    "Node",
    "Num",
    "Plus",
    "Print",
    "Program",
    "STATEMENT_TYPES",
    "Statement",
    "Var",
]
