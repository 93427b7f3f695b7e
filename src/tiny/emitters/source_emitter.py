"""
Renders TINY AST nodes back into canonical TINY source text.

This module defines the `SourceEmitter` class, used by the `Renderer` to print a
parsed program in a normalised layout:

    - one statement per line, terminated by `;`
    - redundant parentheses dropped (they never reach the AST)
    - every `Plus` written as `(left + right)`

Parsing the emitted text yields a tree equal to the one that was emitted.

Raises:
    - `NotImplementedError`: If an expression node has no `emit_expr_<kind>` method.
    - `ValueError`: If a name has no source spelling: an assignment to `print`, or a
      variable named `input` (those words would parse as keywords).
"""

from tiny.tiny_ast import Assign, Expression, Input, Num, Plus, Print, Var
from tiny.tiny_parser import EXPRESSION_KEYWORDS, PRINT


class SourceEmitter:
    """Emits TINY source code from TINY AST nodes.

    Attributes:
        lines (list[str]): Accumulated lines of emitted source.
    """

    def __init__(self) -> None:
        self.lines: list[str] = []

    def get_output(self) -> str:
        return "\n".join(self.lines)

    def emit_print(self, node: Print) -> None:
        self.lines.append(f"print {self.emit_expr(node.expr)};")

    def emit_assign(self, node: Assign) -> None:
        if node.name == PRINT:
            raise ValueError(f"Cannot assign to {node.name!r}: it reads as a print statement")
        self.lines.append(f"{node.name} = {self.emit_expr(node.expr)};")

    def emit_expr(self, node: Expression) -> str:
        """
        Emits an expression by dispatching on its `kind`.

        Parameters
        ----------
        node : Expression
            Any expression node.

        Returns
        -------
        str
            The expression as TINY source.
        """
        method = getattr(self, f"emit_expr_{node.kind}", None)
        if method is None:
            raise NotImplementedError(f"No expression emitter for node kind '{node.kind}'")
        result: str = method(node)
        return result

    def emit_expr_num(self, node: Num) -> str:
        return str(node.value)

    def emit_expr_input(self, node: Input) -> str:
        return "input"

    def emit_expr_var(self, node: Var) -> str:
        if node.name in EXPRESSION_KEYWORDS:
            raise ValueError(f"Variable {node.name!r} reads as a keyword")
        return node.name

    def emit_expr_plus(self, node: Plus) -> str:
        return f"({self.emit_expr(node.left)} + {self.emit_expr(node.right)})"
