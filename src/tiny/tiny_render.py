"""
Provides the `Renderer` class and emitter interface for turning TINY ASTs into text.

Classes and Features:
    - Emitter (Protocol): Interface for all output emitters. Requires `__init__` and `get_output`.
    - SourceEmitter: Canonical TINY source text.
    - JsonEmitter: The `to_dict()` form of the tree as JSON.
    - Renderer: Uses the emitter for the selected target ("tiny", "json") and dispatches
      each statement to the emitter's `emit_<kind>` method.

Example:
    >>> Renderer("tiny").render(parse_source("x=(1+2);"))
    'x = (1 + 2);'

Raises:
    ValueError: If the target is not supported.
    TypeError: If the input is not a Program of statement nodes.
    NotImplementedError: If the emitter lacks an `emit_*` method for a node kind.
"""

from typing import Protocol

from tiny.emitters.json_emitter import JsonEmitter
from tiny.emitters.source_emitter import SourceEmitter
from tiny.tiny_ast import STATEMENT_TYPES, Program, Statement


class Emitter(Protocol):  # pragma: no cover
    """Protocol for all TINY emitters.

    Methods:
        __init__(): Initializes the emitter.
        get_output(): Returns the complete emitted text as a string.
    """

    def __init__(self) -> None: ...  # pragma: no cover

    def get_output(self) -> str: ...  # pragma: no cover


EmitterType = type[Emitter]
"""Alias for a concrete Emitter class type."""

EMITTERS: dict[str, EmitterType] = {
    "tiny": SourceEmitter,
    "source": SourceEmitter,
    "json": JsonEmitter,
}


class Renderer:
    """Dispatches TINY statements to the emitter of the selected target.

    Attributes:
        emitter (Emitter): The emitter instance for the output target.
    """

    def __init__(self, target: str) -> None:
        """
        Args:
            target: The desired output form ("tiny", "source" or "json").

        Raises:
            ValueError: If the target is not supported.
        """
        target = target.lower()
        if target not in EMITTERS:
            raise ValueError(f"Unknown render target: {target!r}")
        self.emitter: Emitter = EMITTERS[target]()

    def render(self, program: Program) -> str:
        """Renders a whole program.

        Raises:
            TypeError: If `program` is not a Program, or holds a non-statement.
        """
        if not isinstance(program, Program):
            raise TypeError(f"Expected a Program, got {type(program).__name__}")
        if not all(isinstance(stmt, STATEMENT_TYPES) for stmt in program.statements):
            raise TypeError("All items in a Program must be statement nodes.")
        for stmt in program.statements:
            self._visit(stmt)
        return self.emitter.get_output()

    def _visit(self, node: Statement) -> None:
        method_name = f"emit_{node.kind}"
        if hasattr(self.emitter, method_name):
            getattr(self.emitter, method_name)(node)
        else:
            raise NotImplementedError(
                f"No emitter method for node kind '{node.kind}' "
                f"(line {node.line}, col {node.col})"
            )


def render(program: Program, target: str = "tiny") -> str:
    """Render `program` with a fresh Renderer for `target`."""
    return Renderer(target).render(program)


__all__ = ["EMITTERS", "Emitter", "Renderer", "render"]
