"""
Serialises TINY AST nodes to JSON.

Each statement is converted with its `to_dict()` form; `get_output()` wraps them
in a `program` object, matching `Program.to_dict()`.
"""

import json

from tiny.tiny_ast import ASTDict, Assign, Print


class JsonEmitter:
    """Collects statement dictionaries and dumps them as one JSON document.

    Attributes:
        statements (list[ASTDict]): Serialised statements in source order.
        indent (int | None): Indentation passed to `json.dumps`.
    """

    def __init__(self, indent: int | None = 2) -> None:
        self.statements: list[ASTDict] = []
        self.indent = indent

    def get_output(self) -> str:
        return json.dumps({"kind": "program", "children": self.statements}, indent=self.indent)

    def emit_print(self, node: Print) -> None:
        self.statements.append(node.to_dict())

    def emit_assign(self, node: Assign) -> None:
        self.statements.append(node.to_dict())
