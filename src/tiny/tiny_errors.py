"""
Error kinds raised while parsing TINY source.

Classes:
    TinySyntaxError:
        A malformed construct. Carries the text and position of the token that
        was found where something else was required.
    UnexpectedEndOfInput:
        The token source ran dry at a point where a token was still required.

Both derive from the builtin `SyntaxError`, so callers that already handle
`SyntaxError` keep working. The first error aborts the parse; nothing in the
parser catches these.
"""


class TinySyntaxError(SyntaxError):
    """Raised at the first token that fits no grammar alternative.

    Attributes:
        token (str | None): Text of the offending token.
        line (int): 1-based line of the token (0 when unknown).
        col (int): 1-based column of the token (0 when unknown).
    """

    def __init__(
        self,
        message: str | None = None,
        token: str | None = None,
        line: int = 0,
        col: int = 0,
    ) -> None:
        self.token = token
        self.line = line
        self.col = col
        if message is None:
            message = f"at symbol {token!r}"
            if line:
                message += f" (line {line}, col {col})"
        super().__init__(message)


class UnexpectedEndOfInput(TinySyntaxError):
    """Raised when a token is required but the source is exhausted."""

    def __init__(self, expected: str | None = None) -> None:
        self.expected = expected
        message = "Unexpected end of input"
        if expected:
            message += f", expected {expected}"
        super().__init__(message)


__all__ = ["TinySyntaxError", "UnexpectedEndOfInput"]
