"""
Token source for the TINY parser.

This module turns raw source text into tokens on demand. The scanner does not know
the grammar: the parser asks it whether the next token has a given shape and then
consumes tokens one at a time.

Classes:
    CharacterStream: Stream abstraction for reading characters with line/column tracking.
    Token: A single token's text and source location.
    Scanner: Forward-only token cursor with one token of non-consuming lookahead.

Tokenisation:
    - Whitespace separates tokens.
    - Each of `( ) + = ;` is always a token by itself, so `x=(1+2);` yields
      `x`, `=`, `(`, `1`, `+`, `2`, `)`, `;`.
    - Any other run of non-whitespace characters is one token. Its shape
      (keyword, identifier, integer) is decided only when the parser asks.

Integer literals:
    `-?[0-9]+` with a value in the signed 32-bit range. Longer digit runs are
    not integers, so the parser reports them as syntax errors.

Example:
    >>> scanner = Scanner("print 42;")
    >>> scanner.has_next("print")
    True
    >>> scanner.next()
    'print'
    >>> scanner.next_int()
    42
"""

import re
from typing import Any, Union

from tiny.tiny_errors import TinySyntaxError, UnexpectedEndOfInput

PUNCTUATION = frozenset("()+=;")
WHITESPACE = " \t\r\n\f\v"

INT_PATTERN = re.compile(r"-?[0-9]+")
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

TokenShape = Union[str, re.Pattern[str]]
"""A literal token text, or a compiled pattern the whole token must match."""


class CharacterStream:
    """
    Reads characters from a source string with line and column tracking.

    Attributes:
        source (str): The input source string.
        position (int): Current index in the source.
        line (int): Current line number (1-indexed).
        column (int): Current column number (1-indexed).
    """

    def __init__(self, source: str, position: int = 0, line: int = 1, column: int = 1):
        self.source = source
        self.position = position
        self.line = line
        self.column = column

    def next(self) -> str:
        """
        Consumes and returns the next character in the stream.

        Raises:
            EOFError: If reading past the end of the source.
        """
        if self.position >= len(self.source):
            raise EOFError(
                f"Attempted to read past end of source at position=<{self.position}>, line=<{self.line}>"
            )
        char = self.source[self.position]
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.position += 1
        return char

    def peek(self, offset: int = 0) -> str:
        """Returns the character at `offset` without advancing, or "" when out of bounds."""
        index = self.position + offset
        if index < 0 or index >= len(self.source):
            return ""
        return self.source[index]

    def end_of_file(self) -> bool:
        return self.position >= len(self.source)


class Token:
    """A single whitespace-delimited token.

    Attributes:
        text (str): The raw token text.
        line (int): The 1-based line number where the token starts.
        col (int): The 1-based column number where the token starts.
    """

    def __init__(self, text: str, line: int = 0, col: int = 0):
        self.text = text
        self.line = line
        self.col = col

    def __repr__(self) -> str:
        return f"Token({self.text!r}, {self.line}:{self.col})"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Token)
            and self.text == other.text
            and self.line == other.line
            and self.col == other.col
        )

    def __hash__(self) -> int:
        return hash((self.text, self.line, self.col))


def matches(text: str, shape: TokenShape) -> bool:
    """Returns True when `text` is exactly the literal `shape` or fully matches the pattern."""
    if isinstance(shape, str):
        return text == shape
    return shape.fullmatch(text) is not None


def is_int_literal(text: str) -> bool:
    """Integer-literal predicate: optional minus, digits, value within 32-bit range."""
    if not INT_PATTERN.fullmatch(text):
        return False
    return INT_MIN <= int(text) <= INT_MAX


class Scanner:
    """Forward-only token cursor over TINY source text.

    Tokens are read lazily from a `CharacterStream`; at most one token is buffered
    for lookahead. A single Scanner is shared by every parsing procedure and is
    never copied.

    Attributes:
        stream (CharacterStream): The character source being tokenised.
    """

    def __init__(self, source: Union[str, CharacterStream]) -> None:
        self.stream = source if isinstance(source, CharacterStream) else CharacterStream(source)
        self._lookahead: Token | None = None

    def _skip_whitespace(self) -> None:
        while not self.stream.end_of_file() and self.stream.peek() in WHITESPACE:
            self.stream.next()

    def _read_token(self) -> Token | None:
        self._skip_whitespace()
        if self.stream.end_of_file():
            return None

        line, col = self.stream.line, self.stream.column
        if self.stream.peek() in PUNCTUATION:
            return Token(self.stream.next(), line, col)

        text = ""
        while not self.stream.end_of_file():
            ch = self.stream.peek()
            if ch in WHITESPACE or ch in PUNCTUATION:
                break
            text += self.stream.next()
        return Token(text, line, col)

    def peek(self) -> Token | None:
        """Returns the next token without consuming it, or None at end of input."""
        if self._lookahead is None:
            self._lookahead = self._read_token()
        return self._lookahead

    def has_next(self, shape: TokenShape | None = None) -> bool:
        """Non-consuming test of the next token.

        Args:
            shape: A literal token text or compiled pattern. With no shape, tests
                whether any token remains at all.
        """
        tok = self.peek()
        if tok is None:
            return False
        return shape is None or matches(tok.text, shape)

    def has_next_int(self) -> bool:
        tok = self.peek()
        return tok is not None and is_int_literal(tok.text)

    def next_token(self, shape: TokenShape | None = None) -> Token:
        """Consumes and returns the next Token.

        Raises:
            UnexpectedEndOfInput: If no token remains.
            TinySyntaxError: If `shape` is given and the next token does not match it.
                The token is left unconsumed.
        """
        tok = self.peek()
        if tok is None:
            raise UnexpectedEndOfInput(None if shape is None else _describe(shape))
        if shape is not None and not matches(tok.text, shape):
            raise TinySyntaxError(token=tok.text, line=tok.line, col=tok.col)
        self._lookahead = None
        return tok

    def next(self, shape: TokenShape | None = None) -> str:
        """Consumes the next token and returns its text. See `next_token`."""
        return self.next_token(shape).text

    def next_int(self) -> int:
        """Consumes the next token as an integer literal.

        Raises:
            UnexpectedEndOfInput: If no token remains.
            TinySyntaxError: If the next token is not an integer literal.
        """
        tok = self.peek()
        if tok is None:
            raise UnexpectedEndOfInput("integer literal")
        if not is_int_literal(tok.text):
            raise TinySyntaxError(token=tok.text, line=tok.line, col=tok.col)
        self._lookahead = None
        return int(tok.text)

    def tokens(self) -> list[Token]:
        """Consumes and returns all remaining tokens."""
        out: list[Token] = []
        while self.has_next():
            out.append(self.next_token())
        return out


def _describe(shape: TokenShape) -> str:
    return repr(shape) if isinstance(shape, str) else f"token matching {shape.pattern!r}"


__all__ = [
    "CharacterStream",
    "INT_MAX",
    "INT_MIN",
    "Scanner",
    "Token",
    "TokenShape",
    "is_int_literal",
    "matches",
]
