"""
TINY Language Parser

Parses TINY source tokens into an immutable abstract syntax tree (AST).

This module implements a recursive-descent parser with one procedure per grammar
nonterminal. All three procedures share one `Scanner`, a forward-only cursor, and
decide between alternatives with exactly one token of lookahead. Nothing is ever
backtracked.

Grammar
-------
    program    := statement*
    statement  := "print" expression ";"
                | IDENT "=" expression ";"
    expression := "(" expression ")"
                | "(" expression "+" expression ")"
                | INT
                | "input"
                | IDENT

Addition is only reachable inside parentheses, so no precedence table is needed.

Keywords
--------
`print` and `input` are not lexically distinct from identifiers. At each decision
point the fixed keywords are tried, in order, before the generic identifier
pattern: `print` in `parse_statement`, `EXPRESSION_KEYWORDS` in
`parse_expression`.

Entry Points
------------
- `parse_source(text)`: Parse a whole program from source text.
- `Parser(scanner).parse()`: Parse a whole program from a token source.
- `Parser.parse_statement()` / `Parser.parse_expression()`: Parse one construct.

Raises
------
TinySyntaxError
    At the first token that fits no alternative. The offending token is consumed
    and its text embedded in the message.
UnexpectedEndOfInput
    When the source runs out where a token was still required.
"""

from __future__ import annotations

import re

from tiny.tiny_ast import Assign, Expression, Input, Num, Plus, Print, Program, Statement, Var
from tiny.tiny_errors import TinySyntaxError, UnexpectedEndOfInput
from tiny.tiny_scanner import CharacterStream, Scanner

IDENTIFIER = re.compile(r"[a-zA-Z]+")

LPAREN = "("
RPAREN = ")"
PLUS = "+"
ASSIGN = "="
SEMI = ";"

PRINT = "print"
INPUT = "input"

# Fixed expression keywords, tried in order before IDENTIFIER.
EXPRESSION_KEYWORDS: dict[str, type[Input]] = {INPUT: Input}


class Parser:
    """
    TINY Parser Class

    Transforms the tokens of a `Scanner` into a `Program`.

    Attributes
    ----------
    source : Scanner
        The shared token cursor. It is advanced in place and never copied.

    Methods
    -------
    parse() -> Program
        Parse statements until the source is exhausted.
    parse_statement() -> Statement
        Parse one statement including its terminating `;`.
    parse_expression() -> Expression
        Parse one expression.

    Raises
    ------
    TinySyntaxError
        When a required token shape is absent.
    UnexpectedEndOfInput
        When the source ends early.
    """

    def __init__(self, source: Scanner) -> None:
        self.source = source

    def error(self, expected: str) -> TinySyntaxError:
        """Build the error for the current position.

        Consumes whatever token is present so its text can be reported. When no
        token remains, returns `UnexpectedEndOfInput` instead.
        """
        if not self.source.has_next():
            return UnexpectedEndOfInput(expected)
        tok = self.source.next_token()
        return TinySyntaxError(token=tok.text, line=tok.line, col=tok.col)

    def expect(self, text: str) -> None:
        if not self.source.has_next(text):
            raise self.error(repr(text))
        self.source.next(text)

    def parse(self) -> Program:
        """Parse a full TINY program. An empty source yields an empty Program."""
        statements: list[Statement] = []
        while self.source.has_next():
            statements.append(self.parse_statement())
        return Program(tuple(statements))

    def parse_statement(self) -> Statement:
        """Parse a `print` or assignment statement and its trailing `;`."""
        result: Statement
        if self.source.has_next(PRINT):
            tok = self.source.next_token(PRINT)
            result = Print(self.parse_expression(), line=tok.line, col=tok.col)
        elif self.source.has_next(IDENTIFIER):
            tok = self.source.next_token(IDENTIFIER)
            self.expect(ASSIGN)
            result = Assign(tok.text, self.parse_expression(), line=tok.line, col=tok.col)
        else:
            raise self.error("statement")

        self.expect(SEMI)
        return result

    def parse_expression(self) -> Expression:
        """Parse one expression, leaving the cursor just after it."""
        if self.source.has_next(LPAREN):
            return self.parse_parenthesized()

        if self.source.has_next_int():
            tok = self.source.peek()
            assert tok is not None  # for mypy
            return Num(self.source.next_int(), line=tok.line, col=tok.col)

        for keyword, node in EXPRESSION_KEYWORDS.items():
            if self.source.has_next(keyword):
                tok = self.source.next_token(keyword)
                return node(line=tok.line, col=tok.col)

        if self.source.has_next(IDENTIFIER):
            tok = self.source.next_token(IDENTIFIER)
            return Var(tok.text, line=tok.line, col=tok.col)

        raise self.error("expression")

    def parse_parenthesized(self) -> Expression:
        """Parse `( e )`, which is just `e`, or `( e + e )`, which is a Plus node."""
        open_tok = self.source.next_token(LPAREN)
        subexpr = self.parse_expression()

        result: Expression
        if self.source.has_next(RPAREN):
            result = subexpr
        elif self.source.has_next(PLUS):
            self.source.next(PLUS)
            result = Plus(subexpr, self.parse_expression(), line=open_tok.line, col=open_tok.col)
        else:
            raise self.error("')' or '+'")

        self.expect(RPAREN)
        return result


def parse_source(text: str) -> Program:
    """Parse TINY source text into a Program."""
    return Parser(Scanner(CharacterStream(text))).parse()


__all__ = [
    "EXPRESSION_KEYWORDS",
    "IDENTIFIER",
    "Parser",
    "parse_source",
]
