from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tiny.emitters.source_emitter import SourceEmitter
from tiny.tiny_ast import Assign, Input, Num, Plus, Print, Program, Var
from tiny.tiny_errors import TinySyntaxError, UnexpectedEndOfInput
from tiny.tiny_parser import Parser, parse_source
from tiny.tiny_scanner import Scanner
from tiny_strategies import expressions, statements


def parse(source: str) -> Program:
    return parse_source(source)


def expr_text(expr: Any) -> str:
    return SourceEmitter().emit_expr(expr)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("print 1;", [Print(Num(1))]),
        ("x = 5;", [Assign("x", Num(5))]),
        ("x = (1 + 2);", [Assign("x", Plus(Num(1), Num(2)))]),
        ("print input;", [Print(Input())]),
        ("print (x);", [Print(Var("x"))]),
        ("", []),
        # Tokens need not be separated by whitespace around punctuation
        ("x=(1+2);print x;", [Assign("x", Plus(Num(1), Num(2))), Print(Var("x"))]),
        ("print -3;", [Print(Num(-3))]),
        # a leading + is the plus token, never part of the literal
        ("x = (1 +2);", [Assign("x", Plus(Num(1), Num(2)))]),
        ("print (((7)));", [Print(Num(7))]),
        (
            "print ((1 + 2) + (x + input));",
            [Print(Plus(Plus(Num(1), Num(2)), Plus(Var("x"), Input())))],
        ),
        ("total = (input + total);", [Assign("total", Plus(Input(), Var("total")))]),
        ("X = x;", [Assign("X", Var("x"))]),
    ],
)  # type: ignore[misc]
def test_parse_programs(source: str, expected: list[Any]) -> None:
    assert parse(source) == Program(tuple(expected))


def test_empty_source_is_valid() -> None:
    program = parse("   \n  ")
    assert program.statements == ()


def test_statements_keep_source_order() -> None:
    program = parse("a = 1;\nb = 2;\nprint a;\nprint b;")
    assert [type(s).__name__ for s in program] == ["Assign", "Assign", "Print", "Print"]
    assert [s.name for s in program.statements[:2]] == ["a", "b"]  # type: ignore[union-attr]


@pytest.mark.parametrize(
    "source,expected",
    [
        # input is tried before the identifier pattern
        ("print input;", Print(Input())),
        ("print inputs;", Print(Var("inputs"))),
        ("print Input;", Print(Var("Input"))),
        # only print is special at the start of a statement
        ("input = 3;", Assign("input", Num(3))),
        ("x = print;", Assign("x", Var("print"))),
    ],
)  # type: ignore[misc]
def test_keyword_precedence(source: str, expected: Any) -> None:
    assert parse(source).statements == (expected,)


def test_positions_recorded() -> None:
    stmt = parse("\nx = (1 + y);").statements[0]
    assert isinstance(stmt, Assign)
    assert (stmt.line, stmt.col) == (2, 1)
    plus = stmt.expr
    assert isinstance(plus, Plus)
    assert (plus.line, plus.col) == (2, 5)
    assert (plus.left.line, plus.left.col) == (2, 6)
    assert (plus.right.line, plus.right.col) == (2, 10)


@pytest.mark.parametrize(
    "source,token",
    [
        ("print 1 print 2;", "print"),
        ("x 5;", "5"),
        ("x = (1 2);", "2"),
        ("x = (1 + 2;", ";"),
        ("= 5;", "="),
        ("x = ;", ";"),
        ("x1 = 5;", "x1"),
        ("x_y = 1;", "x_y"),
        ("x = 99999999999;", "99999999999"),
        ("x = 1 + 2;", "+"),
        ("print );", ")"),
        ("print (1 + 2 + 3);", "+"),
        ("42;", "42"),
        ("print #;", "#"),
        ("print +3;", "+"),
    ],
)  # type: ignore[misc]
def test_syntax_errors_report_offending_token(source: str, token: str) -> None:
    with pytest.raises(TinySyntaxError) as exc:
        parse(source)
    assert not isinstance(exc.value, UnexpectedEndOfInput)
    assert exc.value.token == token
    assert f"at symbol {token!r}" in str(exc.value)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("print 1", "';'"),
        ("print", "expression"),
        ("x", "'='"),
        ("x =", "expression"),
        ("x = (1 + 2", "')'"),
        ("x = (1", "')' or '+'"),
        ("print (", "expression"),
    ],
)  # type: ignore[misc]
def test_end_of_input_errors(source: str, expected: str) -> None:
    with pytest.raises(UnexpectedEndOfInput) as exc:
        parse(source)
    assert exc.value.expected == expected
    assert "Unexpected end of input" in str(exc.value)


def test_end_of_input_is_a_syntax_error() -> None:
    with pytest.raises(SyntaxError):
        parse("print 1")


def test_error_position() -> None:
    with pytest.raises(TinySyntaxError) as exc:
        parse("print 1;\nx = ;")
    assert (exc.value.line, exc.value.col) == (2, 5)
    assert "line 2, col 5" in str(exc.value)


def test_first_error_aborts_whole_parse() -> None:
    scanner = Scanner("x = ; print 1; print 2;")
    with pytest.raises(TinySyntaxError):
        Parser(scanner).parse()
    # the offending token was consumed to build the message, nothing more
    assert scanner.next() == "print"


def test_parse_expression_leaves_cursor_after_expression() -> None:
    scanner = Scanner("(1 + (2)) ; rest")
    parser = Parser(scanner)
    assert parser.parse_expression() == Plus(Num(1), Num(2))
    assert scanner.next() == ";"


def test_parse_statement_consumes_semicolon() -> None:
    scanner = Scanner("print x; y = 1;")
    parser = Parser(scanner)
    assert parser.parse_statement() == Print(Var("x"))
    assert parser.parse_statement() == Assign("y", Num(1))
    assert not scanner.has_next()


@given(expressions)  # type: ignore[misc]
def test_redundant_parentheses_are_transparent(expr: Any) -> None:
    text = expr_text(expr)
    assert parse(f"print ({text});") == parse(f"print {text};")
    assert parse(f"print {text};").statements[0].expr == expr  # type: ignore[union-attr]


@given(expressions, expressions)  # type: ignore[misc]
def test_plus_operands_in_textual_order(left: Any, right: Any) -> None:
    program = parse(f"x = ({expr_text(left)} + {expr_text(right)});")
    assert program.statements == (Assign("x", Plus(left, right)),)


@given(st.lists(statements, max_size=10))  # type: ignore[misc]
def test_statement_count_matches_source(stmts: list[Any]) -> None:
    emitter = SourceEmitter()
    for stmt in stmts:
        getattr(emitter, f"emit_{stmt.kind}")(stmt)
    program = parse(emitter.get_output())
    assert len(program.statements) == len(stmts)
    assert list(program.statements) == stmts


@given(st.text(alphabet="print x=(1+);input \n", max_size=30))  # type: ignore[misc]
def test_arbitrary_text_parses_or_raises_syntax_error(source: str) -> None:
    try:
        program = parse(source)
    except TinySyntaxError:
        return
    assert isinstance(program, Program)
