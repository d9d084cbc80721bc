"""
Tests for the RPN evaluator.
"""

import io

import pytest

from core import (
    Command, OperatorDef, OPERATOR_DEFINITIONS, parse_line, RPNEvaluator,
    SessionState, ParseError, StackUnderflow
)


def run(line, stack=None):
    """Evaluate one line, returning (state, stack, printed output)."""
    stack = [] if stack is None else stack
    out = io.StringIO()
    state = RPNEvaluator.evaluate(parse_line(line), stack, out)
    return state, stack, out.getvalue()


# =============================================================================
# VALUES
# =============================================================================

@pytest.mark.parametrize("literal, expected", [
    ("0", 0), ("42", 42), ("-17", -17), ("+5", 5), ("007", 7),
    ("2147483647", 2147483647), ("-2147483648", -2147483648),
])
def test_parse_value_accepts_signed_integers(literal, expected):
    assert RPNEvaluator.parse_value(literal) == expected


@pytest.mark.parametrize("literal", ["abc", "1.5", "12abc", "1_000", "--3", "+", "٣"])
def test_parse_value_rejects_malformed(literal):
    with pytest.raises(ParseError) as excinfo:
        RPNEvaluator.parse_value(literal)
    assert excinfo.value.literal == literal


@pytest.mark.parametrize("literal", ["2147483648", "-2147483649"])
def test_parse_value_rejects_out_of_range(literal):
    with pytest.raises(ParseError):
        RPNEvaluator.parse_value(literal)


@pytest.mark.parametrize("value", [0, 1, -1, 99, -2147483648])
def test_push_then_print_prints_value(value):
    _, _, output = run(f"{value} p")
    assert output == f"{value}\n"


def test_print_peeks_without_popping():
    state, stack, output = run("9 p p")
    assert state == SessionState.RUNNING
    assert stack == [9]
    assert output == "9\n9\n"


# =============================================================================
# ARITHMETIC
# =============================================================================

def test_addition_either_order():
    assert run("3 4 + p")[2] == "7\n"
    assert run("4 3 + p")[2] == "7\n"


def test_multiplication():
    assert run("3 5 * p")[2] == "15\n"


def test_binary_operator_replaces_two_operands():
    _, stack, _ = run("1 2 3 +")
    assert stack == [1, 5]


@pytest.mark.parametrize("symbol", ["-", "/"])
def test_unimplemented_operators_are_noops(symbol):
    state, stack, output = run(f"10 3 {symbol} p")
    assert state == SessionState.RUNNING
    assert stack == [10, 3]
    assert output == "3\n"


@pytest.mark.parametrize("symbol", ["-", "/"])
def test_unimplemented_operators_on_empty_stack(symbol):
    _, stack, _ = run(symbol)
    assert stack == []


def test_noop_with_single_operand_is_not_underflow():
    _, stack, output = run("10 - / p")
    assert stack == [10]
    assert output == "10\n"


# =============================================================================
# QUIT
# =============================================================================

def test_quit_stops_before_remaining_commands():
    state, stack, output = run("1 2 + q p")
    assert state == SessionState.TERMINATED
    assert stack == [3]
    assert output == ""


def test_quit_skips_malformed_tokens_after_it():
    state, _, _ = run("q notanumber")
    assert state == SessionState.TERMINATED


def test_line_without_quit_keeps_running():
    assert run("1 2")[0] == SessionState.RUNNING


# =============================================================================
# ERRORS
# =============================================================================

def test_print_on_empty_stack_underflows():
    with pytest.raises(StackUnderflow) as excinfo:
        run("p")
    assert excinfo.value.symbol == "p"
    assert excinfo.value.required == 1
    assert excinfo.value.available == 0


@pytest.mark.parametrize("symbol", ["+", "*"])
def test_binary_underflow_leaves_stack_untouched(symbol):
    stack = [4]
    with pytest.raises(StackUnderflow):
        run(symbol, stack)
    assert stack == [4]


def test_partial_execution_before_parse_error():
    stack = []
    out = io.StringIO()
    with pytest.raises(ParseError):
        RPNEvaluator.evaluate(parse_line("1 p x 2"), stack, out)
    assert stack == [1]
    assert out.getvalue() == "1\n"


def test_default_output_is_stdout(capsys):
    RPNEvaluator.evaluate([Command.literal("8"), Command.operator("p")], [])
    assert capsys.readouterr().out == "8\n"


# =============================================================================
# OPERATOR TABLE
# =============================================================================

def test_dispatch_noop_follows_implemented_flag(monkeypatch):
    monkeypatch.setitem(OPERATOR_DEFINITIONS, "+", OperatorDef("+", "add", arity=2, implemented=False))
    state, stack, _ = run("1 2 +")
    assert state == SessionState.RUNNING
    assert stack == [1, 2]


def test_print_arity_comes_from_table(monkeypatch):
    monkeypatch.setitem(OPERATOR_DEFINITIONS, "p", OperatorDef("p", "print", arity=2))
    with pytest.raises(StackUnderflow) as excinfo:
        run("5 p")
    assert excinfo.value.required == 2
