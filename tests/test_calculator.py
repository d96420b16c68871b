"""Tests de la máquina de estados de la calculadora."""

import random

import pytest

from calculadora.core.buttons import CalculatorButton as B
from calculadora.core.calculator import (
    Calculator,
    Operation,
    format_number,
    format_result,
    parse_display,
)


def press(calc, keys):
    """Pulsa una secuencia de botones; los caracteres se traducen a botones."""
    state = calc.get_state()
    for key in keys:
        button = key if isinstance(key, B) else B(key)
        state = calc.handle_input(button)
    return state


@pytest.fixture
def calc():
    return Calculator()


# --- Estado inicial y AC ---

def test_initial_state(calc):
    state = calc.get_state()
    assert state.display == "0"
    assert state.current_number == 0
    assert state.previous_number == 0
    assert state.operation is Operation.NONE
    assert state.is_typing_number is False
    assert state.history == ""


def test_clear_restores_initial_state(calc):
    press(calc, ["1", "2", "+", "3", "×", B.NEGATIVE, "%", "=", "÷", "."])
    state = calc.handle_input(B.CLEAR)
    assert state == Calculator().get_state()


# --- Dígitos ---

def test_digits_build_number(calc):
    state = press(calc, "123")
    assert state.display == "123"
    assert state.current_number == 123
    assert state.is_typing_number is True


def test_leading_zero_is_replaced(calc):
    assert press(calc, "005").display == "5"


def test_digits_capped_at_nine(calc):
    state = press(calc, "1234567890")
    assert state.display == "123456789"
    assert state.current_number == 123456789


def test_digit_cap_ignores_sign_and_decimal(calc):
    press(calc, "1")
    calc.handle_input(B.NEGATIVE)
    state = press(calc, ".23456789")
    assert state.display == "-1.23456789"
    assert press(calc, "5").display == "-1.23456789"


def test_digit_after_operator_starts_new_number(calc):
    state = press(calc, "12+3")
    assert state.display == "3"
    assert state.previous_number == 12
    assert state.history == "12 +"


def test_digit_after_equals_clears_history(calc):
    press(calc, "2+3=")
    assert calc.history == "2 + 3 ="
    state = press(calc, "7")
    assert state.display == "7"
    assert state.history == ""


# --- Punto decimal ---

def test_decimal_is_idempotent(calc):
    press(calc, "5.")
    assert press(calc, ".").display == "5."


def test_decimal_on_zero_gives_zero_point(calc):
    state = press(calc, ".5")
    assert state.display == "0.5"
    assert state.current_number == 0.5


def test_decimal_after_operator_extends_previous_display(calc):
    state = press(calc, "5+.")
    assert state.display == "5."
    assert state.is_typing_number is True
    assert press(calc, "3").display == "5.3"


# --- Operaciones ---

@pytest.mark.parametrize("keys,expected", [
    ("2+3=", "5"),
    ("9-4=", "5"),
    ("4×2=", "8"),
    ("1÷4=", "0.25"),
    ("3-5=", "-2"),
])
def test_basic_operations(calc, keys, expected):
    assert press(calc, keys).display == expected


def test_chaining_is_left_to_right(calc):
    state = press(calc, "2+3×4=")
    assert state.display == "20"
    assert state.history == "5 × 4 ="


def test_operator_collapses_pending_operation(calc):
    state = press(calc, "2+3×")
    assert state.display == "5"
    assert state.previous_number == 5
    assert state.operation is Operation.MULTIPLY
    assert state.history == "5 ×"


def test_repeated_operator_uses_current_number(calc):
    # Sin segundo operando, "+" repetido evalúa 2 + 2
    state = press(calc, "2++")
    assert state.display == "4"
    assert state.history == "4 +"


def test_history_uses_grouping(calc):
    assert press(calc, "1234+").history == "1,234 +"


def test_non_integer_result_keeps_natural_repr(calc):
    assert press(calc, "0.1+0.2=").display == "0.30000000000000004"


def test_decimal_is_ignored_while_previous_display_has_point(calc):
    # "." tras la operación no se añade: el display aún es "0.1"
    state = press(calc, "0.1+.2")
    assert state.display == "2"
    assert press(calc, "=").display == "2.1"


def test_integer_result_drops_decimal_point(calc):
    state = press(calc, "1.5×2=")
    assert state.display == "3"
    assert state.current_number == 3.0


# --- Igual ---

def test_equals_without_operation_is_idempotent(calc):
    press(calc, "7")
    assert press(calc, "=").display == "7"
    assert press(calc, "=").display == "7"
    assert calc.history == ""


def test_equals_result_becomes_current_number(calc):
    state = press(calc, "6÷4=")
    assert state.current_number == 1.5
    assert state.operation is Operation.NONE
    assert state.is_typing_number is False


# --- División por cero ---

def test_division_by_zero_shows_error(calc):
    state = press(calc, "5÷0=")
    assert state.display == "Error"
    assert state.operation is Operation.NONE
    assert state.is_typing_number is False
    assert state.current_number == 0
    assert state.previous_number == 5
    assert state.history == "5 ÷"
    assert calc.is_error()


def test_clear_recovers_from_error(calc):
    press(calc, "5÷0=")
    assert calc.handle_input(B.CLEAR).display == "0"


def test_operator_after_division_by_zero_keeps_error_display(calc):
    # "+" tras el error captura el número actual (0) como operando
    state = press(calc, "8÷0+")
    assert state.display == "Error"
    assert state.previous_number == 0
    assert state.operation is Operation.ADD
    assert state.history == "0 +"


# --- Cambio de signo ---

def test_toggle_sign_round_trip(calc):
    press(calc, "12.5")
    before = (calc.display, calc.current_number)
    calc.handle_input(B.NEGATIVE)
    assert calc.display == "-12.5"
    assert calc.current_number == -12.5
    calc.handle_input(B.NEGATIVE)
    assert (calc.display, calc.current_number) == before


def test_toggle_sign_keeps_typing_state(calc):
    press(calc, "3")
    state = calc.handle_input(B.NEGATIVE)
    assert state.is_typing_number is True
    assert press(calc, "4").display == "-34"
    assert calc.current_number == -34


def test_toggle_sign_on_zero(calc):
    state = calc.handle_input(B.NEGATIVE)
    assert state.display == "-0"


# --- Porcentaje ---

def test_percent(calc):
    state = press(calc, ["5", "0", B.PERCENT])
    assert state.current_number == 0.5
    assert state.display == "0.5"


def test_percent_skips_integer_formatting(calc):
    state = press(calc, ["1", "0", "0", B.PERCENT])
    assert state.current_number == 1.0
    assert state.display == "1.0"


def test_percent_in_operation(calc):
    assert press(calc, ["2", "0", "0", "×", "1", "0", B.PERCENT, "="]).display == "20"


# --- Robustez ---

def test_random_sequences_never_raise():
    rng = random.Random(1234)
    buttons = list(B)
    calc = Calculator()
    for _ in range(3000):
        state = calc.handle_input(rng.choice(buttons))
        assert state.display
        assert state.display.count(".") <= 1


# --- Formateo ---

@pytest.mark.parametrize("value,expected", [
    (0.0, "0"),
    (2.0, "2"),
    (-3.0, "-3"),
    (1234.5, "1,234.5"),
    (1000000.0, "1,000,000"),
    (0.123456789, "0.12345679"),
    (0.5, "0.5"),
])
def test_format_number(value, expected):
    assert format_number(value) == expected


@pytest.mark.parametrize("value,expected", [
    (8.0, "8"),
    (-2.0, "-2"),
    (2.5, "2.5"),
    (1e20, "100000000000000000000"),
])
def test_format_result(value, expected):
    assert format_result(value) == expected


@pytest.mark.parametrize("text,expected", [
    ("12", 12.0),
    ("5.", 5.0),
    ("-0.5", -0.5),
    ("Error", 0.0),
    ("-", 0.0),
])
def test_parse_display(text, expected):
    assert parse_display(text) == expected
