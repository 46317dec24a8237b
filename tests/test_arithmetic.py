import pytest

from deskcalc.runtime import evaluate
from deskcalc.symbols import SymbolTable


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("1", 1.0),
        pytest.param("-1", -1.0),
        pytest.param("1+2", 3.0),
        pytest.param("(1+2)", 3.0),
        pytest.param("-(1+2)", -3.0),
        pytest.param("(((1)))", 1.0),
        pytest.param("1 * 4 + 5", 9.0),
        pytest.param("1 + 4 * 5", 21.0),
        pytest.param("2 + 3 * 4", 14.0),
        pytest.param("(2 + 3) * 4", 20.0),
        pytest.param("-2 * -3", 6.0),
        pytest.param("--2", 2.0),
        pytest.param("10 - 4 - 3", 3.0),
        pytest.param("10 / 5 / 2 / 2", 0.5),
        pytest.param("10 + 2 * (5 + 3 - 1)", 24.0),
        pytest.param("1.5 * 2", 3.0),
        pytest.param(".5 + 1.", 1.5),
        # variables
        pytest.param("a = 1; a", 1.0),
        pytest.param("a = 1; b = 2; a + b", 3.0),
        pytest.param("a = 1; b = 2; c = a + b", 3.0),
        pytest.param("a = b = 10; a + b", 20.0),
        pytest.param("x = 2\nx * x", 4.0),
        pytest.param("y * 2", 0.0),
        pytest.param("a1b2 = 3; a1b2", 3.0),
        # constants
        pytest.param("pi", 3.141592653589793),
        pytest.param("e", 2.718281828459045),
    ],
)
def test_eval_arithmetic(code: str, expected_ret_val: float) -> None:
    results = evaluate(code, symbols=SymbolTable())
    assert results[-1] == expected_ret_val


@pytest.mark.parametrize(
    "code, expected_results",
    [
        pytest.param("x = 5; x + 1", [5.0, 6.0]),
        pytest.param("1\n2\n3\n", [1.0, 2.0, 3.0]),
        pytest.param("1;;;2", [1.0, 2.0]),
        pytest.param("\n\n", []),
        pytest.param("", []),
        pytest.param("x = 1; x = x + 1; x", [1.0, 2.0, 2.0]),
    ],
)
def test_eval_statements(code: str, expected_results: list[float]) -> None:
    assert evaluate(code) == expected_results


def test_assignment_is_persisted_in_symbol_table() -> None:
    symbols = SymbolTable()
    evaluate("rate = 4; total = rate * 2.5", symbols=symbols)
    assert symbols.lookup("rate").value == 4.0
    assert symbols.lookup("total").value == 10.0


def test_reassignment_replaces_previous_value() -> None:
    assert evaluate("n = 1; n; n = 7; n; n") == [1.0, 1.0, 7.0, 7.0, 7.0]


def test_pi_is_stable() -> None:
    assert evaluate("pi; pi; pi") == [3.141592653589793] * 3


def test_constants_can_be_reassigned() -> None:
    assert evaluate("pi = 3; pi * 2") == [3.0, 6.0]
