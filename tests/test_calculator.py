import operator

import pytest

from consolekit.calculator import Calculator, calculate, main


@pytest.fixture
def calc():
    return Calculator()


@pytest.mark.parametrize("a,b", [(1.5, 2.25), (-4.0, 9.0), (0.0, 7.0), (1e10, -3.0)])
def test_add_is_commutative(calc, a, b):
    assert calc.add(a, b) == calc.add(b, a)


@pytest.mark.parametrize("a,b", [(1.5, 2.25), (-4.0, 9.0), (10.0, 0.0)])
def test_subtract_undoes_add(calc, a, b):
    assert calc.subtract(calc.add(a, b), b) == pytest.approx(a)


@pytest.mark.parametrize("a,b", [(3.0, 4.0), (-2.5, 8.0), (0.5, 0.5)])
def test_divide_undoes_multiply(calc, a, b):
    assert calc.divide(calc.multiply(a, b), b) == pytest.approx(a)


def test_multiply_by_zero_is_zero(calc):
    assert calc.multiply(123.0, 0.0) == 0.0


def test_divide_by_zero_raises(calc):
    with pytest.raises(ValueError, match="Cannot divide by zero"):
        calc.divide(1.0, 0.0)


@pytest.mark.parametrize(
    "symbol,func",
    [("+", operator.add), ("-", operator.sub), ("*", operator.mul), ("/", operator.truediv)],
)
def test_calculate_dispatches(symbol, func):
    assert calculate(7.0, 2.0, symbol) == func(7.0, 2.0)


def test_calculate_rejects_unknown_operation():
    with pytest.raises(ValueError):
        calculate(1.0, 2.0, "%")


def test_calculate_divide_by_zero():
    with pytest.raises(ValueError, match="Cannot divide by zero"):
        calculate(5.0, 0.0, "/")


def test_main_with_arguments(capsys):
    assert main(["6", "3", "/"]) == 0
    assert capsys.readouterr().out.strip() == "The result is: 2"


def test_main_prompts_for_input(monkeypatch, capsys):
    answers = iter(["2", "5", "*"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main([]) == 0
    assert "The result is: 10" in capsys.readouterr().out


def test_main_reports_invalid_operation(capsys):
    assert main(["1", "2", "x"]) == 1
    assert "Invalid operation!" in capsys.readouterr().err


def test_main_reports_division_by_zero(capsys):
    assert main(["1", "0", "/"]) == 1
    assert "Error: Cannot divide by zero" in capsys.readouterr().err