"""A four-function calculator with a small interactive front end."""

from __future__ import annotations

import argparse
import operator
import sys
from typing import Callable


class Calculator:
    """Basic arithmetic on two numbers."""

    def add(self, a: float, b: float) -> float:
        return a + b

    def subtract(self, a: float, b: float) -> float:
        return a - b

    def multiply(self, a: float, b: float) -> float:
        return a * b

    def divide(self, a: float, b: float) -> float:
        if b == 0:
            raise ValueError("Cannot divide by zero")
        return a / b


_CALCULATOR = Calculator()

_OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "+": _CALCULATOR.add,
    "-": _CALCULATOR.subtract,
    "*": _CALCULATOR.multiply,
    "/": _CALCULATOR.divide,
}


def calculate(a: float, b: float, operation: str) -> float:
    """Apply the operation named by one of ``+ - * /`` to ``a`` and ``b``."""
    try:
        func = _OPERATIONS[operation]
    except KeyError:
        raise ValueError(f"Invalid operation: {operation!r}") from None
    return func(a, b)


def _format_number(value: float) -> str:
    return f"{value:g}"


def _ask(prompt: str, given: str | None) -> str:
    if given is not None:
        return given
    return input(prompt)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Perform one arithmetic operation.")
    parser.add_argument("first", nargs="?", help="first number")
    parser.add_argument("second", nargs="?", help="second number")
    parser.add_argument("operation", nargs="?", help="one of + - * /")
    args = parser.parse_args(argv)

    try:
        first_text = _ask("Enter the first number: ", args.first)
        second_text = _ask("Enter the second number: ", args.second)
        op_text = _ask("Enter an operation (+, -, *, /): ", args.operation)
    except EOFError:
        print("Error: unexpected end of input", file=sys.stderr)
        return 1

    try:
        num1 = float(first_text)
        num2 = float(second_text)
    except ValueError:
        print("Error: invalid number", file=sys.stderr)
        return 1

    operation = op_text.strip()[:1]
    if operation not in _OPERATIONS:
        print("Invalid operation!", file=sys.stderr)
        return 1

    try:
        result = calculate(num1, num2, operation)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"The result is: {_format_number(result)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())