"""Evaluation of arithmetic on non-negative integers with + - * /."""

from __future__ import annotations

_OPERATORS = "+-*/"
_DIGITS = "0123456789"


def _divide(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def calculate(s: str) -> int:
    """Evaluate an expression of non-negative integers, ``+ - * /`` and spaces.

    Multiplication and division bind tighter than addition and subtraction;
    division truncates toward zero. Raises ValueError for other characters or
    an expression that starts with ``*`` or ``/``, and ZeroDivisionError for
    division by zero.
    """
    terms: list[int] = []
    operator = "+"
    number = 0
    last = len(s) - 1
    for i, ch in enumerate(s):
        if ch in _DIGITS:
            number = number * 10 + int(ch)
        elif ch != " " and ch not in _OPERATORS:
            raise ValueError(f"unexpected character {ch!r}")
        if (ch not in _DIGITS and ch != " ") or i == last:
            if operator == "+":
                terms.append(number)
            elif operator == "-":
                terms.append(-number)
            elif not terms:
                raise ValueError("expression starts with an operator")
            elif operator == "*":
                terms[-1] *= number
            else:
                terms[-1] = _divide(terms[-1], number)
            operator = ch
            number = 0
    return sum(terms)