"""Basic arithmetic: a small calculator, integer powers and the greatest common divisor."""

from __future__ import annotations

import argparse
import math
import re
import sys
from itertools import repeat

_NUMBER = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?"
_EXPRESSION = re.compile(rf"\s*({_NUMBER})\s*([^\s\d.])\s*({_NUMBER})\s*")


def power(base: float, exponent: int) -> float:
    """Raise ``base`` to a non-negative integer power by repeated multiplication.

    A zero or negative exponent yields 1.0.
    """
    return math.prod(repeat(float(base), max(exponent, 0)), start=1.0)


def calculate(a: float, op: str, b: float) -> float:
    """Apply the operator ``op`` (one of ``+ - * / ^``) to ``a`` and ``b``.

    Division by zero raises ZeroDivisionError; an unknown operator yields 0.0.
    The ``^`` operator truncates ``b`` to an integer exponent.
    """
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    if op == "/":
        if b == 0:
            raise ZeroDivisionError("Error")
        return a / b
    if op == "^":
        return power(a, int(b))
    return 0.0


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two integers, ignoring their signs."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def _fmt(value: float) -> str:
    return f"{value:g}"


def main(argv: list[str] | None = None) -> int:
    """Read ``a$b`` expressions from standard input and print their results."""
    parser = argparse.ArgumentParser(description="Simple calculator.")
    parser.parse_args(argv)

    print("Calculator\n Enter operations in a$b format")
    for line in sys.stdin:
        if not line.strip():
            continue
        match = _EXPRESSION.fullmatch(line.rstrip("\n"))
        if match is None:
            print(f"cannot parse: {line.strip()}", file=sys.stderr)
            continue
        a, op, b = float(match.group(1)), match.group(2), float(match.group(3))
        try:
            result = calculate(a, op, b)
        except ZeroDivisionError as exc:
            print(exc, file=sys.stderr)
            continue
        print(f"{_fmt(a)}{op}{_fmt(b)}={_fmt(result)}")
    return 0