"""Complex numbers with addition, subtraction, equality and magnitude."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Complex:
    """A complex number ``x + y*i``."""

    x: float
    y: float

    def __add__(self, other: Complex) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Complex) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.x - other.x, self.y - other.y)

    def abs(self) -> float:
        """The magnitude of the number."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def __abs__(self) -> float:
        return self.abs()