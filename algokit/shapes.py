"""Shapes and visitors that name them and compute their perimeters and areas."""

from __future__ import annotations

import argparse
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

R = TypeVar("R")

_PI = 3.14


class Visitor(ABC, Generic[R]):
    """An operation over every kind of shape."""

    @abstractmethod
    def visit_rectangle(self, shape: Rectangle) -> R:
        """Apply the operation to a rectangle."""

    @abstractmethod
    def visit_circle(self, shape: Circle) -> R:
        """Apply the operation to a circle."""

    @abstractmethod
    def visit_triangle(self, shape: Triangle) -> R:
        """Apply the operation to a triangle."""


class Shape(ABC):
    """A shape that hands itself to a visitor."""

    @abstractmethod
    def accept(self, visitor: Visitor[R]) -> R:
        """Dispatch to the visitor method for this kind of shape."""


@dataclass(frozen=True)
class Rectangle(Shape):
    """A rectangle with sides ``x`` and ``y``."""

    x: int
    y: int

    def accept(self, visitor: Visitor[R]) -> R:
        return visitor.visit_rectangle(self)


@dataclass(frozen=True)
class Circle(Shape):
    """A circle of radius ``r``."""

    r: int

    def accept(self, visitor: Visitor[R]) -> R:
        return visitor.visit_circle(self)


@dataclass(frozen=True)
class Triangle(Shape):
    """A triangle with sides ``x``, ``y``, ``z``; its area takes ``z`` as an angle in radians."""

    x: int
    y: int
    z: int

    def accept(self, visitor: Visitor[R]) -> R:
        return visitor.visit_triangle(self)


class NameVisitor(Visitor[str]):
    """The name of the kind of shape."""

    def visit_rectangle(self, shape: Rectangle) -> str:
        return "Rectangle"

    def visit_circle(self, shape: Circle) -> str:
        return "Circle"

    def visit_triangle(self, shape: Triangle) -> str:
        return "Triangle"


class PerimeterVisitor(Visitor[float]):
    """The perimeter of the shape, with pi taken as 3.14."""

    def visit_rectangle(self, shape: Rectangle) -> float:
        return 2 * (shape.x + shape.y)

    def visit_circle(self, shape: Circle) -> float:
        return shape.r * 2 * _PI

    def visit_triangle(self, shape: Triangle) -> float:
        return shape.x + shape.y + shape.z


class AreaVisitor(Visitor[float]):
    """The area of the shape, with pi taken as 3.14."""

    def visit_rectangle(self, shape: Rectangle) -> float:
        return shape.x * shape.y

    def visit_circle(self, shape: Circle) -> float:
        return shape.r * shape.r * _PI

    def visit_triangle(self, shape: Triangle) -> float:
        return 0.5 * shape.x * shape.y * math.sin(shape.z)


def _fmt(value: float) -> str:
    return str(value) if isinstance(value, int) else f"{value:g}"


def main(argv: list[str] | None = None) -> int:
    """Print the perimeters and then the areas of a few sample shapes."""
    parser = argparse.ArgumentParser(description="Perimeters and areas of sample shapes.")
    parser.parse_args(argv)
    shapes: list[Shape] = [Circle(6), Rectangle(1, 1), Triangle(4, 4, 1)]
    for visitor in (PerimeterVisitor(), AreaVisitor()):
        for shape in shapes:
            print(_fmt(shape.accept(visitor)))
    return 0