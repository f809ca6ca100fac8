"""
Geometric Primitives for the 2D simulation area.

The area uses screen orientation: x grows to the right, y grows downwards.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable
import math


@dataclass(frozen=True)
class Vector:
    """
    A vector in the plane, used for positions, displacements and field samples.
    """
    x: float
    y: float

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar)

    @classmethod
    def of(cls, value: Vector | Iterable[float]) -> Vector:
        """Accept a Vector or any (x, y) pair."""
        if isinstance(value, Vector):
            return value
        x, y = value
        return cls(float(x), float(y))

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2)


UNIT_X = Vector(1.0, 0.0)
UNIT_Y = Vector(0.0, 1.0)
