"""
Bar Magnets and Point Poles
===========================
This module defines the magnet descriptors held by a FieldModel and the
resolver that turns each magnet into two point poles.

Why is this file needed?
------------------------
1. Data: A Magnet is an immutable value object (centre, extent, polarity,
   strength). Scenarios create them, the FieldModel stores them.
2. Poles: The field engine never looks at rectangles, only at point poles.
   `resolve_poles` is the single place where rectangle geometry becomes
   point sources.

Note:
    Both poles of a magnet carry the magnet's own polarity. This is a
    simplified model, not a physical north/south pair. Keep it that way:
    the scenario presets rely on it to look right.

Classes:
    Polarity: NORTH (+1) / SOUTH (-1).
    Magnet: Rectangular magnet descriptor.
    Pole: Point source derived from a magnet.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import StrEnum
from typing import Iterable

from magnetcompass.config import FIELD_CONSTANT, POLE_INSET
from magnetcompass.model.geometry_primitives import Vector, UNIT_X, UNIT_Y

logger = logging.getLogger(__name__)


class InvalidMagnetGeometry(ValueError):
    """Raised when a magnet has a non-positive or non-finite width/height."""


class Polarity(StrEnum):
    NORTH = "north"
    SOUTH = "south"

    @property
    def sign(self) -> int:
        return 1 if self is Polarity.NORTH else -1

    @property
    def label(self) -> str:
        return "N" if self is Polarity.NORTH else "S"


@dataclass(frozen=True)
class Magnet:
    """
    A rectangular bar magnet.

    `center` is the geometric centre of the bounding box. The principal axis
    is horizontal when `width >= height`, vertical otherwise.
    """
    center: Vector
    width: float
    height: float
    polarity: Polarity
    strength: float = 1.0

    def __post_init__(self) -> None:
        # Accept plain (x, y) tuples and "north"/"south" strings
        object.__setattr__(self, "center", Vector.of(self.center))
        object.__setattr__(self, "polarity", Polarity(self.polarity))
        object.__setattr__(self, "width", float(self.width))
        object.__setattr__(self, "height", float(self.height))
        object.__setattr__(self, "strength", float(self.strength))

    @property
    def left(self) -> float:
        return self.center.x - self.width / 2

    @property
    def top(self) -> float:
        return self.center.y - self.height / 2

    @property
    def is_horizontal(self) -> bool:
        return self.width >= self.height

    @property
    def axis(self) -> Vector:
        """Unit vector along the principal axis."""
        return UNIT_X if self.is_horizontal else UNIT_Y

    @property
    def length(self) -> float:
        """Extent along the principal axis."""
        return self.width if self.is_horizontal else self.height

    @property
    def label(self) -> str:
        return self.polarity.label

    def validate(self) -> None:
        """Raise InvalidMagnetGeometry if the extent cannot produce finite poles."""
        for name, value in (("width", self.width), ("height", self.height)):
            if not math.isfinite(value) or value <= 0.0:
                raise InvalidMagnetGeometry(
                    f"Magnet at ({self.center.x:g}, {self.center.y:g}) has invalid {name}: {value!r}"
                )
        if not (math.isfinite(self.center.x) and math.isfinite(self.center.y)):
            raise InvalidMagnetGeometry(f"Magnet centre is not finite: {self.center!r}")


@dataclass(frozen=True)
class Pole:
    """A point source derived from a magnet. Recomputed on every evaluation."""
    position: Vector
    polarity: int
    strength: float

    def effective_strength(self, multiplier: float = 1.0) -> float:
        """
        Nominal strength of this pole.

        The magnet's strength is split evenly between its two poles.
        """
        return (FIELD_CONSTANT * self.strength / 2) * multiplier


def resolve_poles(magnet: Magnet) -> tuple[Pole, Pole]:
    """
    Place the two poles of a magnet on its principal axis.

    Each pole sits `POLE_INSET` units inside the corresponding end of the
    bounding box. The inset is not clamped, so magnets shorter than twice the
    inset get coincident or swapped poles.

    Returns:
        (pole at the left/top end, pole at the right/bottom end)
    """
    axis = magnet.axis
    offset = axis * (magnet.length / 2 - POLE_INSET)
    sign = magnet.polarity.sign
    return (
        Pole(position=magnet.center - offset, polarity=sign, strength=magnet.strength),
        Pole(position=magnet.center + offset, polarity=sign, strength=magnet.strength),
    )


def resolve_all_poles(magnets: Iterable[Magnet]) -> list[Pole]:
    poles: list[Pole] = []
    for magnet in magnets:
        poles.extend(resolve_poles(magnet))
    return poles
