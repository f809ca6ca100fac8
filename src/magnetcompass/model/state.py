"""
Field Model (Data Model)
========================
This module defines the object that holds the active magnet arrangement and
the global strength multiplier.

Why is this file needed?
------------------------
1. State Management: The magnets and the multiplier live in one explicit
   object owned by the caller instead of module-level globals.
2. Decoupling: The UI store writes to this object; the field engine only
   reads from it. Several models can coexist (e.g. an offscreen field map).

Classes:
    FieldModel: The main container class.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from magnetcompass.config import MULTIPLIER_DEFAULT, MULTIPLIER_MAX, MULTIPLIER_MIN
from magnetcompass.model.field import evaluate_field, needle_angle_degrees
from magnetcompass.model.geometry_primitives import Vector
from magnetcompass.model.magnets import Magnet, Pole, resolve_all_poles
from magnetcompass.model.scenarios import apply_scenario

logger = logging.getLogger(__name__)


def clamp_multiplier(value: float) -> float:
    """Clamp a user-entered multiplier to the slider range."""
    return min(MULTIPLIER_MAX, max(MULTIPLIER_MIN, float(value)))


@dataclass
class FieldModel:
    """
    Active magnets plus the global multiplier.

    Magnets are replaced wholesale, never edited in place.
    """
    magnets: tuple[Magnet, ...] = ()
    global_multiplier: float = MULTIPLIER_DEFAULT
    scenario: Optional[str] = field(default=None)

    @classmethod
    def from_scenario(cls, name: str, global_multiplier: float = MULTIPLIER_DEFAULT) -> FieldModel:
        model = cls(global_multiplier=global_multiplier)
        model.apply_scenario(name)
        return model

    def set_magnets(self, magnets: Iterable[Magnet]) -> None:
        """
        Replace the active arrangement.

        Raises:
            InvalidMagnetGeometry: If any magnet has a non-positive extent.
                The previous arrangement is kept in that case.
        """
        new_magnets = tuple(magnets)
        for magnet in new_magnets:
            magnet.validate()
        self.magnets = new_magnets
        self.scenario = None
        logger.debug(f"Magnet set replaced ({len(new_magnets)} magnets).")

    def apply_scenario(self, name: str) -> None:
        """Replace the arrangement with a preset. Unknown names clear it."""
        self.set_magnets(apply_scenario(name))
        self.scenario = str(name)
        logger.info(f"Scenario set to '{name}' ({len(self.magnets)} magnets).")

    def set_global_multiplier(self, value: float) -> None:
        """Store the multiplier as given; callers clamp to the slider range."""
        self.global_multiplier = float(value)
        logger.debug(f"Global multiplier set to {self.global_multiplier:g}.")

    def poles(self) -> list[Pole]:
        return resolve_all_poles(self.magnets)

    def evaluate_field(self, query_point: Vector | Sequence[float]) -> Vector:
        return evaluate_field(query_point, self.magnets, self.global_multiplier)

    def needle_angle(self, query_point: Vector | Sequence[float]) -> float:
        """Needle angle in degrees for a compass centred at `query_point`."""
        sample = self.evaluate_field(query_point)
        return needle_angle_degrees(sample.x, sample.y)

    def reset(self) -> None:
        """Clear magnets and restore the default multiplier."""
        self.magnets = ()
        self.scenario = None
        self.global_multiplier = MULTIPLIER_DEFAULT
        logger.info("Field model has been reset.")
