"""Predefined Magnet Arrangements (Scenario Presets)."""
from __future__ import annotations

import logging
from enum import StrEnum
from typing import Callable

from magnetcompass.model.magnets import Magnet, Polarity

logger = logging.getLogger(__name__)

ScenarioFactory = Callable[[], list[Magnet]]

_REGISTRY: dict[str, ScenarioFactory] = {}


class ScenarioName(StrEnum):
    SINGLE = "single"
    ATTRACT = "attract"
    REPEL = "repel"


def register_scenario(name: str) -> Callable[[ScenarioFactory], ScenarioFactory]:
    """Function decorator to register a scenario factory under `name`."""
    def decorator(factory: ScenarioFactory) -> ScenarioFactory:
        if not name:
            raise ValueError(f"{factory.__name__} must be registered with a name")
        _REGISTRY[str(name)] = factory
        return factory
    return decorator


def list_scenarios() -> list[str]:
    return list(_REGISTRY.keys())


def apply_scenario(name: str) -> list[Magnet]:
    """
    Build the magnets of the named scenario.

    Unknown names yield an empty arrangement rather than an error.
    """
    factory = _REGISTRY.get(str(name))
    if factory is None:
        logger.warning(f"Unknown scenario '{name}', using an empty arrangement.")
        return []
    magnets = factory()
    logger.debug(f"Scenario '{name}' created {len(magnets)} magnets.")
    return magnets


# ------------------------------------------------------------------------------
# Presets
# ------------------------------------------------------------------------------

def _pair(
    left_x: float,
    right_x: float,
    left: Polarity,
    right: Polarity,
    *,
    y: float = 250.0,
    width: float = 100.0,
    height: float = 50.0,
) -> list[Magnet]:
    return [
        Magnet(center=(left_x, y), width=width, height=height, polarity=left),
        Magnet(center=(right_x, y), width=width, height=height, polarity=right),
    ]


@register_scenario(ScenarioName.SINGLE)
def single() -> list[Magnet]:
    """One bar drawn as two halves: N on the left, S on the right."""
    return _pair(400.0, 520.0, Polarity.NORTH, Polarity.SOUTH, width=120.0, height=60.0)


@register_scenario(ScenarioName.ATTRACT)
def attract() -> list[Magnet]:
    """Two S|N pairs; the poles facing each other across the gap differ."""
    return (
        _pair(120.0, 200.0, Polarity.SOUTH, Polarity.NORTH)
        + _pair(600.0, 680.0, Polarity.SOUTH, Polarity.NORTH)
    )


@register_scenario(ScenarioName.REPEL)
def repel() -> list[Magnet]:
    """Same geometry as `attract` with the right pair flipped to N|S."""
    return (
        _pair(120.0, 200.0, Polarity.SOUTH, Polarity.NORTH)
        + _pair(600.0, 680.0, Polarity.NORTH, Polarity.SOUTH)
    )
