import math

import pytest

from magnetcompass.model.geometry_primitives import Vector
from magnetcompass.model.magnets import (
    InvalidMagnetGeometry, Magnet, Polarity, Pole, resolve_all_poles, resolve_poles
)


def test_horizontal_magnet_poles_on_midline() -> None:
    magnet = Magnet(center=(400, 250), width=120, height=60, polarity=Polarity.NORTH)

    first, second = resolve_poles(magnet)

    # left = 340, top = 220
    assert first.position == Vector(344.0, 250.0)
    assert second.position == Vector(456.0, 250.0)


def test_vertical_magnet_poles_on_midline() -> None:
    magnet = Magnet(center=(100, 200), width=40, height=90, polarity=Polarity.SOUTH)

    first, second = resolve_poles(magnet)

    # left = 80, top = 155
    assert first.position == Vector(100.0, 159.0)
    assert second.position == Vector(100.0, 241.0)


def test_square_magnet_counts_as_horizontal() -> None:
    magnet = Magnet(center=(0, 0), width=50, height=50, polarity="north")

    first, second = resolve_poles(magnet)

    assert magnet.is_horizontal
    assert first.position.y == second.position.y == 0.0
    assert first.position.x == pytest.approx(-21.0)
    assert second.position.x == pytest.approx(21.0)


@pytest.mark.parametrize("polarity, sign", [(Polarity.NORTH, 1), (Polarity.SOUTH, -1)])
def test_both_poles_share_magnet_polarity(polarity: Polarity, sign: int) -> None:
    magnet = Magnet(center=(0, 0), width=100, height=50, polarity=polarity, strength=2.5)

    poles = resolve_poles(magnet)

    assert [p.polarity for p in poles] == [sign, sign]
    assert [p.strength for p in poles] == [2.5, 2.5]


def test_short_magnet_poles_swap_without_clamping() -> None:
    # width 6 < 2 * inset: the "left" pole ends up right of the "right" one
    magnet = Magnet(center=(10, 10), width=6, height=2, polarity=Polarity.NORTH)

    first, second = resolve_poles(magnet)

    assert first.position.x == pytest.approx(11.0)
    assert second.position.x == pytest.approx(9.0)


def test_width_of_eight_gives_coincident_poles() -> None:
    magnet = Magnet(center=(0, 0), width=8, height=4, polarity=Polarity.SOUTH)

    first, second = resolve_poles(magnet)

    assert first.position == second.position == Vector(0.0, 0.0)


def test_effective_strength_splits_between_poles() -> None:
    pole = Pole(position=Vector(0, 0), polarity=1, strength=1.0)

    assert pole.effective_strength() == 2500.0
    assert pole.effective_strength(2.0) == 5000.0
    assert pole.effective_strength(0.0) == 0.0


def test_magnet_coerces_inputs() -> None:
    magnet = Magnet(center=[1, 2], width=3, height=4, polarity="south", strength=2)

    assert magnet.center == Vector(1.0, 2.0)
    assert magnet.polarity is Polarity.SOUTH
    assert magnet.label == "S"
    assert isinstance(magnet.strength, float)


def test_magnet_is_immutable() -> None:
    magnet = Magnet(center=(0, 0), width=10, height=5, polarity=Polarity.NORTH)

    with pytest.raises(AttributeError):
        magnet.width = 20  # type: ignore[misc]


@pytest.mark.parametrize("width, height", [(0, 10), (10, 0), (-5, 10), (10, -1), (math.nan, 10), (10, math.inf)])
def test_validate_rejects_bad_extent(width: float, height: float) -> None:
    magnet = Magnet(center=(0, 0), width=width, height=height, polarity=Polarity.NORTH)

    with pytest.raises(InvalidMagnetGeometry):
        magnet.validate()


def test_invalid_geometry_is_a_value_error() -> None:
    assert issubclass(InvalidMagnetGeometry, ValueError)


def test_resolve_all_poles_keeps_magnet_order() -> None:
    magnets = [
        Magnet(center=(0, 0), width=20, height=10, polarity=Polarity.NORTH),
        Magnet(center=(100, 0), width=20, height=10, polarity=Polarity.SOUTH),
    ]

    poles = resolve_all_poles(magnets)

    assert [p.polarity for p in poles] == [1, 1, -1, -1]
    assert [p.position.x for p in poles] == [-6.0, 6.0, 94.0, 106.0]
