import itertools
import math

import numpy as np
import pytest

from magnetcompass.model.field import evaluate_field, needle_angle_degrees, sample_field_grid
from magnetcompass.model.geometry_primitives import Vector
from magnetcompass.model.magnets import Magnet, Polarity, resolve_poles
from magnetcompass.model.scenarios import apply_scenario


@pytest.fixture
def mixed_magnets() -> list[Magnet]:
    return [
        Magnet(center=(120, 80), width=100, height=40, polarity=Polarity.NORTH),
        Magnet(center=(300, 310), width=30, height=90, polarity=Polarity.SOUTH, strength=1.7),
        Magnet(center=(520, 150), width=60, height=60, polarity=Polarity.SOUTH, strength=0.4),
        Magnet(center=(640, 420), width=140, height=50, polarity=Polarity.NORTH, strength=3.0),
    ]


def test_empty_set_gives_exact_zero() -> None:
    sample = evaluate_field((123.4, -56.7), [])

    assert sample == Vector(0.0, 0.0)
    assert needle_angle_degrees(sample.x, sample.y) == 0.0


def test_single_pole_inverse_square() -> None:
    # one magnet, query on the axis far to the right
    magnet = Magnet(center=(0, 0), width=100, height=50, polarity=Polarity.NORTH)

    sample = evaluate_field((146, 0), [magnet])

    # poles at x = -46 and x = 46
    expected = 2500 / 192**2 + 2500 / 100**2
    assert sample.x == pytest.approx(expected, rel=1e-12)
    assert sample.y == 0.0


def test_south_magnet_points_towards_itself() -> None:
    magnet = Magnet(center=(0, 0), width=100, height=50, polarity=Polarity.SOUTH)

    sample = evaluate_field((0, 100), [magnet])

    assert sample.y < 0.0
    assert sample.x == pytest.approx(0.0, abs=1e-12)


def test_order_independent(mixed_magnets: list[Magnet]) -> None:
    query = (410.0, 205.0)
    reference = evaluate_field(query, mixed_magnets, 1.3)

    for perm in itertools.permutations(mixed_magnets):
        sample = evaluate_field(query, perm, 1.3)
        assert sample.x == pytest.approx(reference.x, rel=1e-9, abs=1e-12)
        assert sample.y == pytest.approx(reference.y, rel=1e-9, abs=1e-12)


def test_opposite_pair_on_bisector_points_along_axis() -> None:
    # N on the left, S on the right, query straight above the middle.
    # The equal-sign poles of each magnet make the bisector component cancel.
    magnets = [
        Magnet(center=(-100, 0), width=100, height=50, polarity=Polarity.NORTH),
        Magnet(center=(100, 0), width=100, height=50, polarity=Polarity.SOUTH),
    ]

    sample = evaluate_field((0, 50), magnets)

    assert sample.y == pytest.approx(0.0, abs=1e-12)
    assert sample.x > 0.0


def test_like_pair_on_bisector_points_across_axis() -> None:
    magnets = [
        Magnet(center=(-100, 0), width=100, height=50, polarity=Polarity.NORTH),
        Magnet(center=(100, 0), width=100, height=50, polarity=Polarity.NORTH),
    ]

    sample = evaluate_field((0, 50), magnets)

    assert sample.x == pytest.approx(0.0, abs=1e-12)
    assert sample.y > 0.0


def test_query_on_pole_skips_that_pole() -> None:
    magnet = Magnet(center=(0, 0), width=100, height=50, polarity=Polarity.NORTH)
    left, _ = resolve_poles(magnet)

    sample = evaluate_field(left.position, [magnet])

    assert math.isfinite(sample.x) and math.isfinite(sample.y)
    # only the pole at x = 46 contributes, 92 units to the right
    assert sample.x == pytest.approx(-2500 / 92**2, rel=1e-12)
    assert sample.y == 0.0


def test_query_within_guard_distance_is_skipped() -> None:
    magnet = Magnet(center=(0, 0), width=100, height=50, polarity=Polarity.NORTH)

    near = evaluate_field((-46 + 5e-5, 0), [magnet])
    on = evaluate_field((-46, 0), [magnet])

    assert near.x == pytest.approx(on.x, rel=1e-3)


def test_guard_distance_is_inclusive() -> None:
    # width 8: both poles sit on the origin, query exactly at the guard radius
    magnet = Magnet(center=(0, 0), width=8, height=4, polarity=Polarity.NORTH)

    assert evaluate_field((1e-4, 0.0), [magnet]) == Vector(0.0, 0.0)

    field_x, field_y = sample_field_grid([1e-4], [0.0], [magnet])
    assert field_x[0, 0] == 0.0 and field_y[0, 0] == 0.0


def test_all_poles_skipped_gives_zero() -> None:
    # width 8: both poles coincide with the centre
    magnet = Magnet(center=(10, 10), width=8, height=4, polarity=Polarity.SOUTH)

    sample = evaluate_field((10, 10), [magnet])

    assert sample == Vector(0.0, 0.0)
    assert needle_angle_degrees(sample.x, sample.y) == 0.0


def test_multiplier_doubles_magnitude(mixed_magnets: list[Magnet]) -> None:
    query = Vector(250.0, 190.0)

    base = evaluate_field(query, mixed_magnets, 1.0)
    doubled = evaluate_field(query, mixed_magnets, 2.0)

    assert doubled.magnitude == pytest.approx(2 * base.magnitude, rel=1e-12)
    assert doubled.x == pytest.approx(2 * base.x, rel=1e-12)
    assert doubled.y == pytest.approx(2 * base.y, rel=1e-12)


def test_zero_multiplier_gives_zero_field(mixed_magnets: list[Magnet]) -> None:
    sample = evaluate_field((250.0, 190.0), mixed_magnets, 0.0)

    assert sample.magnitude == 0.0


def test_strength_scales_linearly() -> None:
    weak = Magnet(center=(0, 0), width=100, height=50, polarity=Polarity.NORTH, strength=1.0)
    strong = Magnet(center=(0, 0), width=100, height=50, polarity=Polarity.NORTH, strength=3.0)

    a = evaluate_field((30, 70), [weak])
    b = evaluate_field((30, 70), [strong])

    assert b.x == pytest.approx(3 * a.x)
    assert b.y == pytest.approx(3 * a.y)


def test_single_scenario_golden_value() -> None:
    # Near poles at x = 456 (N) and x = 464 (S) are 4 units away,
    # far poles at x = 344 (N) and x = 576 (S) are 116 units away.
    sample = evaluate_field((460, 250), apply_scenario("single"))

    assert sample.x == pytest.approx(2 * 2500 / 16 + 2 * 2500 / 116**2, rel=1e-12)
    assert sample.y == 0.0
    assert needle_angle_degrees(sample.x, sample.y) == pytest.approx(0.0, abs=1e-9)


def test_attract_and_repel_at_gap_centre() -> None:
    centre = (400, 250)
    attract = apply_scenario("attract")
    repel = apply_scenario("repel")

    left = evaluate_field(centre, attract[:2])
    right_attract = evaluate_field(centre, attract[2:])
    right_repel = evaluate_field(centre, repel[2:])

    # the swapped pair contributes equal magnitude and opposite sign
    assert right_repel.x == pytest.approx(-right_attract.x, rel=1e-12)
    assert right_repel.magnitude == pytest.approx(right_attract.magnitude, rel=1e-12)

    total_attract = evaluate_field(centre, attract)
    total_repel = evaluate_field(centre, repel)
    assert (total_attract - left).x == pytest.approx(-(total_repel - left).x, rel=1e-9)

    # with the mirrored left pair, repel cancels at the centre and attract doubles
    assert total_repel.x == pytest.approx(0.0, abs=1e-12)
    assert total_attract.x == pytest.approx(2 * left.x, rel=1e-12)
    expected = 2 * 2500 * (1 / 154**2 + 1 / 246**2 - 1 / 234**2 - 1 / 326**2)
    assert total_attract.x == pytest.approx(expected, rel=1e-9)


def test_evaluate_does_not_mutate_magnets(mixed_magnets: list[Magnet]) -> None:
    before = list(mixed_magnets)

    evaluate_field((1.0, 2.0), mixed_magnets, 4.0)

    assert mixed_magnets == before


def test_grid_matches_point_evaluation(mixed_magnets: list[Magnet]) -> None:
    xs = np.linspace(0.0, 800.0, 9)
    ys = np.linspace(0.0, 500.0, 6)

    field_x, field_y = sample_field_grid(xs, ys, mixed_magnets, 1.5)

    assert field_x.shape == field_y.shape == (6, 9)
    for j, y in enumerate(ys):
        for i, x in enumerate(xs):
            sample = evaluate_field((x, y), mixed_magnets, 1.5)
            assert field_x[j, i] == pytest.approx(sample.x, rel=1e-9, abs=1e-12)
            assert field_y[j, i] == pytest.approx(sample.y, rel=1e-9, abs=1e-12)


def test_grid_node_on_pole_is_finite() -> None:
    magnet = Magnet(center=(0, 0), width=100, height=50, polarity=Polarity.NORTH)

    field_x, field_y = sample_field_grid([-46.0, 0.0, 46.0], [0.0], [magnet])

    assert np.all(np.isfinite(field_x)) and np.all(np.isfinite(field_y))
    assert field_x[0, 0] == pytest.approx(-2500 / 92**2)
    assert field_x[0, 1] == pytest.approx(0.0, abs=1e-12)


def test_grid_without_magnets_is_zero() -> None:
    field_x, field_y = sample_field_grid([0.0, 1.0], [0.0, 1.0, 2.0], [])

    np.testing.assert_array_equal(field_x, np.zeros((3, 2)))
    np.testing.assert_array_equal(field_y, np.zeros((3, 2)))


@pytest.mark.parametrize(
    "fx, fy, expected",
    [
        (0.0, 0.0, 0.0),
        (1.0, 0.0, 0.0),
        (0.0, 2.0, 90.0),
        (0.0, -2.0, -90.0),
        (-3.0, 0.0, 180.0),
        (-3.0, -0.0, 180.0),
        (1.0, 1.0, 45.0),
        (-1.0, -1.0, -135.0),
    ],
)
def test_needle_angle(fx: float, fy: float, expected: float) -> None:
    assert needle_angle_degrees(fx, fy) == pytest.approx(expected)


def test_needle_angle_range() -> None:
    for k in range(-720, 721, 7):
        rad = math.radians(k)
        angle = needle_angle_degrees(math.cos(rad), math.sin(rad))
        assert -180.0 < angle <= 180.0
