"""
Field Superposition Engine
==========================
Sums the inverse-square contributions of every pole at a query point and
maps the resulting vector to a needle angle.

Every function here is pure: magnets and poles are read, never modified, and
nothing is cached between calls.

Functions:
    evaluate_field: Net field vector at a single point.
    sample_field_grid: Vectorised evaluation on a rectilinear grid.
    needle_angle_degrees: Display angle of a field vector.
"""
from __future__ import annotations

import logging
import math
from typing import Iterable, Sequence, TYPE_CHECKING

import numpy as np

from magnetcompass.config import SINGULARITY_DISTANCE
from magnetcompass.model.geometry_primitives import Vector
from magnetcompass.model.magnets import Magnet, resolve_poles

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def evaluate_field(
    query_point: Vector | Sequence[float],
    magnets: Iterable[Magnet],
    global_multiplier: float = 1.0,
) -> Vector:
    """
    Net field at `query_point` produced by all poles of all magnets.

    Each pole contributes `polarity * s / dist**2` along the unit vector from
    the pole to the query point, where `s` is the pole's effective strength.
    Poles within `SINGULARITY_DISTANCE` of the query point are skipped.

    Args:
        query_point: World coordinates (x, y) of the sample point.
        magnets: Magnets to superpose. Iterated once, in order.
        global_multiplier: Scalar applied to every pole.

    Returns:
        The field vector; (0, 0) when there is nothing to sum.
    """
    q = Vector.of(query_point)
    field_x = 0.0
    field_y = 0.0

    for magnet in magnets:
        for pole in resolve_poles(magnet):
            dx = q.x - pole.position.x
            dy = q.y - pole.position.y
            dist = math.sqrt(dx * dx + dy * dy)
            if dist <= SINGULARITY_DISTANCE:
                continue

            strength = pole.effective_strength(global_multiplier) / (dist * dist)
            field_x += pole.polarity * strength * dx / dist
            field_y += pole.polarity * strength * dy / dist

    return Vector(field_x, field_y)


def sample_field_grid(
    xs: npt.ArrayLike,
    ys: npt.ArrayLike,
    magnets: Iterable[Magnet],
    global_multiplier: float = 1.0,
) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """
    Evaluate the field on the grid spanned by `xs` and `ys`.

    Same model as `evaluate_field`, vectorised over all grid nodes. Useful for
    field maps and overlays.

    Args:
        xs: 1D array of x coordinates (columns).
        ys: 1D array of y coordinates (rows).
        magnets: Magnets to superpose.
        global_multiplier: Scalar applied to every pole.

    Returns:
        (field_x, field_y), each of shape (len(ys), len(xs)).
    """
    gx, gy = np.meshgrid(np.asarray(xs, dtype=float), np.asarray(ys, dtype=float))
    field_x = np.zeros_like(gx)
    field_y = np.zeros_like(gy)

    for magnet in magnets:
        for pole in resolve_poles(magnet):
            dx = gx - pole.position.x
            dy = gy - pole.position.y
            dist = np.sqrt(dx * dx + dy * dy)

            # Singularity guard: masked nodes contribute zero
            valid = dist > SINGULARITY_DISTANCE
            safe = np.where(valid, dist, 1.0)
            scale = np.where(
                valid,
                pole.polarity * pole.effective_strength(global_multiplier) / (safe * safe * safe),
                0.0,
            )
            field_x += scale * dx
            field_y += scale * dy

    return field_x, field_y


def needle_angle_degrees(field_x: float, field_y: float) -> float:
    """
    Angle of the field vector in degrees, in (-180, 180].

    A zero field maps to 0 (needle along the reference axis). No smoothing is
    applied; animation belongs to the view.
    """
    angle = math.degrees(math.atan2(field_y, field_x))
    # atan2(-0.0, x<0) yields -180
    if angle <= -180.0:
        angle = 180.0
    return angle
