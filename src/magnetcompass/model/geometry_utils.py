from __future__ import annotations

from magnetcompass.model.geometry_primitives import Vector


def clamp_position(
    top_left: Vector,
    item_size: tuple[float, float],
    area_size: tuple[float, float],
) -> Vector:
    """
    Keep a rectangular item fully inside the simulation area.

    Args:
        top_left: Requested top-left corner of the item.
        item_size: (width, height) of the item.
        area_size: (width, height) of the area; its top-left corner is (0, 0).

    Returns:
        The corrected top-left corner.
    """
    max_x = max(0.0, area_size[0] - item_size[0])
    max_y = max(0.0, area_size[1] - item_size[1])
    return Vector(
        min(max_x, max(0.0, top_left.x)),
        min(max_y, max(0.0, top_left.y)),
    )


def item_center(top_left: Vector, item_size: tuple[float, float]) -> Vector:
    """Centre of an axis-aligned item given its top-left corner."""
    return Vector(top_left.x + item_size[0] / 2, top_left.y + item_size[1] / 2)

