from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from magnetcompass.config import (
    AREA_HEIGHT, AREA_WIDTH, COMPASS_SIZE, COMPASS_START, DEFAULT_SCENARIO, MULTIPLIER_DEFAULT
)
from magnetcompass.model.field import needle_angle_degrees
from magnetcompass.model.geometry_primitives import Vector
from magnetcompass.model.geometry_utils import clamp_position, item_center
from magnetcompass.model.magnets import InvalidMagnetGeometry
from magnetcompass.model.sketch import Sketch
from magnetcompass.model.state import FieldModel, clamp_multiplier

logger = logging.getLogger(__name__)


class Store(QObject):
    """
    Central state store with signals for control panel / view sync.

    Owns the FieldModel, the sketch and the compass position. Widgets call the
    mutators; every mutation that can change the field re-emits the needle.
    """
    magnets_changed = Signal(object)        # tuple[Magnet, ...]
    scenario_changed = Signal(str)
    multiplier_changed = Signal(float)
    compass_moved = Signal(object)          # Vector, top-left corner
    needle_changed = Signal(float)          # degrees
    field_sampled = Signal(object)          # Vector, field at compass centre

    point_added = Signal(object)            # Vector
    segment_added = Signal(object, object)  # Vector, Vector
    drawing_mode_changed = Signal(bool)
    sketch_cleared = Signal()
    error_occurred = Signal(str)

    def __init__(
        self,
        field_model: Optional[FieldModel] = None,
        area_size: tuple[float, float] = (AREA_WIDTH, AREA_HEIGHT),
        compass_size: float = COMPASS_SIZE,
    ) -> None:
        super().__init__()
        self.field_model = field_model if field_model is not None else FieldModel()
        self.sketch = Sketch()
        self.area_size = area_size
        self.compass_size = compass_size
        self.compass_top_left = Vector.of(COMPASS_START)
        self.needle_angle: float = 0.0

    # ------------------------------------------------------------------------------
    # Compass
    # ------------------------------------------------------------------------------

    def compass_center(self) -> Vector:
        return item_center(self.compass_top_left, (self.compass_size, self.compass_size))

    def clamp_compass(self, top_left: Vector) -> Vector:
        return clamp_position(
            Vector.of(top_left), (self.compass_size, self.compass_size), self.area_size
        )

    def move_compass(self, top_left: Vector) -> Vector:
        """Move the compass (clamped to the area) and refresh the needle."""
        clamped = self.clamp_compass(top_left)
        if clamped != self.compass_top_left:
            self.compass_top_left = clamped
            self.compass_moved.emit(clamped)
        self.update_needle()
        return clamped

    def reset_compass(self) -> None:
        self.move_compass(Vector.of(COMPASS_START))

    def update_needle(self) -> float:
        """Recompute the field at the compass centre and emit the needle angle."""
        sample = self.field_model.evaluate_field(self.compass_center())
        self.needle_angle = needle_angle_degrees(sample.x, sample.y)
        logger.debug(
            f"Field at compass ({sample.x:.4g}, {sample.y:.4g}) -> {self.needle_angle:.2f} deg"
        )
        self.field_sampled.emit(sample)
        self.needle_changed.emit(self.needle_angle)
        return self.needle_angle

    # ------------------------------------------------------------------------------
    # Magnets
    # ------------------------------------------------------------------------------

    def set_scenario(self, name: str = DEFAULT_SCENARIO) -> bool:
        """
        Replace all magnets with a preset and wipe the sketch.

        A preset with invalid geometry is reported through `error_occurred`
        and the current arrangement stays in place.
        """
        try:
            self.field_model.apply_scenario(name)
        except InvalidMagnetGeometry as e:
            logger.exception(f"Scenario '{name}' could not be applied")
            self.error_occurred.emit(str(e))
            return False
        self.clear_sketch()
        self.magnets_changed.emit(self.field_model.magnets)
        self.scenario_changed.emit(str(name))
        self.update_needle()
        return True

    def set_multiplier(self, value: float) -> float:
        value = clamp_multiplier(value)
        if value != self.field_model.global_multiplier:
            self.field_model.set_global_multiplier(value)
            logger.info(f"Strength multiplier set to {value:g}.")
            self.multiplier_changed.emit(value)
            self.update_needle()
        return value

    def reset_multiplier(self) -> None:
        self.set_multiplier(MULTIPLIER_DEFAULT)

    # ------------------------------------------------------------------------------
    # Sketch
    # ------------------------------------------------------------------------------

    def add_point(self, p: Vector) -> bool:
        if self.sketch.add_point(p):
            self.point_added.emit(Vector.of(p))
            return True
        return False

    def begin_stroke(self, p: Vector) -> bool:
        return self.sketch.begin_stroke(p)

    def extend_stroke(self, p: Vector) -> None:
        segment = self.sketch.extend_stroke(p)
        if segment is not None:
            self.segment_added.emit(*segment)

    def end_stroke(self) -> None:
        self.sketch.end_stroke()

    def toggle_drawing_mode(self) -> bool:
        enabled = self.sketch.toggle_drawing_mode()
        self.drawing_mode_changed.emit(enabled)
        return enabled

    def clear_sketch(self) -> None:
        was_drawing_mode = self.sketch.drawing_mode
        self.sketch.clear()
        if was_drawing_mode:
            self.drawing_mode_changed.emit(False)
        self.sketch_cleared.emit()
