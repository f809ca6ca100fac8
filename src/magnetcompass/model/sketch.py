"""
Sketch (Plot Points and Freehand Lines)
=======================================
Holds what the user drew on top of the simulation: marker points dropped by
clicking and freehand strokes traced in drawing mode.

Nothing here is saved; the sketch is cleared whenever a scenario is applied.

Classes:
    Sketch: Points, strokes and the drawing-mode state machine.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from magnetcompass.model.geometry_primitives import Vector

logger = logging.getLogger(__name__)

Segment = tuple[Vector, Vector]


@dataclass
class Sketch:
    points: list[Vector] = field(default_factory=list)
    strokes: list[list[Vector]] = field(default_factory=list)
    drawing_mode: bool = False
    is_drawing: bool = False

    _current: list[Vector] = field(default_factory=list, repr=False)

    # --- plot points ---

    def add_point(self, p: Vector) -> bool:
        """Drop a marker point. Ignored in drawing mode."""
        if self.drawing_mode or self.is_drawing:
            return False
        self.points.append(Vector.of(p))
        return True

    # --- freehand strokes ---

    def begin_stroke(self, p: Vector) -> bool:
        if not self.drawing_mode:
            return False
        self.is_drawing = True
        self._current = [Vector.of(p)]
        return True

    def extend_stroke(self, p: Vector) -> Optional[Segment]:
        """Append a point to the current stroke and return the new segment."""
        if not self.is_drawing:
            return None
        p = Vector.of(p)
        prev = self._current[-1]
        self._current.append(p)
        return prev, p

    def end_stroke(self) -> Optional[list[Vector]]:
        """Finish the current stroke. A stroke without a segment is dropped."""
        if not self.is_drawing:
            return None
        self.is_drawing = False
        stroke, self._current = self._current, []
        if len(stroke) < 2:
            return None
        self.strokes.append(stroke)
        return stroke

    def toggle_drawing_mode(self) -> bool:
        self.drawing_mode = not self.drawing_mode
        if not self.drawing_mode:
            # segments of an unfinished stroke are already on screen, keep them
            self.end_stroke()
        logger.debug(f"Drawing mode {'on' if self.drawing_mode else 'off'}.")
        return self.drawing_mode

    def clear(self) -> None:
        """Remove all points and strokes and leave drawing mode."""
        if self.drawing_mode:
            self.toggle_drawing_mode()
        self.points.clear()
        self.strokes.clear()

    @property
    def segment_count(self) -> int:
        return sum(len(s) - 1 for s in self.strokes) + max(0, len(self._current) - 1)
