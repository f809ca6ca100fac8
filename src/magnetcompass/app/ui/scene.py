"""
Simulation View
===============
QGraphicsView showing the magnets, the draggable compass, plot points and
freehand lines.

The scene uses the same coordinates as the model: (0, 0) is the top-left
corner of the simulation area, y grows downwards, one unit is one pixel at
100 % zoom.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QPainter, QPen, QPolygonF
from PySide6.QtWidgets import (
    QGraphicsEllipseItem, QGraphicsItem, QGraphicsLineItem, QGraphicsPolygonItem,
    QGraphicsRectItem, QGraphicsScene, QGraphicsSimpleTextItem, QGraphicsView, QWidget
)

from magnetcompass.model.field import sample_field_grid
from magnetcompass.model.geometry_primitives import Vector
from magnetcompass.model.magnets import Magnet, Polarity

if TYPE_CHECKING:
    from magnetcompass.app.state import Store

logger = logging.getLogger(__name__)

NORTH_COLOR = QColor("#d9534f")
SOUTH_COLOR = QColor("#337ab7")
POINT_COLOR = QColor("#222222")
LINE_COLOR = QColor("#2e7d32")
FIELD_MAP_COLOR = QColor(150, 150, 150)

FIELD_MAP_SPACING = 25.0
FIELD_MAP_ARROW = 10.0


# -------------------------------------------------------------------------------
# Items
# -------------------------------------------------------------------------------

class MagnetItem(QGraphicsRectItem):
    """Rectangle with an N/S label, placed from a Magnet descriptor."""

    def __init__(self, magnet: Magnet, parent: QGraphicsItem | None = None) -> None:
        super().__init__(QRectF(magnet.left, magnet.top, magnet.width, magnet.height), parent)
        self.magnet = magnet
        color = NORTH_COLOR if magnet.polarity is Polarity.NORTH else SOUTH_COLOR
        self.setBrush(QBrush(color))
        self.setPen(QPen(color.darker(150), 1.5))
        self.setZValue(1)

        label = QGraphicsSimpleTextItem(magnet.label, self)
        label.setBrush(QBrush(Qt.white))
        br = label.boundingRect()
        label.setPos(magnet.center.x - br.width() / 2, magnet.center.y - br.height() / 2)


class CompassItem(QGraphicsEllipseItem):
    """
    Draggable compass. The item position is the top-left corner of its
    bounding square; the needle rotates about the centre.
    """

    def __init__(self, store: Store, parent: QGraphicsItem | None = None) -> None:
        size = store.compass_size
        super().__init__(QRectF(0.0, 0.0, size, size), parent)
        self._store = store
        self.setBrush(QBrush(QColor(245, 245, 245)))
        self.setPen(QPen(QColor(60, 60, 60), 2))
        self.setZValue(10)
        self.setCursor(Qt.OpenHandCursor)
        self.setFlag(QGraphicsItem.ItemIsMovable, True)
        self.setFlag(QGraphicsItem.ItemSendsGeometryChanges, True)

        c = size / 2
        half = 0.42 * size
        w = 0.08 * size
        # Needle at 0 deg points along +x: red tip to the right
        self.tip = QGraphicsPolygonItem(
            QPolygonF([QPointF(c, c - w), QPointF(c + half, c), QPointF(c, c + w)]), self
        )
        self.tip.setBrush(QBrush(NORTH_COLOR))
        self.tail = QGraphicsPolygonItem(
            QPolygonF([QPointF(c, c - w), QPointF(c - half, c), QPointF(c, c + w)]), self
        )
        self.tail.setBrush(QBrush(QColor(120, 120, 120)))
        for part in (self.tip, self.tail):
            part.setPen(QPen(Qt.NoPen))
            part.setTransformOriginPoint(c, c)

        self.setPos(store.compass_top_left.x, store.compass_top_left.y)

    def set_angle(self, degrees: float) -> None:
        self.tip.setRotation(degrees)
        self.tail.setRotation(degrees)

    def itemChange(self, change, value):
        if change == QGraphicsItem.ItemPositionChange:
            clamped = self._store.clamp_compass(Vector(value.x(), value.y()))
            return QPointF(clamped.x, clamped.y)
        if change == QGraphicsItem.ItemPositionHasChanged:
            self._store.move_compass(Vector(value.x(), value.y()))
        return super().itemChange(change, value)

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.LeftButton:
            self.setCursor(Qt.ClosedHandCursor)
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event) -> None:
        self.setCursor(Qt.OpenHandCursor)
        super().mouseReleaseEvent(event)


# -------------------------------------------------------------------------------
# View
# -------------------------------------------------------------------------------

class SimulationView(QGraphicsView):
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.setRenderHints(self.renderHints() | QPainter.Antialiasing | QPainter.TextAntialiasing)
        self.setResizeAnchor(QGraphicsView.AnchorViewCenter)
        self.setMouseTracking(False)

        width, height = store.area_size
        self._scene = QGraphicsScene(0.0, 0.0, width, height, self)
        self.setScene(self._scene)
        self.area_item = self._scene.addRect(
            QRectF(0.0, 0.0, width, height), QPen(QColor(180, 180, 180)), QBrush(Qt.white)
        )
        self.area_item.setZValue(-10)

        self.compass = CompassItem(store)
        self._scene.addItem(self.compass)

        self._magnet_items: list[MagnetItem] = []
        self._point_items: list[QGraphicsEllipseItem] = []
        self._line_items: list[QGraphicsLineItem] = []
        self._field_map_items: list[QGraphicsLineItem] = []
        self._field_map_visible = False
        self._click_candidate = False

        store.magnets_changed.connect(self.on_magnets_changed)
        store.needle_changed.connect(self.compass.set_angle)
        store.compass_moved.connect(self.on_compass_moved)
        store.multiplier_changed.connect(lambda *_: self._refresh_field_map())
        store.point_added.connect(self.on_point_added)
        store.segment_added.connect(self.on_segment_added)
        store.sketch_cleared.connect(self.on_sketch_cleared)
        store.drawing_mode_changed.connect(self.on_drawing_mode_changed)

        self.on_magnets_changed(store.field_model.magnets)
        self.compass.set_angle(store.needle_angle)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def set_field_map_visible(self, visible: bool) -> None:
        self._field_map_visible = visible
        self._refresh_field_map()

    # ------------------------------------------------------------------------------
    # Store slots
    # ------------------------------------------------------------------------------

    def on_magnets_changed(self, magnets: tuple[Magnet, ...]) -> None:
        for item in self._magnet_items:
            self._scene.removeItem(item)
        self._magnet_items = [MagnetItem(m) for m in magnets]
        for item in self._magnet_items:
            self._scene.addItem(item)
        self._refresh_field_map()

    def on_compass_moved(self, top_left: Vector) -> None:
        if self.compass.pos() != QPointF(top_left.x, top_left.y):
            self.compass.setPos(top_left.x, top_left.y)

    def on_point_added(self, p: Vector) -> None:
        r = 3.0
        item = self._scene.addEllipse(
            QRectF(p.x - r, p.y - r, 2 * r, 2 * r), QPen(Qt.NoPen), QBrush(POINT_COLOR)
        )
        item.setZValue(5)
        self._point_items.append(item)

    def on_segment_added(self, start: Vector, end: Vector) -> None:
        item = self._scene.addLine(start.x, start.y, end.x, end.y, QPen(LINE_COLOR, 2))
        item.setZValue(4)
        self._line_items.append(item)

    def on_sketch_cleared(self) -> None:
        for item in self._point_items + self._line_items:
            self._scene.removeItem(item)
        self._point_items.clear()
        self._line_items.clear()

    def on_drawing_mode_changed(self, enabled: bool) -> None:
        self.viewport().setCursor(Qt.CrossCursor if enabled else Qt.ArrowCursor)

    # ------------------------------------------------------------------------------
    # Mouse handling (plot points / freehand drawing)
    # ------------------------------------------------------------------------------

    def _is_interactive_item(self, item: QGraphicsItem | None) -> bool:
        while item is not None:
            if isinstance(item, (CompassItem, MagnetItem)):
                return True
            item = item.parentItem()
        return False

    def mousePressEvent(self, event) -> None:
        self._click_candidate = False
        if event.button() != Qt.LeftButton:
            super().mousePressEvent(event)
            return

        view_pos = event.position().toPoint()
        if self._is_interactive_item(self.itemAt(view_pos)):
            super().mousePressEvent(event)
            return

        scene_pos = self.mapToScene(view_pos)
        if self.store.sketch.drawing_mode:
            self.store.begin_stroke(Vector(scene_pos.x(), scene_pos.y()))
            event.accept()
            return

        self._click_candidate = True
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event) -> None:
        if self.store.sketch.is_drawing:
            scene_pos = self.mapToScene(event.position().toPoint())
            self.store.extend_stroke(Vector(scene_pos.x(), scene_pos.y()))
            event.accept()
            return
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event) -> None:
        if self.store.sketch.is_drawing:
            self.store.end_stroke()
            event.accept()
            return
        if self._click_candidate and event.button() == Qt.LeftButton:
            self._click_candidate = False
            scene_pos = self.mapToScene(event.position().toPoint())
            if self._scene.sceneRect().contains(scene_pos):
                self.store.add_point(Vector(scene_pos.x(), scene_pos.y()))
        super().mouseReleaseEvent(event)

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self.fitInView(self._scene.sceneRect(), Qt.KeepAspectRatio)

    # ------------------------------------------------------------------------------
    # Field map overlay
    # ------------------------------------------------------------------------------

    def _refresh_field_map(self) -> None:
        for item in self._field_map_items:
            self._scene.removeItem(item)
        self._field_map_items.clear()
        if not self._field_map_visible:
            return

        width, height = self.store.area_size
        xs = np.arange(FIELD_MAP_SPACING / 2, width, FIELD_MAP_SPACING)
        ys = np.arange(FIELD_MAP_SPACING / 2, height, FIELD_MAP_SPACING)
        model = self.store.field_model
        field_x, field_y = sample_field_grid(xs, ys, model.magnets, model.global_multiplier)

        magnitude = np.hypot(field_x, field_y)
        nonzero = magnitude > 0.0
        ux = np.divide(field_x, magnitude, out=np.zeros_like(field_x), where=nonzero)
        uy = np.divide(field_y, magnitude, out=np.zeros_like(field_y), where=nonzero)

        pen = QPen(FIELD_MAP_COLOR, 1)
        half = FIELD_MAP_ARROW / 2
        for j, y in enumerate(ys):
            for i, x in enumerate(xs):
                if not nonzero[j, i]:
                    continue
                dx, dy = half * ux[j, i], half * uy[j, i]
                item = self._scene.addLine(x - dx, y - dy, x + dx, y + dy, pen)
                item.setZValue(-5)
                self._field_map_items.append(item)
        logger.debug(f"Field map redrawn with {len(self._field_map_items)} arrows.")
