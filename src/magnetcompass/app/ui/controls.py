from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from PySide6.QtCore import Qt, Signal, Slot
from PySide6.QtWidgets import (
    QButtonGroup, QCheckBox, QFormLayout, QGroupBox, QHBoxLayout, QLabel,
    QPushButton, QSlider, QVBoxLayout, QWidget
)

from magnetcompass.config import MULTIPLIER_MAX, MULTIPLIER_MIN, MULTIPLIER_STEP
from magnetcompass.model.geometry_primitives import Vector
from magnetcompass.model.scenarios import ScenarioName, list_scenarios

if TYPE_CHECKING:
    from magnetcompass.app.state import Store

logger = logging.getLogger(__name__)

SCENARIO_LABELS = {
    ScenarioName.SINGLE: "Single magnet",
    ScenarioName.ATTRACT: "Attract",
    ScenarioName.REPEL: "Repel",
}


class ControlPanel(QWidget):
    """Scenario buttons, drawing tools and the strength slider."""
    field_map_toggled = Signal(bool)

    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store

        layout = QVBoxLayout(self)

        # --- Scenarios ---
        grp_scenario = QGroupBox(self.tr("Scenario"))
        lay_scenario = QVBoxLayout(grp_scenario)
        self.scenario_group = QButtonGroup(self)
        self.scenario_group.setExclusive(True)
        self._scenario_buttons: dict[str, QPushButton] = {}
        for name in list_scenarios():
            btn = QPushButton(self.tr(SCENARIO_LABELS.get(name, name)))
            btn.setCheckable(True)
            btn.clicked.connect(lambda _checked=False, n=name: self.on_scenario_clicked(n))
            self.scenario_group.addButton(btn)
            lay_scenario.addWidget(btn)
            self._scenario_buttons[name] = btn
        layout.addWidget(grp_scenario)

        # --- Strength ---
        grp_strength = QGroupBox(self.tr("Magnet strength"))
        lay_strength = QHBoxLayout(grp_strength)
        self.slider = QSlider(Qt.Horizontal)
        self.slider.setRange(self._to_ticks(MULTIPLIER_MIN), self._to_ticks(MULTIPLIER_MAX))
        self.slider.setValue(self._to_ticks(store.field_model.global_multiplier))
        self.slider.valueChanged.connect(self.on_slider_changed)
        self.lbl_strength = QLabel()
        self.lbl_strength.setMinimumWidth(40)
        lay_strength.addWidget(self.slider, 1)
        lay_strength.addWidget(self.lbl_strength)
        layout.addWidget(grp_strength)

        # --- Sketch tools ---
        grp_tools = QGroupBox(self.tr("Field lines"))
        lay_tools = QVBoxLayout(grp_tools)
        self.btn_draw = QPushButton()
        self.btn_draw.setCheckable(True)
        self.btn_draw.clicked.connect(lambda *_: self.store.toggle_drawing_mode())
        self.btn_clear = QPushButton(self.tr("Clear drawings"))
        self.btn_clear.clicked.connect(self.store.clear_sketch)
        self.chk_field_map = QCheckBox(self.tr("Show field map"))
        self.chk_field_map.toggled.connect(self.field_map_toggled)
        lay_tools.addWidget(self.btn_draw)
        lay_tools.addWidget(self.btn_clear)
        lay_tools.addWidget(self.chk_field_map)
        layout.addWidget(grp_tools)

        # --- Readout ---
        grp_readout = QGroupBox(self.tr("Compass"))
        form = QFormLayout(grp_readout)
        self.lbl_angle = QLabel("—")
        self.lbl_field = QLabel("—")
        form.addRow(self.tr("Needle angle:"), self.lbl_angle)
        form.addRow(self.tr("Field:"), self.lbl_field)
        layout.addWidget(grp_readout)

        layout.addStretch()

        # --- Store -> UI ---
        store.scenario_changed.connect(self.on_scenario_changed)
        store.multiplier_changed.connect(self.on_multiplier_changed)
        store.drawing_mode_changed.connect(self.on_drawing_mode_changed)
        store.needle_changed.connect(self.on_needle_changed)
        store.field_sampled.connect(self.on_field_sampled)

        self.on_multiplier_changed(store.field_model.global_multiplier)
        self.on_drawing_mode_changed(store.sketch.drawing_mode)
        if store.field_model.scenario:
            self.on_scenario_changed(store.field_model.scenario)

    @staticmethod
    def _to_ticks(value: float) -> int:
        return int(round(value / MULTIPLIER_STEP))

    # ------------------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------------------

    @Slot(int)
    def on_slider_changed(self, ticks: int) -> None:
        self.store.set_multiplier(ticks * MULTIPLIER_STEP)

    def on_scenario_clicked(self, name: str) -> None:
        if not self.store.set_scenario(name):
            # keep the button of the arrangement that is still shown
            current = self._scenario_buttons.get(self.store.field_model.scenario or "")
            if current is not None:
                current.setChecked(True)

    @Slot(str)
    def on_scenario_changed(self, name: str) -> None:
        btn = self._scenario_buttons.get(name)
        if btn is not None:
            btn.setChecked(True)

    @Slot(float)
    def on_multiplier_changed(self, value: float) -> None:
        self.lbl_strength.setText(f"{value:.1f}×")
        ticks = self._to_ticks(value)
        if self.slider.value() != ticks:
            self.slider.blockSignals(True)
            self.slider.setValue(ticks)
            self.slider.blockSignals(False)

    @Slot(bool)
    def on_drawing_mode_changed(self, enabled: bool) -> None:
        self.btn_draw.setChecked(enabled)
        self.btn_draw.setText(self.tr("Drawing mode on") if enabled else self.tr("Drawing mode off"))

    @Slot(float)
    def on_needle_changed(self, degrees: float) -> None:
        self.lbl_angle.setText(f"{degrees:.1f}°")

    def on_field_sampled(self, sample: Vector) -> None:
        self.lbl_field.setText(f"({sample.x:.3g}, {sample.y:.3g})  |B| = {sample.magnitude:.3g}")
