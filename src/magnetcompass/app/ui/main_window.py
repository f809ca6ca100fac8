"""
Main Application Window
=======================
The primary GUI container that holds the Menu Bar, the control panel and the
simulation view.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects global actions (reset, exit) to the store.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction
from PySide6.QtWidgets import QMainWindow, QSplitter

from magnetcompass.app.application import VISIBLE_APP_NAME, Preferences, save_preferences
from magnetcompass.app.state import Store
from magnetcompass.app.ui.controls import ControlPanel
from magnetcompass.app.ui.scene import SimulationView
from magnetcompass.config import DEFAULT_SCENARIO

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, store: Store) -> None:
        super().__init__()
        self.store = store
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1150, 620)

        # --- SPLITTER (CONTENT AREA) ---
        splitter = QSplitter(Qt.Horizontal)
        self.setCentralWidget(splitter)

        # LEFT SIDE: Controls
        self.controls = ControlPanel(store)
        splitter.addWidget(self.controls)

        # RIGHT SIDE: Simulation area
        self.view = SimulationView(store)
        splitter.addWidget(self.view)
        splitter.setSizes([280, 870])

        # --- SIGNAL CONNECTIONS ---
        self.controls.field_map_toggled.connect(self.view.set_field_map_visible)
        store.scenario_changed.connect(
            lambda name: self.statusBar().showMessage(self.tr("Scenario: {0}").format(name), 3000)
        )
        store.error_occurred.connect(lambda message: self.statusBar().showMessage(message, 5000))

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

    def _create_actions(self) -> None:
        self.act_reset = QAction(self.tr("Reset"), self)
        self.act_reset.setShortcut("Ctrl+R")
        self.act_reset.triggered.connect(self.on_reset)

        self.act_reset_compass = QAction(self.tr("Reset compass position"), self)
        self.act_reset_compass.triggered.connect(self.store.reset_compass)

        self.act_draw = QAction(self.tr("Toggle drawing mode"), self)
        self.act_draw.setShortcut("D")
        self.act_draw.triggered.connect(lambda *_: self.store.toggle_drawing_mode())

        self.act_clear = QAction(self.tr("Clear drawings"), self)
        self.act_clear.setShortcut("Ctrl+L")
        self.act_clear.triggered.connect(self.store.clear_sketch)

        self.act_exit = QAction(self.tr("Exit"), self)
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu(self.tr("&File"))
        file_menu.addAction(self.act_reset)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)

        view_menu = menu_bar.addMenu(self.tr("&Simulation"))
        view_menu.addAction(self.act_reset_compass)
        view_menu.addSeparator()
        view_menu.addAction(self.act_draw)
        view_menu.addAction(self.act_clear)

    # --- SLOTS ---

    def on_reset(self) -> None:
        """Back to the default scenario, strength and compass position."""
        self.store.reset_multiplier()
        self.store.set_scenario(DEFAULT_SCENARIO)
        self.store.reset_compass()

    def closeEvent(self, event) -> None:
        model = self.store.field_model
        save_preferences(Preferences(
            scenario=model.scenario or DEFAULT_SCENARIO,
            multiplier=model.global_multiplier,
        ))
        super().closeEvent(event)
