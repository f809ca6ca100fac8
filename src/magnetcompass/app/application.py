from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass

from PySide6.QtCore import QCoreApplication, QSettings
from PySide6.QtWidgets import QApplication

from magnetcompass.config import DEFAULT_SCENARIO, MULTIPLIER_DEFAULT
from magnetcompass.model.state import clamp_multiplier

logger = logging.getLogger(__name__)

ORG_ID = "magnetcompass"
APP_ID = "magnetcompass"

VISIBLE_APP_NAME = "Magnet Compass"


@dataclass
class Preferences:
    """User choices restored on the next start. Drawn content is never stored."""
    scenario: str = DEFAULT_SCENARIO
    multiplier: float = MULTIPLIER_DEFAULT


def load_preferences(settings: QSettings | None = None) -> Preferences:
    settings = settings or QSettings()
    scenario = settings.value("field/scenario", DEFAULT_SCENARIO, type=str) or DEFAULT_SCENARIO
    try:
        multiplier = clamp_multiplier(settings.value("field/multiplier", MULTIPLIER_DEFAULT, type=float))
    except (TypeError, ValueError):
        logger.warning("Stored multiplier is not a number, using the default.")
        multiplier = MULTIPLIER_DEFAULT
    return Preferences(scenario=scenario, multiplier=multiplier)


def save_preferences(prefs: Preferences, settings: QSettings | None = None) -> None:
    settings = settings or QSettings()
    settings.setValue("field/scenario", prefs.scenario)
    settings.setValue("field/multiplier", prefs.multiplier)
    settings.sync()
    logger.debug(f"Preferences saved: {prefs}")


def create_app() -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication.instance() or QApplication(sys.argv)

    visible_name = QCoreApplication.translate("App", VISIBLE_APP_NAME)
    app.setApplicationDisplayName(visible_name)

    return app
