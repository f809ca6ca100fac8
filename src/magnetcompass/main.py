"""
Application Initialization
==========================
This module wires the Model, the Store and the Main Window together and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the FieldModel from the saved preferences.
2. Wraps it in the Store that the widgets talk to.
3. Passes the Store into the Main Window.
"""
import logging
import sys

from magnetcompass.app.application import create_app, load_preferences
from magnetcompass.app.state import Store
from magnetcompass.app.ui.main_window import MainWindow
from magnetcompass.logging_config import setup_logging
from magnetcompass.model.state import FieldModel

logger = logging.getLogger(__name__)


def main() -> None:
    # 1. Setup Logging (MAGNETCOMPASS_LOG_LEVEL=DEBUG to see every field sample)
    setup_logging()

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Data Model
    prefs = load_preferences()
    field_model = FieldModel(global_multiplier=prefs.multiplier)
    store = Store(field_model)

    # 4. Initialize the Main Window, passing the store
    window = MainWindow(store)
    store.set_scenario(prefs.scenario)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
