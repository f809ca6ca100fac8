"""PySide6 front-end: store, main window and simulation view."""
