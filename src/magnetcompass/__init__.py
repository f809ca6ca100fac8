"""
Magnet Compass
==============
Interactive 2D bar-magnet field explorer.

The `model` package is the headless core (field superposition, needle angle,
scenario presets). The `app` package is the PySide6 front-end built on top.
"""
