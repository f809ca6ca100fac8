"""
Configuration & Global Constants
================================
This module serves as the central registry for the numeric constants of the
field model and the default layout of the simulation area.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (pole inset, field constant, ...)
   scattered throughout the model and the view.
2. Consistency: The model and the UI agree on the same slider bounds and
   default scenario.

Exports:
    FIELD_CONSTANT (float): Scale of a single magnet's nominal pole strength.
    POLE_INSET (float): Distance of a pole from the end of its magnet.
    SINGULARITY_DISTANCE (float): Poles closer than this are skipped.
"""
from typing import Final

# Field model
FIELD_CONSTANT: Final[float] = 5000.0
POLE_INSET: Final[float] = 4.0
SINGULARITY_DISTANCE: Final[float] = 1e-4

# Strength multiplier (slider bounds, the model itself does not clamp)
MULTIPLIER_DEFAULT: Final[float] = 1.0
MULTIPLIER_MIN: Final[float] = 0.0
MULTIPLIER_MAX: Final[float] = 5.0
MULTIPLIER_STEP: Final[float] = 0.1

# Scenarios
DEFAULT_SCENARIO: Final[str] = "single"

# Simulation area (world units == scene pixels)
AREA_WIDTH: Final[float] = 800.0
AREA_HEIGHT: Final[float] = 500.0

# Compass (top-left start position and square size)
COMPASS_SIZE: Final[float] = 60.0
COMPASS_START: Final[tuple[float, float]] = (50.0, 50.0)
