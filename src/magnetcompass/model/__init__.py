"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the GUI (Qt).
It deals with magnets, poles, field superposition and the drawn sketch.
"""
from magnetcompass.model.geometry_primitives import Vector
from magnetcompass.model.magnets import InvalidMagnetGeometry, Magnet, Polarity, Pole, resolve_poles
from magnetcompass.model.field import evaluate_field, needle_angle_degrees, sample_field_grid
from magnetcompass.model.scenarios import ScenarioName, apply_scenario, list_scenarios
from magnetcompass.model.state import FieldModel
from magnetcompass.model.sketch import Sketch

__all__ = [
    "Vector",
    "InvalidMagnetGeometry",
    "Magnet",
    "Polarity",
    "Pole",
    "resolve_poles",
    "evaluate_field",
    "needle_angle_degrees",
    "sample_field_grid",
    "ScenarioName",
    "apply_scenario",
    "list_scenarios",
    "FieldModel",
    "Sketch",
]
