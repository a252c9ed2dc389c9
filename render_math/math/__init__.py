"""Vector math for rendering."""

from .vector2f import Vector2f

add = Vector2f.add
subtract = Vector2f.subtract
multiply = Vector2f.multiply
negate = Vector2f.negate
divide = Vector2f.divide
component_min = Vector2f.component_min
component_max = Vector2f.component_max

__all__ = [
    "Vector2f",
    "add",
    "subtract",
    "multiply",
    "negate",
    "divide",
    "component_min",
    "component_max",
]
