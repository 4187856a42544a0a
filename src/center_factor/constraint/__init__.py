"""Glue between center factors and fluent constraint builders."""

from .editable import CenterConstraint, ConstraintEditable, DEFAULT_PRIORITY
from .offset import offset_center_x, offset_center_y

__all__ = [
    "CenterConstraint",
    "ConstraintEditable",
    "DEFAULT_PRIORITY",
    "offset_center_x",
    "offset_center_y",
]
