"""center-factor: proportional center constraints that survive resizing."""

from ._version import __version__
from .core.dimensions import BaseXDimensions, BaseYDimensions
from .core.factor import (
    CENTERED_MULTIPLIER,
    center_factors,
    center_position,
    center_x_factor,
    center_y_factor,
    compute_axis_center_factor,
)
from .constraint import (
    CenterConstraint,
    ConstraintEditable,
    offset_center_x,
    offset_center_y,
)
from .layout.geometry import Rect
from .transform.batch import center_factors_from_frame

__all__ = [
    "__version__",
    "BaseXDimensions",
    "BaseYDimensions",
    "CENTERED_MULTIPLIER",
    "CenterConstraint",
    "ConstraintEditable",
    "Rect",
    "center_factors",
    "center_factors_from_frame",
    "center_position",
    "center_x_factor",
    "center_y_factor",
    "compute_axis_center_factor",
    "offset_center_x",
    "offset_center_y",
]
