"""Apply a center factor to an in-progress constraint."""

from __future__ import annotations

from typing import TypeVar

from ..core.dimensions import BaseXDimensions, BaseYDimensions
from ..core.factor import center_x_factor, center_y_factor
from .editable import ConstraintEditable

E = TypeVar("E", bound=ConstraintEditable)


def _require_editable(editable: object) -> None:
    if not isinstance(editable, ConstraintEditable):
        raise TypeError(
            f"Expected an editable constraint with a multiplied_by() method, "
            f"got {type(editable).__name__}."
        )


def offset_center_x(
    editable: E,
    base_x_dimensions: BaseXDimensions,
    relative_view_base_width: float,
) -> E:
    """Keep a center X constraint proportional to its relative view.

    A view that is not exactly centered in the base design would drift if
    pinned with a constant center offset once the relative view resizes.
    Scaling the constraint's multiplier by the center factor keeps the
    center position consistent instead.

    Returns ``editable`` itself so configuration can continue.
    """
    _require_editable(editable)
    factor = center_x_factor(base_x_dimensions, relative_view_base_width)
    return editable.multiplied_by(factor)


def offset_center_y(
    editable: E,
    base_y_dimensions: BaseYDimensions,
    relative_view_base_height: float,
) -> E:
    """Vertical counterpart of :func:`offset_center_x`."""
    _require_editable(editable)
    factor = center_y_factor(base_y_dimensions, relative_view_base_height)
    return editable.multiplied_by(factor)
