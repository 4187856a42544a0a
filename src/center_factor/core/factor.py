"""Center factor: the multiplier that keeps an off-center view in proportion.

A center constraint with multiplier 1.0 puts the view's center on the
relative view's center. A view that sits off-center in the base design
needs a different multiplier, one that expresses the asymmetry of its
offsets as a fraction of half the relative view's base size. Because the
factor is a ratio, the same multiplier reproduces the same relative
position at any runtime size.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from .dimensions import BaseXDimensions, BaseYDimensions
from .validation import (
    validate_base_dimension,
    validate_base_dimension_array,
    validate_offset,
)

# Multiplier of a perfectly centered view
CENTERED_MULTIPLIER = 1.0


def compute_axis_center_factor(
    base_near_offset: float,
    base_far_offset: float,
    base_container_dimension: float,
) -> float:
    """Center multiplier for one axis.

    Parameters
    ----------
    base_near_offset : leading (or top) offset in the base design
    base_far_offset : trailing (or bottom) offset in the base design
    base_container_dimension : base width (or height) of the relative view

    Raises ValueError if the base dimension is zero or non-finite.
    """
    near = validate_offset(base_near_offset, "base_near_offset")
    far = validate_offset(base_far_offset, "base_far_offset")
    dimension = validate_base_dimension(
        base_container_dimension, "base_container_dimension"
    )

    average_offset = (near + far) / 2
    diff = average_offset - near
    half_container = dimension / 2
    percent_diff = diff / half_container
    return CENTERED_MULTIPLIER - percent_diff


def center_x_factor(
    base_x_dimensions: BaseXDimensions,
    relative_view_base_width: float,
) -> float:
    """Center X multiplier from leading/trailing base offsets."""
    return compute_axis_center_factor(
        base_x_dimensions.leading_offset,
        base_x_dimensions.trailing_offset,
        relative_view_base_width,
    )


def center_y_factor(
    base_y_dimensions: BaseYDimensions,
    relative_view_base_height: float,
) -> float:
    """Center Y multiplier from top/bottom base offsets."""
    return compute_axis_center_factor(
        base_y_dimensions.top_offset,
        base_y_dimensions.bottom_offset,
        relative_view_base_height,
    )


def center_factors(near: Any, far: Any, dimension: Any) -> np.ndarray:
    """Vectorized :func:`compute_axis_center_factor`.

    Inputs broadcast against each other. Each element goes through the
    same steps as the scalar function, so results match it exactly.
    """
    try:
        near_arr = np.asarray(near, dtype=np.float64)
        far_arr = np.asarray(far, dtype=np.float64)
    except (TypeError, ValueError):
        raise TypeError("Offsets must be numeric.") from None
    dim_arr = validate_base_dimension_array(dimension, "dimension")

    average_offset = (near_arr + far_arr) / 2
    diff = average_offset - near_arr
    half_container = dim_arr / 2
    percent_diff = diff / half_container
    return CENTERED_MULTIPLIER - percent_diff


def center_position(factor: float, live_dimension: float, origin: float = 0.0) -> float:
    """Center coordinate a constraint with this multiplier resolves to.

    ``origin`` is the relative view's leading (or top) edge. The factor
    scales the distance from that edge to the relative view's center,
    ``live_dimension / 2``.
    """
    return origin + factor * (live_dimension / 2)
