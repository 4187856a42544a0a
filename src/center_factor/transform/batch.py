"""Center factors for whole tables of design measurements."""

from __future__ import annotations

import pandas as pd

from ..core.dimensions import VALID_AXES
from ..core.factor import center_factors
from ..core.validation import (
    validate_base_dimension,
    validate_base_dimension_column,
    validate_offsets_frame,
)

# axis -> (near column, far column, base size column)
AXIS_COLUMNS = {
    "x": ("leading_offset", "trailing_offset", "base_width"),
    "y": ("top_offset", "bottom_offset", "base_height"),
}


def center_factors_from_frame(
    df: pd.DataFrame,
    axis: str,
    base_dimension: float | None = None,
) -> pd.Series:
    """Compute one center factor per row of ``df``.

    Parameters
    ----------
    df : one row per view, with ``leading_offset``/``trailing_offset``
        (axis "x") or ``top_offset``/``bottom_offset`` (axis "y") columns
    axis : "x" or "y"
    base_dimension : base size of the relative view shared by every row.
        If None, read per row from ``base_width`` / ``base_height``.

    Returns a float Series named ``center_factor_<axis>`` on df's index.
    """
    if axis not in VALID_AXES:
        raise ValueError(f"axis must be one of {VALID_AXES}, got '{axis}'.")
    near_col, far_col, size_col = AXIS_COLUMNS[axis]

    required = [near_col, far_col]
    if base_dimension is None:
        required.append(size_col)
    validate_offsets_frame(df, required)

    if base_dimension is None:
        sizes = validate_base_dimension_column(df, size_col)
    else:
        sizes = validate_base_dimension(base_dimension, "base_dimension")

    factors = center_factors(
        df[near_col].to_numpy(dtype=float),
        df[far_col].to_numpy(dtype=float),
        sizes,
    )
    return pd.Series(factors, index=df.index, name=f"center_factor_{axis}")
