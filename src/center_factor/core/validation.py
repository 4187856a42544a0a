"""Input validation with clear error messages for layout code."""

from __future__ import annotations

import math
from numbers import Real
from typing import Any

import numpy as np
import pandas as pd


def _preview(items: list) -> str:
    return f"{items[:5]}" + (f" (and {len(items) - 5} more)" if len(items) > 5 else "")


def _is_real(value: Any) -> bool:
    # bool is registered as Real but is never a measurement
    return isinstance(value, Real) and not isinstance(value, bool)


def validate_offset(value: Any, name: str) -> float:
    """Check that an offset is a real number and return it as a float."""
    if not _is_real(value):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}.")
    return float(value)


def validate_base_dimension(value: Any, name: str = "base dimension") -> float:
    """Check the base size of the relative view along one axis.

    The center factor divides by half this value, so zero is rejected up
    front rather than left to surface as inf/nan in a constraint multiplier.
    """
    if not _is_real(value):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}.")
    value = float(value)
    if value == 0:
        raise ValueError(
            f"{name} must be non-zero; the center factor is undefined for a "
            "zero-sized relative view."
        )
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}.")
    return value


def validate_base_dimension_array(values: Any, name: str = "base dimension") -> np.ndarray:
    """Array counterpart of :func:`validate_base_dimension`.

    Returns a float64 array. Offending positions are listed in the error.
    """
    try:
        arr = np.asarray(values, dtype=np.float64)
    except (TypeError, ValueError):
        raise TypeError(f"{name} must be numeric.") from None
    bad = ~np.isfinite(arr) | (arr == 0)
    if bad.any():
        positions = [tuple(int(i) for i in idx) if arr.ndim > 1 else int(idx[0])
                     for idx in np.argwhere(np.atleast_1d(bad))]
        raise ValueError(
            f"{name} must be non-zero and finite. Invalid at positions: "
            + _preview(positions)
        )
    return arr


def validate_base_dimension_column(df: pd.DataFrame, column: str) -> np.ndarray:
    """Per-row base sizes from ``df[column]`` as a float64 array.

    Rows with a zero or non-finite size are reported by index label.
    """
    sizes = df[column].to_numpy(dtype=np.float64)
    bad = ~np.isfinite(sizes) | (sizes == 0)
    if bad.any():
        raise ValueError(
            f"{column} must be non-zero and finite for every row. Invalid rows: "
            + _preview(df.index[bad].tolist())
        )
    return sizes


def validate_offsets_frame(
    df: Any,
    required_columns: list[str],
) -> pd.DataFrame:
    """Validate a table of design measurements.

    Returns the validated DataFrame (unchanged).
    """
    if not isinstance(df, pd.DataFrame):
        raise TypeError(
            f"Expected a pandas DataFrame, got {type(df).__name__}. "
            "Wrap your measurements with pd.DataFrame(records)."
        )
    missing = [c for c in required_columns if c not in df.columns]
    if missing:
        raise ValueError(
            f"Offsets table is missing required columns: {missing}. "
            f"Available columns: {_preview(list(df.columns))}"
        )
    non_numeric = [
        c for c in required_columns if not pd.api.types.is_numeric_dtype(df[c])
    ]
    if non_numeric:
        raise TypeError(f"Columns must be numeric. Non-numeric columns: {non_numeric}")
    return df
