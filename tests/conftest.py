"""Shared test fixtures for center-factor."""

import pandas as pd
import pytest

from center_factor.layout.geometry import Rect


@pytest.fixture
def base_screen():
    """375x812 reference frame, the size most mockups are drawn at."""
    return Rect(0, 0, 375, 812)


@pytest.fixture
def off_center_button():
    """Button drawn left of center and above center on the base screen."""
    return Rect(40, 300, 200, 48)


@pytest.fixture
def offsets_x_df():
    """Horizontal design measurements, one row per view."""
    return pd.DataFrame(
        {
            "leading_offset": [10.0, 0.0, 20.0],
            "trailing_offset": [10.0, 20.0, 0.0],
            "base_width": [200.0, 200.0, 200.0],
        },
        index=["centered", "shifted_left", "shifted_right"],
    )


@pytest.fixture
def offsets_y_df():
    """Vertical design measurements, one row per view."""
    return pd.DataFrame(
        {
            "top_offset": [5.0, 30.0],
            "bottom_offset": [15.0, 30.0],
            "base_height": [100.0, 400.0],
        },
        index=["banner", "card"],
    )
