"""Tests for offset pairs and base-design frames."""

import dataclasses

import pytest

from center_factor.core.dimensions import BaseXDimensions, BaseYDimensions
from center_factor.core.factor import center_x_factor, center_y_factor
from center_factor.layout.geometry import Rect


class TestRect:
    def test_edges(self):
        r = Rect(10, 20, 100, 50)
        assert r.right == 110
        assert r.bottom == 70

    def test_centers(self):
        r = Rect(10, 20, 100, 50)
        assert r.center_x == 60
        assert r.center_y == 45

    def test_to_dict(self):
        assert Rect(1, 2, 3, 4).to_dict() == {"x": 1, "y": 2, "width": 3, "height": 4}


class TestBaseDimensions:
    def test_near_far(self):
        x = BaseXDimensions(leading_offset=4, trailing_offset=9)
        y = BaseYDimensions(top_offset=1, bottom_offset=2)
        assert (x.near, x.far) == (4, 9)
        assert (y.near, y.far) == (1, 2)

    def test_immutable(self):
        dims = BaseXDimensions(0, 20)
        with pytest.raises(dataclasses.FrozenInstanceError):
            dims.leading_offset = 5

    def test_value_equality(self):
        assert BaseYDimensions(5, 15) == BaseYDimensions(5, 15)
        assert BaseYDimensions(5, 15) != BaseYDimensions(15, 5)

    def test_to_dict(self):
        assert BaseXDimensions(0, 20).to_dict() == {
            "leading_offset": 0,
            "trailing_offset": 20,
        }
        assert BaseYDimensions(5, 15).to_dict() == {"top_offset": 5, "bottom_offset": 15}

    def test_from_frames(self, base_screen, off_center_button):
        x = BaseXDimensions.from_frames(off_center_button, base_screen)
        y = BaseYDimensions.from_frames(off_center_button, base_screen)
        assert x == BaseXDimensions(40, 135)
        assert y == BaseYDimensions(300, 464)

    def test_from_frames_with_offset_container(self):
        container = Rect(100, 50, 200, 100)
        view = Rect(110, 60, 80, 20)
        assert BaseXDimensions.from_frames(view, container) == BaseXDimensions(10, 110)
        assert BaseYDimensions.from_frames(view, container) == BaseYDimensions(10, 70)

    def test_factor_matches_design_center(self, base_screen, off_center_button):
        # The factor is the view's center as a fraction of the container's center.
        fx = center_x_factor(
            BaseXDimensions.from_frames(off_center_button, base_screen), base_screen.width
        )
        fy = center_y_factor(
            BaseYDimensions.from_frames(off_center_button, base_screen), base_screen.height
        )
        assert fx == pytest.approx(off_center_button.center_x / base_screen.center_x)
        assert fy == pytest.approx(off_center_button.center_y / base_screen.center_y)
