"""Base-design offset pairs for the horizontal and vertical axes.

Both types are plain immutable values: build them from design measurements,
hand them to the factor functions, discard them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..layout.geometry import Rect


# Axes a center constraint can act on
VALID_AXES = ("x", "y")


@dataclass(frozen=True)
class BaseXDimensions:
    """Horizontal offsets of a view inside its relative view, in base values.

    leading_offset : distance from the view's leading edge to the
        relative view's leading edge
    trailing_offset : distance from the view's trailing edge to the
        relative view's trailing edge
    """

    leading_offset: float
    trailing_offset: float

    @property
    def near(self) -> float:
        return self.leading_offset

    @property
    def far(self) -> float:
        return self.trailing_offset

    @classmethod
    def from_frames(cls, view: Rect, container: Rect) -> BaseXDimensions:
        """Measure the horizontal offsets of ``view`` inside ``container``."""
        return cls(
            leading_offset=view.x - container.x,
            trailing_offset=container.right - view.right,
        )

    def to_dict(self) -> dict:
        return {
            "leading_offset": self.leading_offset,
            "trailing_offset": self.trailing_offset,
        }


@dataclass(frozen=True)
class BaseYDimensions:
    """Vertical offsets of a view inside its relative view, in base values."""

    top_offset: float
    bottom_offset: float

    @property
    def near(self) -> float:
        return self.top_offset

    @property
    def far(self) -> float:
        return self.bottom_offset

    @classmethod
    def from_frames(cls, view: Rect, container: Rect) -> BaseYDimensions:
        return cls(
            top_offset=view.y - container.y,
            bottom_offset=container.bottom - view.bottom,
        )

    def to_dict(self) -> dict:
        return {"top_offset": self.top_offset, "bottom_offset": self.bottom_offset}
