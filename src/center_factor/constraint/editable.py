"""Editable constraint handle: the fluent builder side of a center constraint."""

from __future__ import annotations

from numbers import Real
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from ..core.dimensions import VALID_AXES, BaseXDimensions, BaseYDimensions
from ..core.factor import center_position

if TYPE_CHECKING:
    from ..layout.geometry import Rect


# Required priority, the usual default of constraint systems
DEFAULT_PRIORITY = 1000.0


@runtime_checkable
class ConstraintEditable(Protocol):
    """Anything that scales its multiplier and returns itself for chaining."""

    def multiplied_by(self, amount: float) -> ConstraintEditable:
        ...


class CenterConstraint:
    """One center-alignment constraint being configured.

    Places the view center at ``multiplier`` times the distance from the
    relative view's leading (or top) edge to its center, plus ``constant``,
    along one axis. Modifiers mutate the constraint and return it, so calls
    chain::

        CenterConstraint("x").offset_center(dims, 375).with_priority(750)
    """

    def __init__(
        self,
        axis: str,
        multiplier: float = 1.0,
        constant: float = 0.0,
        priority: float = DEFAULT_PRIORITY,
    ) -> None:
        if axis not in VALID_AXES:
            raise ValueError(f"axis must be one of {VALID_AXES}, got '{axis}'.")
        self._axis = axis
        self._multiplier = float(multiplier)
        self._constant = float(constant)
        self._priority = float(priority)

    @property
    def axis(self) -> str:
        return self._axis

    @property
    def multiplier(self) -> float:
        return self._multiplier

    @property
    def constant(self) -> float:
        return self._constant

    @property
    def priority(self) -> float:
        return self._priority

    def multiplied_by(self, amount: float) -> CenterConstraint:
        if not isinstance(amount, Real) or isinstance(amount, bool):
            raise TypeError(f"amount must be a real number, got {type(amount).__name__}.")
        self._multiplier *= float(amount)
        return self

    def offset(self, amount: float) -> CenterConstraint:
        """Set the constant term."""
        self._constant = float(amount)
        return self

    def with_priority(self, value: float) -> CenterConstraint:
        self._priority = float(value)
        return self

    def offset_center(
        self,
        base_dimensions: BaseXDimensions | BaseYDimensions,
        relative_view_base_size: float,
    ) -> CenterConstraint:
        """Apply the center factor for this constraint's axis."""
        from .offset import offset_center_x, offset_center_y

        if self._axis == "x":
            if not isinstance(base_dimensions, BaseXDimensions):
                raise TypeError(
                    "A center X constraint needs BaseXDimensions, "
                    f"got {type(base_dimensions).__name__}."
                )
            return offset_center_x(self, base_dimensions, relative_view_base_size)
        if not isinstance(base_dimensions, BaseYDimensions):
            raise TypeError(
                "A center Y constraint needs BaseYDimensions, "
                f"got {type(base_dimensions).__name__}."
            )
        return offset_center_y(self, base_dimensions, relative_view_base_size)

    def resolve(self, relative_view: Rect) -> float:
        """Center coordinate of the view for a live relative view frame."""
        if self._axis == "x":
            origin, size = relative_view.x, relative_view.width
        else:
            origin, size = relative_view.y, relative_view.height
        return center_position(self._multiplier, size, origin=origin) + self._constant

    def to_dict(self) -> dict:
        return {
            "axis": self._axis,
            "multiplier": self._multiplier,
            "constant": self._constant,
            "priority": self._priority,
        }

    def __repr__(self) -> str:
        return (
            f"CenterConstraint(axis={self._axis!r}, multiplier={self._multiplier}, "
            f"constant={self._constant}, priority={self._priority})"
        )
