"""Value types for padding stored in layer labels.

A padding holds four side values plus an optional size condition::

    Padding(
        top=20,
        right=10,
        bottom=20,
        left=10,
        conditions=Condition(expression="w<10;h>=10", max_width=9, min_height=10),
    )

Side values are either numbers, raw text tokens (as decoded from a label,
parsed to numbers only when the padding is applied), or the
FIT_TO_CURRENT_OFFSET sentinel.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Union


class SideSentinel(Enum):
    """Non-numeric side values."""

    FIT_TO_CURRENT_OFFSET = "x"
    """Derive the side offset from the layer's current position in its container."""


FIT_TO_CURRENT_OFFSET = SideSentinel.FIT_TO_CURRENT_OFFSET

SideValue = Union[int, float, str, SideSentinel]


class Dimension(Enum):
    """Dimension a condition clause constrains."""

    WIDTH = "width"
    HEIGHT = "height"


@dataclass(frozen=True, slots=True)
class Condition:
    """Inclusive size bounds parsed from a condition expression.

    Attributes:
        expression: Normalized source expression (no whitespace, lower-case).
        min_width: Inclusive minimum width, or None when unconstrained.
        max_width: Inclusive maximum width, or None when unconstrained.
        min_height: Inclusive minimum height, or None when unconstrained.
        max_height: Inclusive maximum height, or None when unconstrained.
    """

    expression: str
    min_width: int | None = None
    max_width: int | None = None
    min_height: int | None = None
    max_height: int | None = None

    def bounds(self, dimension: Dimension) -> tuple[int | None, int | None]:
        """Return (minimum, maximum) for the given dimension."""
        if dimension is Dimension.WIDTH:
            return (self.min_width, self.max_width)
        return (self.min_height, self.max_height)

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {"expression": self.expression}
        for name in ("min_width", "max_width", "min_height", "max_height"):
            value = getattr(self, name)
            if value is not None:
                payload[name] = value
        return payload


@dataclass(frozen=True, slots=True)
class Padding:
    """Four-sided outset specification with an optional size condition.

    Attributes:
        top: Top side value.
        right: Right side value.
        bottom: Bottom side value.
        left: Left side value.
        conditions: Size bounds applied after outsetting, if any.
    """

    top: SideValue = 0
    right: SideValue = 0
    bottom: SideValue = 0
    left: SideValue = 0
    conditions: Condition | None = None

    def sides(self) -> tuple[SideValue, SideValue, SideValue, SideValue]:
        """Return sides in clockwise (top, right, bottom, left) order."""
        return (self.top, self.right, self.bottom, self.left)

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "top": side_to_json(self.top),
            "right": side_to_json(self.right),
            "bottom": side_to_json(self.bottom),
            "left": side_to_json(self.left),
        }
        if self.conditions is not None:
            payload["conditions"] = self.conditions.to_dict()
        return payload


def format_side(value: SideValue, fit_token: str = "x") -> str:
    """Render a side value as a shorthand token.

    Numbers are written without trailing zeros (``5.0`` -> ``"5"``), raw
    string tokens are kept verbatim and the sentinel becomes ``fit_token``.
    """
    if isinstance(value, SideSentinel):
        return fit_token
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    try:
        text = format(Decimal(str(value)), "f")
    except InvalidOperation:
        return str(value)
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("", "-0"):
        return "0"
    return text


def side_to_json(value: SideValue) -> int | float | str:
    if isinstance(value, SideSentinel):
        return value.value
    return value
