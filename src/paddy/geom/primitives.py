"""Rectangle primitive for container rectangles and layer frames.

Coordinates follow the host document convention:
- Origin at the top-left of the canvas
- +x to the right, +y downward
- Width and height are the rectangle extents from (x, y)
"""

from __future__ import annotations

import math
from dataclasses import dataclass


class RectParseError(ValueError):
    """Raised when a rectangle argument cannot be parsed."""


@dataclass(frozen=True, slots=True)
class Rect:
    """Axis-aligned rectangle.

    Attributes:
        x: Left edge.
        y: Top edge.
        width: Horizontal extent.
        height: Vertical extent.
    """

    x: float
    y: float
    width: float
    height: float

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Return rectangle as (x, y, width, height) tuple."""
        return (self.x, self.y, self.width, self.height)

    @classmethod
    def from_tuple(cls, xywh: tuple[float, float, float, float]) -> Rect:
        """Create Rect from (x, y, width, height) tuple."""
        return cls(xywh[0], xywh[1], xywh[2], xywh[3])

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


def parse_rect(text: str) -> Rect:
    """Parse a rectangle written as ``"X,Y,W,H"``.

    Args:
        text: Four comma-separated numbers.

    Returns:
        Parsed Rect.

    Raises:
        RectParseError: If the text does not hold exactly four finite numbers.
    """
    parts = [part.strip() for part in text.split(",")]
    if len(parts) != 4:
        raise RectParseError(f"Rectangle must be formatted like 'X,Y,W,H', got {text!r}")
    values: list[float] = []
    for part in parts:
        try:
            value = float(part)
        except ValueError as exc:
            raise RectParseError(f"Invalid rectangle component {part!r} in {text!r}") from exc
        if not math.isfinite(value):
            raise RectParseError(f"Rectangle component must be finite, got {part!r}")
        values.append(value)
    return Rect(values[0], values[1], values[2], values[3])
