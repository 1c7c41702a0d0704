"""Geometry primitives shared by the padding engine.

Submodules:
- primitives: Rect value type used for container rectangles and layer frames
"""

from __future__ import annotations

from .primitives import Rect, RectParseError, parse_rect

__all__ = [
    "Rect",
    "RectParseError",
    "parse_rect",
]
