"""Compute a layer's new frame from padding and a container rectangle.

The container rectangle is outset by the padding amounts (negative padding
contracts it), then the resulting width and height are clamped against the
padding's condition::

    x      = container.x - left
    y      = container.y - top
    width  = container.width + left + right
    height = container.height + top + bottom

FIT_TO_CURRENT_OFFSET sides are resolved from the layer's current frame so
that the side keeps its present distance to the container edge.
"""

from __future__ import annotations

import logging
import math
import re

from ..geom.primitives import Rect
from .evaluator import clamp
from .model import Dimension, Padding, SideSentinel, SideValue

logger = logging.getLogger(__name__)

# Leading decimal number, as accepted by "10", "-2.5", ".5", "1e3" or "10px".
_LEADING_NUMBER_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_side_value(value: SideValue) -> float:
    """Parse a side value to a finite float.

    Strings are read up to the end of their leading number, so ``"10px"`` is
    10.0. Anything that does not start with a number, non-finite values and
    the unresolved sentinel all parse to 0.0.
    """
    if isinstance(value, SideSentinel):
        return 0.0
    if isinstance(value, str):
        match = _LEADING_NUMBER_RE.match(value)
        if not match:
            return 0.0
        number = float(match.group(1))
    else:
        number = float(value)
    if not math.isfinite(number):
        return 0.0
    return number


def _fit_offset(distance: float) -> int:
    # Offsets are negated and truncated toward zero; non-finite distances give 0.
    if not math.isfinite(distance):
        return 0
    return -int(distance)


def resolve_sides(
    padding: Padding,
    container: Rect,
    current_frame: Rect | None = None,
) -> tuple[float, float, float, float]:
    """Resolve padding sides to concrete offsets.

    Args:
        padding: Padding whose sides may include FIT_TO_CURRENT_OFFSET.
        container: Container rectangle the padding is computed against.
        current_frame: Layer frame before resizing; needed only for
            FIT_TO_CURRENT_OFFSET sides.

    Returns:
        Offsets as (top, right, bottom, left).
    """
    sides = list(padding.sides())
    fit = [side is SideSentinel.FIT_TO_CURRENT_OFFSET for side in sides]

    if any(fit):
        if current_frame is None:
            logger.warning("Padding has fit-to-offset sides but no current frame; using 0")
        else:
            x_diff = current_frame.x - container.x
            y_diff = current_frame.y - container.y
            distances = (
                lambda: y_diff,
                lambda: container.width - current_frame.width - x_diff,
                lambda: container.height - current_frame.height - y_diff,
                lambda: x_diff,
            )
            sides = [_fit_offset(distances[index]()) if fit[index] else side for index, side in enumerate(sides)]

    top, right, bottom, left = (parse_side_value(side) for side in sides)
    return (top, right, bottom, left)


def apply_padding(
    padding: Padding,
    container: Rect,
    current_frame: Rect | None = None,
) -> Rect:
    """Compute the outset frame for ``padding`` around ``container``.

    Args:
        padding: Padding to apply.
        container: Container rectangle to outset.
        current_frame: Layer frame before resizing, used to resolve
            FIT_TO_CURRENT_OFFSET sides.

    Returns:
        The new frame, with width and height clamped by the padding's
        condition when it has one.
    """
    top, right, bottom, left = resolve_sides(padding, container, current_frame)

    x = container.x - left
    y = container.y - top
    width = container.width + left + right
    height = container.height + top + bottom

    if padding.conditions is not None:
        width = clamp(width, padding.conditions, Dimension.WIDTH)
        height = clamp(height, padding.conditions, Dimension.HEIGHT)

    return Rect(x=x, y=y, width=width, height=height)
