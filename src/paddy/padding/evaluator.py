"""Clamp outset dimensions against condition bounds."""

from __future__ import annotations

from .model import Condition, Dimension


def clamp_between(value: float, minimum: float | None, maximum: float | None) -> float:
    """Clamp ``value`` into inclusive [minimum, maximum].

    The maximum is applied first and the minimum second, so a contradictory
    pair (minimum > maximum) resolves to the minimum. Bounds that are None
    are ignored.
    """
    if maximum is not None and value > maximum:
        value = float(maximum)
    if minimum is not None and value < minimum:
        value = float(minimum)
    return value


def clamp(value: float, condition: Condition | None, dimension: Dimension) -> float:
    """Clamp a computed width or height against a condition.

    Args:
        value: Raw outset width or height.
        condition: Parsed condition, or None for no bounds.
        dimension: Which pair of bounds to apply.

    Returns:
        The clamped value; ``value`` unchanged when the condition does not
        constrain ``dimension``.
    """
    if condition is None:
        return value
    minimum, maximum = condition.bounds(dimension)
    return clamp_between(value, minimum, maximum)
