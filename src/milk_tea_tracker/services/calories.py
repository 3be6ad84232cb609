"""Calorie estimation for sized and sweetened drinks."""

import math

DEFAULT_CUSTOM_CALORIES = 200

SIZE_MULTIPLIERS = {
    "small": 0.8,
    "medium": 1.0,
    "large": 1.3,
}

# Share of the base value that does not depend on sweetness.
_BASE_SHARE = 0.7
_SUGAR_SHARE = 0.3

_LIGHT_MAX = 30
_HALF_MAX = 70


def estimate_calories(base_calories: float, size: str, sugar_percent: float) -> int:
    """Return calories adjusted for cup size and sweetness.

    Calories scale linearly with volume and only partially with sugar, since
    the base value already covers milk, tea and toppings.
    """
    size_multiplier = SIZE_MULTIPLIERS.get(size, 1.0)
    sugar_multiplier = clamp_percent(sugar_percent) / 100
    value = max(float(base_calories or 0), 0.0) * size_multiplier
    value *= _BASE_SHARE + _SUGAR_SHARE * sugar_multiplier
    return max(round_half_up(value), 0)


def base_calories_for(calories: float, size: str, sugar_percent: float) -> float:
    """Return the base value that estimates to ``calories`` at this sizing."""
    size_multiplier = SIZE_MULTIPLIERS.get(size, 1.0)
    sugar_multiplier = clamp_percent(sugar_percent) / 100
    factor = size_multiplier * (_BASE_SHARE + _SUGAR_SHARE * sugar_multiplier)
    return max(float(calories or 0), 0.0) / factor


def sugar_level_label(percent: float) -> str:
    """Map a sweetness percentage to its tier label."""
    value = clamp_percent(percent)
    if value == 0:
        return "none"
    if value <= _LIGHT_MAX:
        return "light"
    if value <= _HALF_MAX:
        return "half"
    return "full"


def clamp_percent(percent: float) -> float:
    """Clamp a sweetness percentage into [0, 100]."""
    return min(max(float(percent or 0), 0.0), 100.0)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return math.floor(value + 0.5)
