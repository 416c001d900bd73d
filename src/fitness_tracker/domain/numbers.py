"""Rounding helpers shared by the calculators."""

import math


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going toward positive infinity.

    The built-in ``round`` uses banker's rounding, which would turn 2.5 kcal
    into 2. Displayed values round halves up instead.
    """
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def round_int(value: float) -> int:
    """Round half up to an integer."""
    return int(round_half_up(value))
