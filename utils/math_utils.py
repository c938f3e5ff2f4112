import math
from typing import Union

Number = Union[int, float]


def round_half_up(value: float) -> int:
    """Round halves towards +infinity (``round_half_up(2.5) == 3``).

    The builtin ``round`` rounds halves to even, which shows 12% where the
    dashboard has always shown 13% for 1 of 8.
    """
    return int(math.floor(value + 0.5))


def percentage(value: Number, total: Number) -> int:
    """Whole-number percentage of ``value`` in ``total``; 0 when ``total`` is 0.

    Not capped at 100: a habit done more often than its goal reports >100%.
    """
    if not total:
        return 0
    return round_half_up(value / total * 100)


def ratio(value: Number, total: Number) -> float:
    if not total:
        return 0.0
    return value / total
