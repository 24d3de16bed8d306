from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (``30.5 -> 31``).

    ``round()`` uses banker's rounding, which makes averages such as the
    retaliation delay drift down on exact halves.
    """
    return int(math.floor(value + 0.5))
