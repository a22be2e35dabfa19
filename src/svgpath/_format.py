from __future__ import annotations

import numpy as np


def format_number(value: float) -> str:
    """Render ``value`` as the shortest decimal text that round-trips as a float32.

    Positional notation only, with integral values printed without a fraction
    (``1``, ``-0``, ``100000000000000000000``).
    """

    with np.errstate(over="ignore"):
        number = np.float32(value)
    if np.isnan(number):
        return "NaN"
    return np.format_float_positional(number, unique=True, trim="-")


def format_flag(value: bool) -> str:
    return "1" if value else "0"
