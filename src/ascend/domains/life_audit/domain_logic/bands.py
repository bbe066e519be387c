"""Threshold lookup tables shared by the classifiers and narrative generators.

A band table is an ordered tuple of ``(lower_bound, value)`` rows, highest
bound first, with ``-inf`` as the catch-all last row. Tables whose bands are
exclusive at the bottom use ``(upper_bound, value)`` rows instead, lowest
bound first, ending at ``inf``.
"""

from __future__ import annotations

import math
from typing import Sequence, TypeVar

T = TypeVar("T")

BandTable = Sequence[tuple[float, T]]

FLOOR = -math.inf
CEILING = math.inf


def select_band(value: float, table: BandTable[T]) -> T:
    """Return the value of the first row whose lower bound is <= ``value``."""
    for lower_bound, band_value in table:
        if value >= lower_bound:
            return band_value
    return table[-1][1]


def select_band_at_most(value: float, table: BandTable[T]) -> T:
    """Return the value of the first row whose upper bound is >= ``value``.

    For tables of ``(upper_bound, value)`` rows, lowest bound first, where a
    band is exclusive at its bottom (``(2, 4]``).
    """
    for upper_bound, band_value in table:
        if value <= upper_bound:
            return band_value
    return table[-1][1]


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round half away from zero for non-negative scores (2.25 -> 2.3)."""
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor
