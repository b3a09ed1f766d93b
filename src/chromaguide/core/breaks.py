"""
chromaguide/core/breaks
~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from matplotlib.ticker import MaxNLocator

# Steps used for "pretty" values: 1, 2 and 5 times a power of ten
PRETTY_STEPS = (1, 2, 5, 10)

# Values within this fraction of the domain width count as on a limit
LIMIT_RTOL = 1e-9


def pretty(limits: Sequence[float], n: int) -> np.ndarray:
    """
    Computes roughly `n` equally spaced round values covering `limits`.

    The result may extend beyond the limits by less than one step, the same
    way axis tick locators do.

    Args:
        limits (Sequence[float]): (low, high) range to cover.
        n (int): Desired number of intervals.

    Returns:
        np.ndarray: Sorted candidate values.
    """
    lo, hi = float(min(limits)), float(max(limits))
    if lo == hi:
        return np.array([lo])
    locator = MaxNLocator(nbins=max(int(n), 1), steps=list(PRETTY_STEPS))
    values = np.asarray(locator.tick_values(lo, hi), dtype=float)
    # Clean floating noise from step multiplication (0.30000000000000004)
    step = np.min(np.diff(values)) if values.size > 1 else 1.0
    decimals = max(0, int(-np.floor(np.log10(step))) + 2)
    return np.round(values, decimals)


def limit_tolerance(limits: Sequence[float]) -> float:
    """
    Returns the absolute tolerance for comparing values with `limits`.

    The tolerance follows the width of the domain, not the magnitude of its
    values, so domains far from zero keep their resolution.

    Args:
        limits (Sequence[float]): (low, high) range.

    Returns:
        float: Absolute tolerance.
    """
    return LIMIT_RTOL * (float(max(limits)) - float(min(limits)))


def on_limit(values: np.ndarray, limit: float, tol: float) -> np.ndarray:
    return np.abs(np.asarray(values, dtype=float) - float(limit)) <= tol


def within_limits(values: np.ndarray, limits: Sequence[float]) -> np.ndarray:
    """
    Keeps the values that fall inside `limits` (inclusive, within `limit_tolerance`).

    Args:
        values (np.ndarray): Candidate values.
        limits (Sequence[float]): (low, high) range.

    Returns:
        np.ndarray: Filtered values, order preserved.
    """
    lo, hi = float(min(limits)), float(max(limits))
    values = np.asarray(values, dtype=float)
    tol = limit_tolerance((lo, hi))
    keep = (values >= lo - tol) & (values <= hi + tol)
    return values[keep]
