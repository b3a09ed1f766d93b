"""
chromaguide/plot/ticks
~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

from .sizing import Size

Segment = Tuple[Tuple[float, float], Tuple[float, float]]

# Tick marks cover this fraction of the bar at each edge
TICK_FRACTION = 1.0 / 5.0


def rescale(values: np.ndarray, to: Tuple[float, float], source: Tuple[float, float]) -> np.ndarray:
    """
    Linearly maps `values` from the `source` range onto the `to` range.

    A zero-width source range maps every value to the middle of `to`.

    Args:
        values (np.ndarray): Values to map.
        to (Tuple[float, float]): Output range.
        source (Tuple[float, float]): Input range.

    Returns:
        np.ndarray: Mapped values.
    """
    values = np.asarray(values, dtype=float)
    lo, hi = float(source[0]), float(source[1])
    if hi == lo:
        return np.full(values.shape, (to[0] + to[1]) / 2.0)
    return (values - lo) / (hi - lo) * (to[1] - to[0]) + to[0]


def tick_positions(
    values: Sequence[float],
    bar_values: Sequence[float],
    nbin: int,
    bar_length: float,
) -> np.ndarray:
    """
    Places break values along the bar, in mm from the bar start.

    Values are rescaled from the bar's sample range onto bin centres
    (0.5 .. nbin - 0.5) and then scaled by the bin length, which keeps tick
    marks aligned with the colour segments of the bar.

    Args:
        values (Sequence[float]): Break values.
        bar_values (Sequence[float]): Bar sample values.
        nbin (int): Configured bin count.
        bar_length (float): Bar length in mm.

    Returns:
        np.ndarray: Tick offsets in mm.
    """
    if len(values) == 0:
        return np.array([], dtype=float)
    domain = (float(np.min(bar_values)), float(np.max(bar_values)))
    return rescale(np.asarray(values, dtype=float), (0.5, nbin - 0.5), domain) * bar_length / nbin


def trim_limit_ticks(positions: np.ndarray, draw_llim: bool, draw_ulim: bool) -> np.ndarray:
    """
    Drops the lowest and/or highest tick mark.

    Positions are computed first and trimmed afterwards; the remaining
    marks keep their places.

    Args:
        positions (np.ndarray): Tick offsets in break order.
        draw_llim (bool): Keep the lower-limit (first) tick.
        draw_ulim (bool): Keep the upper-limit (last) tick.

    Returns:
        np.ndarray: Remaining tick offsets.
    """
    positions = np.asarray(positions, dtype=float)
    if not draw_llim:
        positions = positions[1:]
    if not draw_ulim:
        positions = positions[:-1]
    return positions


def tick_segments(positions: Sequence[float], direction: str, bar_size: Size) -> List[Segment]:
    """
    Builds the tick mark segments, two per tick at the bar's edges.

    Args:
        positions (Sequence[float]): Tick offsets in mm.
        direction (str): "horizontal" or "vertical".
        bar_size (Size): Bar size in mm.

    Returns:
        List[Segment]: ((x0, y0), (x1, y1)) segments in bar-cell mm.
    """
    segments: List[Segment] = []
    if direction == "horizontal":
        h = bar_size.height
        for x in positions:
            segments.append(((float(x), 0.0), (float(x), h * TICK_FRACTION)))
        for x in positions:
            segments.append(((float(x), h * (1 - TICK_FRACTION)), (float(x), h)))
    else:
        w = bar_size.width
        for y in positions:
            segments.append(((0.0, float(y)), (w * TICK_FRACTION, float(y))))
        for y in positions:
            segments.append(((w * (1 - TICK_FRACTION), float(y)), (w, float(y))))
    return segments
