"""
tests/test_ticks
~~~~~~~~~~~~~~~~
"""

import numpy as np
import pytest

from chromaguide.plot.sizing import Size
from chromaguide.plot.ticks import rescale, tick_positions, tick_segments, trim_limit_ticks


@pytest.mark.unit
def test_rescale_maps_ranges():
    """
    Ensures rescale() maps linearly and centres zero-width sources.
    """
    assert rescale(np.array([0.0, 5.0, 10.0]), (0.0, 1.0), (0.0, 10.0)).tolist() == [0.0, 0.5, 1.0]
    assert rescale(np.array([3.0, 4.0]), (0.5, 9.5), (2.0, 2.0)).tolist() == [5.0, 5.0]


@pytest.mark.unit
def test_tick_positions_align_with_bin_centres():
    """
    Ensures the domain ends land on the first and last bin centres.
    """
    bar = np.linspace(1.0, 9.0, 9)
    pos = tick_positions([1.0, 5.0, 9.0], bar, nbin=10, bar_length=100.0)

    assert pos.tolist() == pytest.approx([5.0, 50.0, 95.0])


@pytest.mark.unit
def test_tick_positions_middle_break_on_bar_centre():
    """
    Ensures a break in the middle of the domain lands mid-bar.
    """
    bar = np.arange(0.2, 19.81, 0.2)
    pos = tick_positions([0.0, 10.0, 20.0], bar, nbin=100, bar_length=30.0)

    assert pos[1] == pytest.approx(15.0)
    assert pos[0] < pos[1] < pos[2]


@pytest.mark.unit
def test_tick_positions_empty():
    """
    Ensures no breaks give no positions.
    """
    assert tick_positions([], [1.0, 2.0], nbin=20, bar_length=10.0).size == 0


@pytest.mark.unit
@pytest.mark.parametrize(
    "draw_llim, draw_ulim, expected",
    [
        (True, True, [1.0, 2.0, 3.0]),
        (False, True, [2.0, 3.0]),
        (True, False, [1.0, 2.0]),
        (False, False, [2.0]),
    ],
)
def test_trim_limit_ticks(draw_llim, draw_ulim, expected):
    """
    Ensures limit ticks are dropped without moving the others.

    Args:
        draw_llim (bool): Keep the lower tick.
        draw_ulim (bool): Keep the upper tick.
        expected (list): Remaining positions.
    """
    assert trim_limit_ticks(np.array([1.0, 2.0, 3.0]), draw_llim, draw_ulim).tolist() == expected


@pytest.mark.unit
def test_tick_segments_cover_bar_edges():
    """
    Ensures each tick gives two segments over the outer fifths of the bar.
    """
    horizontal = tick_segments([2.0, 4.0], "horizontal", Size(10.0, 5.0))
    vertical = tick_segments([3.0], "vertical", Size(5.0, 20.0))

    assert len(horizontal) == 4
    assert np.ravel(horizontal[0]).tolist() == pytest.approx([2.0, 0.0, 2.0, 1.0])
    assert np.ravel(horizontal[2]).tolist() == pytest.approx([2.0, 4.0, 2.0, 5.0])
    assert np.ravel(vertical).tolist() == pytest.approx([0.0, 3.0, 1.0, 3.0, 4.0, 3.0, 5.0, 3.0])


@pytest.mark.unit
def test_rescale_narrow_range_far_from_zero():
    """
    Ensures a narrow source range at a large offset still maps linearly.
    """
    mapped = rescale(np.array([1.7e9, 1.7e9 + 1800, 1.7e9 + 3600]), (0.0, 1.0), (1.7e9, 1.7e9 + 3600))

    assert mapped.tolist() == pytest.approx([0.0, 0.5, 1.0])
