"""
tests/test_breaks
~~~~~~~~~~~~~~~~~
"""

import numpy as np
import pytest

from chromaguide.core.breaks import pretty, within_limits


@pytest.mark.unit
def test_pretty_covers_limits_with_round_steps():
    """
    Ensures pretty() returns round values spanning the limits.
    """
    values = pretty((0.0, 20.0), 4)

    assert values[0] <= 0.0
    assert values[-1] >= 20.0
    assert np.allclose(values, [0.0, 5.0, 10.0, 15.0, 20.0])


@pytest.mark.unit
def test_pretty_cleans_float_noise():
    """
    Ensures step multiples come back without floating noise.
    """
    values = pretty((0.0, 20.0), 100)

    assert len(values) == 101
    assert 0.6 in values.tolist()


@pytest.mark.unit
def test_pretty_degenerate_range():
    """
    Ensures a zero-width range yields the single value.
    """
    assert pretty((3.0, 3.0), 10).tolist() == [3.0]


@pytest.mark.unit
def test_within_limits_is_inclusive():
    """
    Ensures within_limits() keeps the limits and drops outside values.
    """
    values = within_limits(np.array([-1.0, 0.0, 0.5, 1.0, 1.5]), (0.0, 1.0))

    assert values.tolist() == [0.0, 0.5, 1.0]
