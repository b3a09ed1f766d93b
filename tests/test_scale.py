"""
tests/test_scale
~~~~~~~~~~~~~~~~
"""

import pytest

from chromaguide import ContinuousColorScale, DiscreteColorScale
from chromaguide.core.scale import format_break


@pytest.mark.unit
def test_format_break_trims_zeros():
    """
    Ensures break labels drop trailing zeros.
    """
    assert format_break(5.0) == "5"
    assert format_break(2.5) == "2.5"
    assert format_break(-0.0) == "0"


@pytest.mark.api
def test_continuous_scale_maps_limits_and_na(fill_scale):
    """
    Ensures values map to hex colours and out-of-range values to the NA colour.

    Args:
        fill_scale (ContinuousColorScale): 0..20 fill scale.
    """
    colors = fill_scale.map([0.0, 20.0, 25.0])

    assert all(c.startswith("#") and len(c) == 7 for c in colors)
    assert colors[0] != colors[1]
    assert colors[2] == fill_scale.na_value


@pytest.mark.api
def test_continuous_scale_default_breaks_inside_limits():
    """
    Ensures default breaks are pretty values inside the limits.
    """
    scale = ContinuousColorScale("viridis", (0.3, 9.7))
    breaks = scale.breaks()

    assert breaks
    assert all(0.3 <= b <= 9.7 for b in breaks)
    assert breaks == sorted(breaks)


@pytest.mark.api
def test_continuous_scale_explicit_labels():
    """
    Ensures explicit labels follow their breaks.
    """
    scale = ContinuousColorScale("magma", (0, 1), breaks=[0, 1], labels=["low", "high"])

    assert scale.labels(scale.breaks()) == ["low", "high"]


@pytest.mark.unit
def test_continuous_scale_validation():
    """
    Ensures bad limits and mismatched labels are rejected.

    Raises:
        ValueError: If limits are reversed or labels lack breaks.
    """
    with pytest.raises(ValueError, match="limits"):
        ContinuousColorScale("viridis", (1.0, 0.0))
    with pytest.raises(ValueError, match="labels"):
        ContinuousColorScale("viridis", (0.0, 1.0), labels=["a"])


@pytest.mark.unit
def test_discrete_scale_is_not_continuous():
    """
    Ensures the discrete scale reports itself as non-continuous.
    """
    scale = DiscreteColorScale({"a": "#ff0000", "b": "#0000ff"})

    assert not scale.is_continuous()
    assert scale.map(["b"]) == ["#0000ff"]


@pytest.mark.api
def test_large_offset_domain_breaks_and_na():
    """
    Ensures breaks stay inside a narrow domain far from zero and values past it map to NA.
    """
    lo, hi = 1.7e9, 1.7e9 + 3600
    scale = ContinuousColorScale("viridis", (lo, hi))
    breaks = scale.breaks()

    assert breaks
    assert all(lo <= b <= hi for b in breaks)
    assert 1.7e9 + 4000 not in breaks
    assert scale.map([hi + 400, lo - 400]) == [scale.na_value, scale.na_value]
    assert scale.map([hi])[0] != scale.na_value
