"""
tests/conftest
~~~~~~~~~~~~~~
"""

import matplotlib
import pytest

from chromaguide import ContinuousColorScale, Theme, guide_colorbar

matplotlib.use("Agg", force=True)


@pytest.fixture(scope="session")
def theme():
    """
    Returns the default theme.

    Returns:
        Theme: Theme with default values.
    """
    return Theme()


@pytest.fixture(scope="session")
def fill_scale():
    """
    Returns a 0..20 fill scale with breaks every 5.

    Returns:
        ContinuousColorScale: Continuous fill scale.
    """
    return ContinuousColorScale(
        "viridis",
        (0.0, 20.0),
        breaks=[0, 5, 10, 15, 20],
        name="value",
    )


@pytest.fixture(scope="session")
def fine_guide():
    """
    Returns a guide with 100 bins.

    Returns:
        GuideSpec: Guide specification.
    """
    return guide_colorbar(nbin=100)
