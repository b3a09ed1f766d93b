"""
tests/test_guide_spec
~~~~~~~~~~~~~~~~~~~~~
"""

import dataclasses

import pytest

from chromaguide import WAIVER, GuideSpec, InvalidLabelPosition, InvalidTitlePosition, guide_colorbar


@pytest.mark.api
def test_guide_defaults():
    """
    Ensures the guide factory fills the documented defaults.
    """
    guide = guide_colorbar()

    assert guide.title is WAIVER
    assert guide.nbin == 20
    assert guide.raster and guide.ticks and guide.draw_ulim and guide.draw_llim
    assert guide.default_unit == "lines"
    assert guide.available_aes == ("colour", "color", "fill")


@pytest.mark.api
def test_guide_is_immutable():
    """
    Ensures a guide cannot be changed after construction.

    Raises:
        FrozenInstanceError: If a field is assigned.
    """
    guide = guide_colorbar(title="x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        guide.title = "y"


@pytest.mark.unit
def test_guide_nbin_validation():
    """
    Ensures nbin must be a positive integer.

    Raises:
        TypeError: If nbin is not an integer.
        ValueError: If nbin is not positive.
    """
    with pytest.raises(TypeError, match="nbin"):
        GuideSpec(nbin=2.5)
    with pytest.raises(TypeError, match="nbin"):
        GuideSpec(nbin=True)
    with pytest.raises(ValueError, match="nbin"):
        GuideSpec(nbin=0)


@pytest.mark.unit
@pytest.mark.parametrize(
    "direction, position",
    [("vertical", "top"), ("vertical", "bottom"), ("horizontal", "left"), ("horizontal", "right")],
)
def test_guide_rejects_incompatible_label_position(direction, position):
    """
    Ensures label positions must match the direction.

    Args:
        direction (str): Guide direction.
        position (str): Incompatible label position.

    Raises:
        InvalidLabelPosition: If the combination is invalid.
    """
    with pytest.raises(InvalidLabelPosition, match=position):
        guide_colorbar(direction=direction, label_position=position)


@pytest.mark.unit
def test_guide_rejects_unknown_positions_and_direction():
    """
    Ensures unknown positions and directions are rejected.

    Raises:
        InvalidLabelPosition: If the label position is unknown.
        InvalidTitlePosition: If the title position is unknown.
        ValueError: If the direction is unknown.
    """
    with pytest.raises(InvalidLabelPosition):
        guide_colorbar(label_position="middle")
    with pytest.raises(InvalidTitlePosition):
        guide_colorbar(title_position="center")
    with pytest.raises(ValueError, match="direction"):
        guide_colorbar(direction="diagonal")
