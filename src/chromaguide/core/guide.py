"""
chromaguide/core/guide
~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple, TYPE_CHECKING, Union

from .errors import InvalidLabelPosition, InvalidTitlePosition

if TYPE_CHECKING:
    from ..plot.theme import TextStyle

DIRECTIONS = ("horizontal", "vertical")
TITLE_POSITIONS = ("top", "bottom", "left", "right")
LABEL_POSITIONS = {
    "horizontal": ("top", "bottom"),
    "vertical": ("left", "right"),
}
COLOUR_AESTHETICS = ("colour", "color", "fill")

# A bar size given as a bare number (in `default_unit`) or as (value, unit)
BarSize = Union[float, Tuple[float, str]]


class Waiver:
    """
    Sentinel meaning "not set by the user; take it from the scale".
    """

    _instance: Optional["Waiver"] = None

    def __new__(cls) -> "Waiver":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "WAIVER"


WAIVER = Waiver()


def check_label_position(direction: str, label_position: str) -> None:
    """
    Validates that a label position fits a direction.

    Args:
        direction (str): Guide direction.
        label_position (str): Label position.

    Raises:
        InvalidLabelPosition: If the position is not allowed for the direction.
    """
    allowed = LABEL_POSITIONS[direction]
    if label_position not in allowed:
        raise InvalidLabelPosition(
            f'label position "{label_position}" is invalid for a {direction} colorbar; '
            f"expected one of {list(allowed)}"
        )


@dataclass(frozen=True)
class GuideSpec:
    """
    Data class for storing the user configuration of a colorbar guide.

    `None` for a position or a bar size means "resolve from the direction
    or the theme at render time".
    """

    title: Any = WAIVER
    title_position: Optional[str] = None
    title_theme: Optional[TextStyle] = None
    label: bool = True
    label_position: Optional[str] = None
    label_theme: Optional[TextStyle] = None
    bar_width: Optional[BarSize] = None
    bar_height: Optional[BarSize] = None
    nbin: int = 20
    raster: bool = True
    ticks: bool = True
    draw_ulim: bool = True
    draw_llim: bool = True
    direction: Optional[str] = None
    default_unit: str = "lines"
    name: str = "colorbar"
    available_aes: Tuple[str, ...] = COLOUR_AESTHETICS

    def __post_init__(self) -> None:
        """
        Validates the configuration.

        Raises:
            TypeError: If nbin is not an integer.
            ValueError: If nbin is not positive or direction is unknown.
            InvalidTitlePosition: If title_position is unknown.
            InvalidLabelPosition: If label_position is unknown or does not fit direction.
        """
        if isinstance(self.nbin, bool) or not isinstance(self.nbin, int):
            raise TypeError(f"`nbin` must be an integer. Got: {self.nbin!r}")
        if self.nbin < 1:
            raise ValueError(f"`nbin` must be a positive integer. Got: {self.nbin}")
        if self.direction is not None and self.direction not in DIRECTIONS:
            raise ValueError(
                f"`direction` must be one of {list(DIRECTIONS)}. Got: {self.direction!r}"
            )
        if self.title_position is not None and self.title_position not in TITLE_POSITIONS:
            raise InvalidTitlePosition(
                f'title position "{self.title_position}" is invalid; '
                f"expected one of {list(TITLE_POSITIONS)}"
            )
        if self.label_position is not None:
            if self.direction is not None:
                check_label_position(self.direction, self.label_position)
            elif self.label_position not in LABEL_POSITIONS["horizontal"] + LABEL_POSITIONS["vertical"]:
                raise InvalidLabelPosition(f'label position "{self.label_position}" is invalid')
        # Freeze the available aesthetics as a tuple
        object.__setattr__(self, "available_aes", tuple(self.available_aes))


def guide_colorbar(**kwargs: Any) -> GuideSpec:
    """
    Creates a colorbar guide specification.

    Kwargs:
        **kwargs: Any `GuideSpec` field, e.g. `title`, `direction`,
            `label_position`, `nbin`, `bar_width`, `draw_ulim`.

    Returns:
        GuideSpec: Validated guide specification.
    """
    return GuideSpec(**kwargs)
