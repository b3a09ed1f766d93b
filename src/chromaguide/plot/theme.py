"""
chromaguide/plot/theme
~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Optional, TypeAlias, TypedDict, Union

StyleValue: TypeAlias = Union[str, float, int, bool, None]

MM_PER_INCH = 25.4
POINTS_PER_INCH = 72.0


@dataclass(frozen=True)
class TextStyle:
    """
    Data class for storing the look of a text element.
    """

    size: float = 9.0
    color: str = "black"
    family: Optional[str] = None
    weight: str = "normal"
    lineheight: float = 1.2


class ThemeDefaults(TypedDict):
    """
    Type class for colorbar theme defaults.
    """

    base_fontsize: float
    lineheight: float
    legend_direction: str
    legend_key_size: float
    legend_key_width: Optional[float]
    legend_key_height: Optional[float]
    legend_key_unit: str
    legend_gap: float
    legend_title_size: float
    legend_title_color: str
    legend_title_weight: str
    legend_text_size: float
    legend_text_color: str
    font_family: Optional[str]
    legend_background_fill: Optional[str]
    legend_background_color: Optional[str]
    legend_background_lw: float
    tick_color: str
    tick_lw: float


DEFAULT_THEME: ThemeDefaults = {
    # One "line" is base_fontsize * lineheight points
    "base_fontsize": 11.0,
    "lineheight": 1.2,
    # Guide direction when the guide leaves it unset
    "legend_direction": "vertical",
    # Legend key size; width/height fall back to the size when None
    "legend_key_size": 1.2,
    "legend_key_width": None,
    "legend_key_height": None,
    "legend_key_unit": "lines",
    # Gap between bar, labels and title (lines)
    "legend_gap": 0.3,
    # Title and label text
    "legend_title_size": 11.0,
    "legend_title_color": "black",
    "legend_title_weight": "normal",
    "legend_text_size": 8.8,
    "legend_text_color": "black",
    "font_family": None,
    # Background box behind the whole guide
    "legend_background_fill": "white",
    "legend_background_color": None,
    "legend_background_lw": 0.5,
    # Tick marks drawn over the bar
    "tick_color": "white",
    "tick_lw": 0.5,
}


class Theme:
    """
    Class for storing colorbar theme defaults and overrides.
    """

    def __init__(self, defaults: Optional[Mapping[str, StyleValue]] = None, **overrides: StyleValue) -> None:
        """
        Initializes the Theme instance.

        Args:
            defaults (Optional[Mapping[str, StyleValue]]): Base theme defaults. Defaults to None.

        Kwargs:
            **overrides: Theme values taking priority over the defaults.
        """
        if defaults is None:
            defaults = DEFAULT_THEME
        self._defaults: Dict[str, StyleValue] = dict(defaults)
        self._overrides: Dict[str, StyleValue] = {}
        self.update(overrides)

    def get(self, key: str, default: Optional[StyleValue] = None) -> StyleValue:
        """
        Gets a theme value with override priority.

        Args:
            key (str): Theme key.
            default (Optional[StyleValue]): Default value if key not found. Defaults to None.

        Returns:
            StyleValue: Resolved theme value.
        """
        if key in self._overrides:
            return self._overrides[key]
        return self._defaults.get(key, default)

    def set(self, key: str, value: StyleValue) -> None:
        self._overrides[key] = value

    def update(self, overrides: Mapping[str, StyleValue]) -> None:
        """
        Applies multiple overrides at once.

        Args:
            overrides (Mapping[str, StyleValue]): Mapping of theme keys to values.
        """
        for key, value in overrides.items():
            self._overrides[key] = value

    def __getitem__(self, key: str) -> StyleValue:
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._overrides or key in self._defaults

    def text_style(self, kind: str) -> TextStyle:
        """
        Builds the text style for the legend title or the legend labels.

        Args:
            kind (str): Either "title" or "text".

        Returns:
            TextStyle: Resolved style.

        Raises:
            ValueError: If kind is unknown.
        """
        if kind not in {"title", "text"}:
            raise ValueError("text style `kind` must be 'title' or 'text'")
        return TextStyle(
            size=float(self.get(f"legend_{kind}_size")),
            color=str(self.get(f"legend_{kind}_color")),
            family=self.get("font_family"),
            weight=str(self.get(f"legend_{kind}_weight", "normal")),
            lineheight=float(self.get("lineheight")),
        )

    def key_size(self, which: str) -> float:
        """
        Returns the legend key width or height, in the key unit.

        Args:
            which (str): Either "width" or "height".

        Returns:
            float: Key size in `legend_key_unit`.
        """
        value = self.get(f"legend_key_{which}")
        if value is None:
            value = self.get("legend_key_size")
        return float(value)


def convert_to_mm(value: float, unit: str, theme: Theme) -> float:
    """
    Converts a size into millimetres.

    Args:
        value (float): Size value.
        unit (str): One of mm, cm, in/inches, pt/points, lines/line.
        theme (Theme): Theme providing the font size behind "lines".

    Returns:
        float: Size in millimetres.

    Raises:
        ValueError: If the unit is unknown.
    """
    value = float(value)
    if unit == "mm":
        return value
    if unit == "cm":
        return value * 10.0
    if unit in {"in", "inch", "inches"}:
        return value * MM_PER_INCH
    if unit in {"pt", "points"}:
        return value * MM_PER_INCH / POINTS_PER_INCH
    if unit in {"lines", "line"}:
        line_pt = float(theme.get("base_fontsize")) * float(theme.get("lineheight"))
        return value * line_pt * MM_PER_INCH / POINTS_PER_INCH
    raise ValueError(f"unknown unit {unit!r}; expected mm, cm, in, pt or lines")
