"""
chromaguide/plot/sizing
~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, Sequence, TypeVar, Union

from matplotlib.font_manager import FontProperties
from matplotlib.textpath import TextToPath

from ..core.guide import GuideSpec, BarSize, check_label_position
from .theme import MM_PER_INCH, POINTS_PER_INCH, TextStyle, Theme, convert_to_mm

T = TypeVar("T")

# The bar is this many key sizes long along its direction
BAR_LENGTH_KEYS = 5

DEFAULT_LABEL_POSITION = {"horizontal": "bottom", "vertical": "right"}
DEFAULT_TITLE_POSITION = {"horizontal": "left", "vertical": "top"}

_TEXT_TO_PATH = TextToPath()


@dataclass(frozen=True)
class Size:
    """
    Data class for a width/height pair in millimetres.
    """

    width: float
    height: float


ZERO_SIZE = Size(0.0, 0.0)


@dataclass(frozen=True)
class Present(Generic[T]):
    """
    Data class for an element with content.
    """

    content: T


@dataclass(frozen=True)
class Absent:
    """
    Data class for a hidden element; it keeps its grid slot at zero size.
    """


Element = Union[Present, Absent]


def font_properties(style: TextStyle) -> FontProperties:
    return FontProperties(family=style.family, size=style.size, weight=style.weight)


def measure_text(text: str, style: TextStyle) -> Size:
    """
    Measures a (possibly multi-line) string.

    Args:
        text (str): Text to measure.
        style (TextStyle): Font settings.

    Returns:
        Size: Ink box in millimetres.
    """
    lines = str(text).split("\n")
    prop = font_properties(style)
    widths = []
    heights = []
    for line in lines:
        w, h, _d = _TEXT_TO_PATH.get_text_width_height_descent(line, prop, ismath=False)
        widths.append(w)
        heights.append(h)
    # Extra lines advance by the font's line height
    height_pt = max(heights) + (len(lines) - 1) * style.size * style.lineheight
    to_mm = MM_PER_INCH / POINTS_PER_INCH
    return Size(max(widths) * to_mm, height_pt * to_mm)


def measure_labels(labels: Sequence[str], style: TextStyle) -> Size:
    """
    Measures a block of labels as the largest single label.

    Only the block's cross-axis extent enters the layout; along the bar the
    labels sit at tick positions inside the bar length.

    Args:
        labels (Sequence[str]): Label strings.
        style (TextStyle): Font settings.

    Returns:
        Size: Largest label width and height in millimetres.
    """
    if not labels:
        return ZERO_SIZE
    sizes = [measure_text(s, style) for s in labels]
    return Size(max(s.width for s in sizes), max(s.height for s in sizes))


def measure(element: Element, style: TextStyle) -> Size:
    """
    Measures a title or label element; absent elements are zero-sized.

    Args:
        element (Element): `Present` with a string or list of strings, or `Absent`.
        style (TextStyle): Font settings.

    Returns:
        Size: Element size in millimetres.
    """
    if isinstance(element, Absent):
        return ZERO_SIZE
    content = element.content
    if isinstance(content, str):
        return measure_text(content, style)
    return measure_labels(list(content), style)


@dataclass(frozen=True)
class EffectiveConfig:
    """
    Data class for a guide configuration with every default resolved.
    """

    direction: str
    label_position: str
    title_position: str
    show_label: bool
    show_ticks: bool
    raster: bool
    draw_ulim: bool
    draw_llim: bool
    nbin: int
    bar_width: float
    bar_height: float
    gap: float
    title_style: TextStyle
    label_style: TextStyle

    @property
    def bar_length(self) -> float:
        return self.bar_width if self.direction == "horizontal" else self.bar_height

    @property
    def bar_size(self) -> Size:
        return Size(self.bar_width, self.bar_height)


def _bar_extent(value: Optional[BarSize], default_unit: str, theme: Theme) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, tuple):
        return convert_to_mm(value[0], value[1], theme)
    return convert_to_mm(value, default_unit, theme)


def resolve_config(guide: GuideSpec, theme: Theme) -> EffectiveConfig:
    """
    Resolves direction, positions, bar size and text styles of a guide.

    Args:
        guide (GuideSpec): Guide configuration.
        theme (Theme): Theme providing defaults.

    Returns:
        EffectiveConfig: Configuration the layout works from.

    Raises:
        InvalidLabelPosition: If the label position does not fit the direction.
        ValueError: If the theme direction is unknown.
    """
    direction = guide.direction or str(theme.get("legend_direction"))
    if direction not in DEFAULT_LABEL_POSITION:
        raise ValueError(f"unknown legend direction {direction!r}")
    label_position = guide.label_position or DEFAULT_LABEL_POSITION[direction]
    check_label_position(direction, label_position)
    title_position = guide.title_position or DEFAULT_TITLE_POSITION[direction]

    # Bar size: explicit override, else the theme key size stretched along the bar
    key_unit = str(theme.get("legend_key_unit"))
    key_w = convert_to_mm(theme.key_size("width"), key_unit, theme)
    key_h = convert_to_mm(theme.key_size("height"), key_unit, theme)
    bar_width = _bar_extent(guide.bar_width, guide.default_unit, theme)
    bar_height = _bar_extent(guide.bar_height, guide.default_unit, theme)
    if bar_width is None:
        bar_width = key_w * BAR_LENGTH_KEYS if direction == "horizontal" else key_w
    if bar_height is None:
        bar_height = key_h * BAR_LENGTH_KEYS if direction == "vertical" else key_h

    return EffectiveConfig(
        direction=direction,
        label_position=label_position,
        title_position=title_position,
        show_label=bool(guide.label),
        show_ticks=bool(guide.ticks),
        raster=bool(guide.raster),
        draw_ulim=bool(guide.draw_ulim),
        draw_llim=bool(guide.draw_llim),
        nbin=guide.nbin,
        bar_width=bar_width,
        bar_height=bar_height,
        gap=convert_to_mm(float(theme.get("legend_gap")), "lines", theme),
        title_style=guide.title_theme or theme.text_style("title"),
        label_style=guide.label_theme or theme.text_style("text"),
    )
