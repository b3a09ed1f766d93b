"""
chromaguide/plot/gengrob
~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

import numpy as np

from ..core.guide import GuideSpec
from ..core.scale import Scale
from ..core.train import TrainedColorbar, train_colorbar
from .layout import ResolvedLayout, resolve_bar_label, resolve_with_title
from .sizing import Absent, EffectiveConfig, Present, Size, measure, resolve_config
from .theme import TextStyle, Theme
from .ticks import Segment, tick_positions, tick_segments, trim_limit_ticks


@dataclass(frozen=True)
class Background:
    """
    Data class for the box drawn behind the whole guide.
    """

    fill: Optional[str]
    edgecolor: Optional[str]
    linewidth: float


@dataclass(frozen=True)
class BarImage:
    """
    Data class for a raster bar; colours run from the low end of the bar.
    """

    colors: Tuple[str, ...]
    direction: str
    size: Size
    interpolate: bool = True


@dataclass(frozen=True)
class BarRects:
    """
    Data class for a vector bar drawn as one rectangle per colour sample.
    """

    colors: Tuple[str, ...]
    direction: str
    size: Size

    @property
    def rects(self) -> List[Tuple[float, float, float, float]]:
        """
        Returns (x, y, width, height) of each segment in bar-cell mm.
        """
        n = len(self.colors)
        if self.direction == "horizontal":
            step = self.size.width / n
            return [(i * step, 0.0, step, self.size.height) for i in range(n)]
        step = self.size.height / n
        return [(0.0, i * step, self.size.width, step) for i in range(n)]


@dataclass(frozen=True)
class LabelBlock:
    """
    Data class for the break labels; `positions` are mm along the bar.
    """

    labels: Tuple[str, ...]
    positions: Tuple[float, ...]
    direction: str
    style: TextStyle


@dataclass(frozen=True)
class TitleBlock:
    """
    Data class for the guide title.
    """

    text: str
    style: TextStyle


@dataclass(frozen=True)
class TickSegments:
    """
    Data class for tick marks drawn over the bar.
    """

    positions: Tuple[float, ...]
    segments: Tuple[Segment, ...]
    color: str
    linewidth: float


@dataclass(frozen=True)
class ColorbarGrob:
    """
    Data class for a laid-out colorbar ready for drawing.

    Hidden elements (no title, labels off, ticks off) are None and still
    own their rectangle in `layout`.
    """

    layout: ResolvedLayout
    config: EffectiveConfig
    background: Background
    bar: Union[BarImage, BarRects]
    label: Optional[LabelBlock]
    title: Optional[TitleBlock]
    ticks: Optional[TickSegments]
    hash: str


def gengrob(trained: TrainedColorbar, theme: Theme) -> ColorbarGrob:
    """
    Resolves the geometry and layout of a trained colorbar.

    Args:
        trained (TrainedColorbar): Guide trained against its scale.
        theme (Theme): Theme providing default sizes and styles.

    Returns:
        ColorbarGrob: Layout and drawable payloads.

    Raises:
        InvalidLabelPosition: If the label position does not fit the direction.
    """
    config = resolve_config(trained.guide, theme)
    colors = tuple(str(c) for c in trained.bar["colour"])
    labels = tuple(str(s) for s in trained.key[".label"])

    # Tick and label positions along the bar
    positions = tick_positions(
        trained.key[".value"].to_numpy(dtype=float),
        trained.bar["value"].to_numpy(dtype=float),
        config.nbin,
        config.bar_length,
    )
    drawn = trim_limit_ticks(positions, config.draw_llim, config.draw_ulim)

    # Element sizes
    title_el = Absent() if trained.title is None else Present(trained.title)
    label_el = Present(labels) if config.show_label else Absent()
    title_size = measure(title_el, config.title_style)
    label_size = measure(label_el, config.label_style)

    bar_label = resolve_bar_label(
        config.direction, config.label_position, config.bar_size, label_size, config.gap
    )
    layout = resolve_with_title(config.title_position, bar_label, title_size, config.gap)

    if config.raster:
        bar: Union[BarImage, BarRects] = BarImage(colors, config.direction, config.bar_size)
    else:
        bar = BarRects(colors, config.direction, config.bar_size)

    ticks = None
    if config.show_ticks:
        ticks = TickSegments(
            positions=tuple(float(p) for p in drawn),
            segments=tuple(tick_segments(drawn, config.direction, config.bar_size)),
            color=str(theme.get("tick_color")),
            linewidth=float(theme.get("tick_lw")),
        )

    return ColorbarGrob(
        layout=layout,
        config=config,
        background=Background(
            fill=theme.get("legend_background_fill"),
            edgecolor=theme.get("legend_background_color"),
            linewidth=float(theme.get("legend_background_lw")),
        ),
        bar=bar,
        label=(
            LabelBlock(labels, tuple(float(p) for p in np.asarray(positions)), config.direction, config.label_style)
            if config.show_label
            else None
        ),
        title=None if trained.title is None else TitleBlock(trained.title, config.title_style),
        ticks=ticks,
        hash=trained.hash,
    )


def build_colorbar(guide: GuideSpec, scale: Scale, theme: Optional[Theme] = None) -> ColorbarGrob:
    """
    Trains a colorbar guide on a scale and lays it out.

    Args:
        guide (GuideSpec): Guide configuration.
        scale (Scale): Continuous colour scale.
        theme (Optional[Theme]): Theme. Defaults to None (default theme).

    Returns:
        ColorbarGrob: Layout and drawable payloads.

    Raises:
        UnsupportedScaleKind: If the scale cannot be shown as a colorbar.
        InvalidLabelPosition: If the label position does not fit the direction.
    """
    trained = train_colorbar(guide, scale)
    return gengrob(trained, theme if theme is not None else Theme())
