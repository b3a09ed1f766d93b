"""
chromaguide/plot/renderers/colorbar
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.collections import LineCollection, PatchCollection
from matplotlib.colors import to_rgba
from matplotlib.patches import Rectangle

from ..gengrob import BarImage, BarRects, ColorbarGrob
from ..layout import Rect, ResolvedLayout, cell_extent
from ..sizing import font_properties
from ..theme import MM_PER_INCH

# Text anchors per label position: (ha, va)
_LABEL_ANCHORS = {
    "top": ("center", "bottom"),
    "bottom": ("center", "top"),
    "left": ("right", "center"),
    "right": ("left", "center"),
}


def _cell_axes_box(layout: ResolvedLayout, rect: Rect) -> Tuple[float, float, float, float]:
    """
    Computes the figure-fraction box [x0, y0, w, h] of a grid rectangle.

    Args:
        layout (ResolvedLayout): Resolved grid.
        rect (Rect): Grid rectangle.

    Returns:
        Tuple[float, float, float, float]: Axes box in figure coordinates.
    """
    total_w = layout.width or 1.0
    total_h = layout.height or 1.0
    x0, x1 = cell_extent(layout.widths, rect.left, rect.right)
    y0, y1 = cell_extent(layout.heights, rect.top, rect.bottom)
    # Grid rows run top-down; figure coordinates run bottom-up
    return (x0 / total_w, 1.0 - y1 / total_h, (x1 - x0) / total_w, (y1 - y0) / total_h)


def _cell_size_mm(layout: ResolvedLayout, rect: Rect) -> Tuple[float, float]:
    x0, x1 = cell_extent(layout.widths, rect.left, rect.right)
    y0, y1 = cell_extent(layout.heights, rect.top, rect.bottom)
    return x1 - x0, y1 - y0


def _add_cell_axes(fig: plt.Figure, layout: ResolvedLayout, rect: Rect, name: str) -> plt.Axes:
    """
    Adds a frameless axes over a grid rectangle, with data units in mm.
    """
    ax = fig.add_axes(_cell_axes_box(layout, rect), frameon=False, label=name)
    w, h = _cell_size_mm(layout, rect)
    ax.set_xlim(0.0, max(w, 1e-9))
    ax.set_ylim(0.0, max(h, 1e-9))
    ax.set_axis_off()
    return ax


def _render_bar(ax: plt.Axes, bar, direction: str) -> None:
    """
    Renders the colour bar as a raster image or as vector rectangles.

    Args:
        ax (plt.Axes): Bar cell axes.
        bar (Union[BarImage, BarRects]): Bar payload.
        direction (str): Guide direction.
    """
    width, height = bar.size.width, bar.size.height
    if isinstance(bar, BarImage):
        rgba = np.array([to_rgba(c) for c in bar.colors])
        image = rgba.reshape(1, -1, 4) if direction == "horizontal" else rgba.reshape(-1, 1, 4)
        ax.imshow(
            image,
            extent=(0.0, width, 0.0, height),
            origin="lower",
            aspect="auto",
            interpolation="bilinear" if bar.interpolate else "nearest",
        )
        return
    if isinstance(bar, BarRects):
        patches = [Rectangle((x, y), w, h) for x, y, w, h in bar.rects]
        ax.add_collection(
            PatchCollection(patches, facecolors=list(bar.colors), edgecolors="none", linewidths=0)
        )
        return
    raise TypeError(f"unsupported bar payload {type(bar).__name__}")


class ColorbarRenderer:
    """
    Class for drawing a laid-out colorbar guide with matplotlib.
    """

    def __init__(self, grob: ColorbarGrob) -> None:
        """
        Initializes the ColorbarRenderer instance.

        Args:
            grob (ColorbarGrob): Laid-out colorbar.
        """
        self.grob = grob
        self.axes: Dict[str, plt.Axes] = {}

    def figsize(self) -> Tuple[float, float]:
        """
        Returns the figure size in inches matching the guide grid.

        Returns:
            Tuple[float, float]: (width, height) in inches.
        """
        layout = self.grob.layout
        return (max(layout.width, 1.0) / MM_PER_INCH, max(layout.height, 1.0) / MM_PER_INCH)

    def render(self, fig: Optional[plt.Figure] = None) -> plt.Figure:
        """
        Draws the guide, one axes per element rectangle.

        Args:
            fig (Optional[plt.Figure]): Target figure. Defaults to None (a new
                figure sized to the guide).

        Returns:
            plt.Figure: Figure holding the guide.
        """
        grob = self.grob
        layout = grob.layout
        config = grob.config
        if fig is None:
            fig = plt.figure(figsize=self.figsize())
        axes: Dict[str, plt.Axes] = {}

        # Background spans the whole grid
        ax_bg = _add_cell_axes(fig, layout, layout["background"], "background")
        bg_w, bg_h = _cell_size_mm(layout, layout["background"])
        background = grob.background
        if background.fill is not None or background.edgecolor is not None:
            ax_bg.add_patch(
                Rectangle(
                    (0.0, 0.0),
                    bg_w,
                    bg_h,
                    facecolor=background.fill if background.fill is not None else "none",
                    edgecolor=background.edgecolor if background.edgecolor is not None else "none",
                    linewidth=background.linewidth,
                )
            )
        axes["background"] = ax_bg

        # Bar, with tick marks overlaid in the same cell
        ax_bar = _add_cell_axes(fig, layout, layout["bar"], "bar")
        ax_bar.set_xlim(0.0, config.bar_width)
        ax_bar.set_ylim(0.0, config.bar_height)
        _render_bar(ax_bar, grob.bar, config.direction)
        if grob.ticks is not None and grob.ticks.segments:
            ax_bar.add_collection(
                LineCollection(
                    list(grob.ticks.segments),
                    colors=grob.ticks.color,
                    linewidths=grob.ticks.linewidth,
                    capstyle="butt",
                    zorder=3,
                )
            )
        axes["bar"] = ax_bar
        axes["ticks"] = ax_bar

        # Labels at tick positions, anchored against the bar side
        if grob.label is not None:
            ax_label = _add_cell_axes(fig, layout, layout["label"], "label")
            lw, lh = _cell_size_mm(layout, layout["label"])
            ha, va = _LABEL_ANCHORS[config.label_position]
            prop = font_properties(grob.label.style)
            for text, pos in zip(grob.label.labels, grob.label.positions):
                if config.direction == "horizontal":
                    ax_label.set_xlim(0.0, config.bar_width)
                    xy = (pos, 0.0 if va == "bottom" else lh)
                else:
                    ax_label.set_ylim(0.0, config.bar_height)
                    xy = (lw if ha == "right" else 0.0, pos)
                ax_label.text(
                    xy[0],
                    xy[1],
                    text,
                    ha=ha,
                    va=va,
                    color=grob.label.style.color,
                    fontproperties=prop,
                    clip_on=False,
                )
            axes["label"] = ax_label

        # Title, left-aligned in its cell
        if grob.title is not None:
            ax_title = _add_cell_axes(fig, layout, layout["title"], "title")
            _tw, th = _cell_size_mm(layout, layout["title"])
            ax_title.text(
                0.0,
                th,
                grob.title.text,
                ha="left",
                va="top",
                color=grob.title.style.color,
                fontproperties=font_properties(grob.title.style),
                clip_on=False,
            )
            axes["title"] = ax_title

        self.axes = axes
        return fig
