"""
chromaguide/plot/layout
~~~~~~~~~~~~~~~~~~~~~~~

Grid layout of a colorbar guide. Sizes are millimetres; grid coordinates
are 1-based and inclusive on both ends.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, List, Sequence, Tuple

from ..core.errors import InvalidTitlePosition
from ..core.guide import check_label_position
from .sizing import Size

ELEMENT_NAMES = ("background", "bar", "label", "title", "ticks")

# (direction, label position) -> (stacking axis, slot order along that axis)
BAR_LABEL_TEMPLATES: Dict[Tuple[str, str], Tuple[str, Tuple[str, str, str]]] = {
    ("horizontal", "top"): ("rows", ("label", "gap", "bar")),
    ("horizontal", "bottom"): ("rows", ("bar", "gap", "label")),
    ("vertical", "left"): ("cols", ("label", "gap", "bar")),
    ("vertical", "right"): ("cols", ("bar", "gap", "label")),
}

# title position -> (insertion axis, title placed before the bar+label block)
TITLE_TEMPLATES: Dict[str, Tuple[str, bool]] = {
    "top": ("rows", True),
    "bottom": ("rows", False),
    "left": ("cols", True),
    "right": ("cols", False),
}


@dataclass(frozen=True)
class Rect:
    """
    Data class for a rectangle of grid cells.
    """

    top: int
    left: int
    bottom: int
    right: int

    def shift(self, rows: int = 0, cols: int = 0) -> Rect:
        return replace(
            self,
            top=self.top + rows,
            bottom=self.bottom + rows,
            left=self.left + cols,
            right=self.right + cols,
        )

    def overlaps(self, other: Rect) -> bool:
        """
        Checks whether two rectangles share at least one cell.

        Args:
            other (Rect): Rectangle to compare with.

        Returns:
            bool: True if the rectangles intersect.
        """
        return not (
            self.right < other.left
            or other.right < self.left
            or self.bottom < other.top
            or other.bottom < self.top
        )

    def within(self, nrow: int, ncol: int) -> bool:
        return 1 <= self.top <= self.bottom <= nrow and 1 <= self.left <= self.right <= ncol


@dataclass(frozen=True)
class BarLabelLayout:
    """
    Data class for the grid holding the bar and its labels.
    """

    widths: Tuple[float, ...]
    heights: Tuple[float, ...]
    bar: Rect
    label: Rect


@dataclass(frozen=True)
class ResolvedLayout:
    """
    Data class for the final guide grid and the cell rectangle of every element.
    """

    widths: Tuple[float, ...]
    heights: Tuple[float, ...]
    rects: Dict[str, Rect]

    @property
    def nrow(self) -> int:
        return len(self.heights)

    @property
    def ncol(self) -> int:
        return len(self.widths)

    @property
    def width(self) -> float:
        return float(sum(self.widths))

    @property
    def height(self) -> float:
        return float(sum(self.heights))

    def __getitem__(self, name: str) -> Rect:
        return self.rects[name]


def resolve_bar_label(
    direction: str,
    label_position: str,
    bar_size: Size,
    label_size: Size,
    gap: float,
) -> BarLabelLayout:
    """
    Arranges the bar and the label block with a gap between them.

    Horizontal bars stack bar and labels in rows sharing one column; vertical
    bars place them side by side in one row. Hidden labels still take their
    slot with a zero size.

    Args:
        direction (str): "horizontal" or "vertical".
        label_position (str): top/bottom for horizontal, left/right for vertical.
        bar_size (Size): Bar size in mm.
        label_size (Size): Label block size in mm.
        gap (float): Gap between bar and labels in mm.

    Returns:
        BarLabelLayout: Widths, heights and the bar/label rectangles.

    Raises:
        InvalidLabelPosition: If the label position does not fit the direction.
    """
    check_label_position(direction, label_position)
    axis, order = BAR_LABEL_TEMPLATES[(direction, label_position)]
    sizes = {"bar": bar_size, "label": label_size}

    tracks: List[float] = []
    slots: Dict[str, Rect] = {}
    for i, slot in enumerate(order, start=1):
        if slot == "gap":
            tracks.append(float(gap))
            continue
        size = sizes[slot]
        tracks.append(float(size.height if axis == "rows" else size.width))
        slots[slot] = Rect(i, 1, i, 1) if axis == "rows" else Rect(1, i, 1, i)

    # The shared cross-axis track is as large as the bar
    if axis == "rows":
        return BarLabelLayout((float(bar_size.width),), tuple(tracks), slots["bar"], slots["label"])
    return BarLabelLayout(tuple(tracks), (float(bar_size.height),), slots["bar"], slots["label"])


def resolve_with_title(
    title_position: str,
    bar_label: BarLabelLayout,
    title_size: Size,
    gap: float,
) -> ResolvedLayout:
    """
    Adds the title next to the bar+label block and assigns every element a rectangle.

    The title spans the whole cross axis. When it is longer than the block on
    that axis, an extra padding track is added on the block side so the grid
    is never narrower (or shorter) than the title. A zero-sized title keeps
    its slot but its gap collapses to zero.

    Args:
        title_position (str): One of top/bottom/left/right.
        bar_label (BarLabelLayout): Resolved bar+label block.
        title_size (Size): Title size in mm.
        gap (float): Gap between title and block in mm.

    Returns:
        ResolvedLayout: Final grid with background, bar, label, title and ticks rectangles.

    Raises:
        InvalidTitlePosition: If the title position is unknown.
    """
    if title_position not in TITLE_TEMPLATES:
        raise InvalidTitlePosition(f'title position "{title_position}" is invalid')
    axis, title_first = TITLE_TEMPLATES[title_position]
    title_gap = float(gap) if (title_size.width > 0 or title_size.height > 0) else 0.0
    bar, label = bar_label.bar, bar_label.label

    if axis == "rows":
        widths = bar_label.widths + (max(0.0, title_size.width - sum(bar_label.widths)),)
        if title_first:
            heights = (float(title_size.height), title_gap) + bar_label.heights
            bar, label = bar.shift(rows=2), label.shift(rows=2)
            title = Rect(1, 1, 1, len(widths))
        else:
            heights = bar_label.heights + (title_gap, float(title_size.height))
            title = Rect(len(heights), 1, len(heights), len(widths))
    else:
        heights = bar_label.heights + (max(0.0, title_size.height - sum(bar_label.heights)),)
        if title_first:
            widths = (float(title_size.width), title_gap) + bar_label.widths
            bar, label = bar.shift(cols=2), label.shift(cols=2)
            title = Rect(1, 1, len(heights), 1)
        else:
            widths = bar_label.widths + (title_gap, float(title_size.width))
            title = Rect(1, len(widths), len(heights), len(widths))

    rects = {
        "background": Rect(1, 1, len(heights), len(widths)),
        "bar": bar,
        "label": label,
        "title": title,
        "ticks": bar,
    }
    return ResolvedLayout(widths=tuple(widths), heights=tuple(heights), rects=rects)


def resolve_layout(
    direction: str,
    label_position: str,
    title_position: str,
    bar_size: Size,
    label_size: Size,
    title_size: Size,
    gap: float,
) -> ResolvedLayout:
    """
    Runs both layout stages.

    Args:
        direction (str): "horizontal" or "vertical".
        label_position (str): Label position.
        title_position (str): Title position.
        bar_size (Size): Bar size in mm.
        label_size (Size): Label block size in mm.
        title_size (Size): Title size in mm.
        gap (float): Gap in mm.

    Returns:
        ResolvedLayout: Final grid.
    """
    bar_label = resolve_bar_label(direction, label_position, bar_size, label_size, gap)
    return resolve_with_title(title_position, bar_label, title_size, gap)


def cell_extent(sizes: Sequence[float], first: int, last: int) -> Tuple[float, float]:
    """
    Returns the (start, end) offset in mm of a 1-based inclusive track range.

    Args:
        sizes (Sequence[float]): Track sizes.
        first (int): First track (1-based).
        last (int): Last track (1-based).

    Returns:
        Tuple[float, float]: Offsets from the start of the grid.
    """
    start = float(sum(sizes[: first - 1]))
    return start, start + float(sum(sizes[first - 1 : last]))
