"""
chromaguide/core/scale
~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Iterable, List, Mapping, Optional, Protocol, Sequence, Tuple, Union

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import Colormap, Normalize, to_hex

from .breaks import limit_tolerance, pretty, within_limits


class Scale(Protocol):
    """
    Class for defining the scale interface consumed by guides.
    Protocol only; implement in concrete scales.
    """

    aesthetics: Tuple[str, ...]
    name: Optional[str]

    def is_continuous(self) -> bool:
        """
        Returns True for scales over a continuous numeric domain.
        """
        ...

    def limits(self) -> Tuple[float, float]:
        """
        Returns the (low, high) domain of the scale.
        """
        ...

    def breaks(self) -> List[float]:
        """
        Returns the user-visible break values.
        """
        ...

    def map(self, values: Iterable[float]) -> List[str]:
        """
        Maps values to colours.
        """
        ...

    def labels(self, breaks: Sequence[float]) -> List[str]:
        """
        Returns the label strings for `breaks`.
        """
        ...


def format_break(value: float, max_decimals: int = 6) -> str:
    """
    Formats a break value, trimming trailing zeros.

    Args:
        value (float): Break value.
        max_decimals (int): Maximum number of decimal places. Defaults to 6.

    Returns:
        str: Label text.
    """
    text = f"{value:.{max_decimals}f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


class ContinuousColorScale:
    """
    Class for mapping a numeric domain onto a matplotlib colormap.
    """

    def __init__(
        self,
        cmap: Union[str, Colormap],
        limits: Sequence[float],
        *,
        breaks: Optional[Sequence[float]] = None,
        labels: Optional[Sequence[str]] = None,
        aesthetics: Sequence[str] = ("fill",),
        name: Optional[str] = None,
        n_breaks: int = 5,
        na_value: str = "#7F7F7F",
    ) -> None:
        """
        Initializes the ContinuousColorScale instance.

        Args:
            cmap (Union[str, Colormap]): Colormap or registered colormap name.
            limits (Sequence[float]): (low, high) domain.

        Kwargs:
            breaks (Optional[Sequence[float]]): Explicit breaks. Defaults to None (pretty breaks).
            labels (Optional[Sequence[str]]): Explicit labels, one per break. Defaults to None.
            aesthetics (Sequence[str]): Aesthetics mapped by the scale. Defaults to ("fill",).
            name (Optional[str]): Scale name, used as default guide title. Defaults to None.
            n_breaks (int): Desired number of default breaks. Defaults to 5.
            na_value (str): Colour for values outside the limits. Defaults to "#7F7F7F".

        Raises:
            ValueError: If limits are not two finite, ordered values, or labels
                do not match breaks.
        """
        if len(limits) != 2:
            raise ValueError("scale `limits` must be a (low, high) pair")
        lo, hi = float(limits[0]), float(limits[1])
        if not (np.isfinite(lo) and np.isfinite(hi)) or lo > hi:
            raise ValueError(f"scale `limits` must be finite and ordered. Got: {tuple(limits)}")
        if labels is not None and (breaks is None or len(labels) != len(breaks)):
            raise ValueError("scale `labels` require `breaks` of the same length")

        self.cmap = plt.get_cmap(cmap) if isinstance(cmap, str) else cmap
        self.norm = Normalize(vmin=lo, vmax=hi)
        self.aesthetics = tuple(aesthetics)
        self.name = name
        self.n_breaks = int(n_breaks)
        self.na_value = na_value
        self._limits = (lo, hi)
        self._breaks = None if breaks is None else [float(b) for b in breaks]
        self._labels = None if labels is None else [str(s) for s in labels]

    def is_continuous(self) -> bool:
        return True

    def limits(self) -> Tuple[float, float]:
        return self._limits

    def breaks(self) -> List[float]:
        """
        Returns breaks inside the limits, explicit ones first choice.

        Returns:
            List[float]: Break values in ascending declaration order.
        """
        if self._breaks is not None:
            return [float(b) for b in within_limits(np.asarray(self._breaks), self._limits)]
        return [float(b) for b in within_limits(pretty(self._limits, self.n_breaks), self._limits)]

    def map(self, values: Iterable[float]) -> List[str]:
        """
        Maps values to hex colours; out-of-limits values map to `na_value`.

        Args:
            values (Iterable[float]): Values to map.

        Returns:
            List[str]: Hex colour per value.
        """
        arr = np.asarray(list(values), dtype=float)
        lo, hi = self._limits
        tol = limit_tolerance(self._limits)
        inside = (arr >= lo - tol) & (arr <= hi + tol)
        rgba = self.cmap(self.norm(arr))
        return [to_hex(c) if ok else self.na_value for c, ok in zip(rgba, inside)]

    def labels(self, breaks: Sequence[float]) -> List[str]:
        """
        Returns label text for `breaks`.

        Args:
            breaks (Sequence[float]): Break values.

        Returns:
            List[str]: One label per break.
        """
        if self._labels is not None and self._breaks is not None:
            lookup = dict(zip(self._breaks, self._labels))
            return [lookup.get(float(b), format_break(float(b))) for b in breaks]
        return [format_break(float(b)) for b in breaks]


class DiscreteColorScale:
    """
    Class for mapping categories onto a fixed palette.
    """

    def __init__(
        self,
        palette: Mapping[str, str],
        *,
        aesthetics: Sequence[str] = ("fill",),
        name: Optional[str] = None,
    ) -> None:
        self.palette = dict(palette)
        self.aesthetics = tuple(aesthetics)
        self.name = name

    def is_continuous(self) -> bool:
        return False

    def limits(self) -> Tuple[str, ...]:
        return tuple(self.palette)

    def breaks(self) -> List[str]:
        return list(self.palette)

    def map(self, values: Iterable[str]) -> List[str]:
        return [self.palette[v] for v in values]

    def labels(self, breaks: Sequence[str]) -> List[str]:
        return [str(b) for b in breaks]
