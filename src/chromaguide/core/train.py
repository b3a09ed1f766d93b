"""
chromaguide/core/train
~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, TYPE_CHECKING

import numpy as np
import pandas as pd

from ..util.warnings import warn
from .breaks import limit_tolerance, on_limit, pretty, within_limits
from .errors import UnsupportedScaleKind
from .guide import GuideSpec, Waiver

if TYPE_CHECKING:
    from .scale import Scale


@dataclass(frozen=True)
class ColorStop:
    """
    Data class for one colour sample of the bar gradient.
    """

    color: str
    value: float


@dataclass(frozen=True)
class TickEntry:
    """
    Data class for one break shown on the colorbar.
    """

    color: str
    label: str
    value: float


@dataclass(frozen=True, eq=False)
class TrainedColorbar:
    """
    Data class for storing a guide trained against a scale.

    `key` holds one row per break (columns: output aesthetic, `.label`,
    `.value`); `bar` holds one row per colour sample (`colour`, `value`).
    """

    guide: GuideSpec
    title: Optional[str]
    aesthetic: str
    key: pd.DataFrame
    bar: pd.DataFrame
    hash: str

    @property
    def bar_stops(self) -> List[ColorStop]:
        return [ColorStop(str(c), float(v)) for c, v in zip(self.bar["colour"], self.bar["value"])]

    @property
    def ticks(self) -> List[TickEntry]:
        return [
            TickEntry(str(c), str(lab), float(v))
            for c, lab, v in zip(self.key[self.aesthetic], self.key[".label"], self.key[".value"])
        ]


def bar_values(limits: Sequence[float], nbin: int) -> np.ndarray:
    """
    Computes the bar sample values for a scale domain.

    Pretty candidates outside the limits or equal to a limit are discarded.
    When nothing remains (very small `nbin`), the midpoint of the limits is
    used so the bar always has at least one stop.

    Args:
        limits (Sequence[float]): (low, high) scale domain.
        nbin (int): Requested number of bins.

    Returns:
        np.ndarray: Ascending sample values strictly inside the limits.
    """
    lo, hi = float(limits[0]), float(limits[1])
    candidates = within_limits(pretty((lo, hi), nbin), (lo, hi))
    tol = limit_tolerance((lo, hi))
    keep = ~(on_limit(candidates, lo, tol) | on_limit(candidates, hi, tol))
    values = candidates[keep]
    if values.size == 0:
        values = np.array([(lo + hi) / 2.0])
    return values


def content_hash(title: Optional[str], labels: Iterable[str], bar: pd.DataFrame, name: str) -> str:
    """
    Hashes the content that determines a colorbar's layout.

    Args:
        title (Optional[str]): Resolved title text.
        labels (Iterable[str]): Break labels.
        bar (pd.DataFrame): Bar samples (`colour`, `value`).
        name (str): Guide name.

    Returns:
        str: Hex digest.
    """
    payload = json.dumps(
        {
            "title": title,
            "labels": [str(s) for s in labels],
            "bar": [[str(c), float(v)] for c, v in zip(bar["colour"], bar["value"])],
            "name": name,
        },
        sort_keys=True,
    )
    return hashlib.md5(payload.encode(), usedforsecurity=False).hexdigest()


def _resolve_title(guide: GuideSpec, scale: Scale) -> Optional[str]:
    if isinstance(guide.title, Waiver):
        return getattr(scale, "name", None)
    if guide.title is None:
        return None
    return str(guide.title)


def train_colorbar(guide: GuideSpec, scale: Scale) -> TrainedColorbar:
    """
    Derives the bar samples and break key of a colorbar from a scale.

    Args:
        guide (GuideSpec): Guide configuration.
        scale (Scale): Continuous colour scale.

    Returns:
        TrainedColorbar: Guide with key, bar and content hash.

    Raises:
        UnsupportedScaleKind: If the scale maps no colour aesthetic or is not continuous.
    """
    aesthetics = [a for a in scale.aesthetics if a in guide.available_aes]
    if not aesthetics:
        raise UnsupportedScaleKind("colorbar guide needs colour or fill scales.")
    if not scale.is_continuous():
        raise UnsupportedScaleKind("colorbar guide needs continuous scales.")

    # Ticks and labels (one row per break)
    output = scale.aesthetics[0] if scale.aesthetics[0] in guide.available_aes else aesthetics[0]
    breaks = [float(b) for b in scale.breaks()]
    key = pd.DataFrame(
        {
            output: scale.map(breaks),
            ".label": list(scale.labels(breaks)),
            ".value": breaks,
        },
        columns=[output, ".label", ".value"],
    )

    # Bar samples
    values = bar_values(scale.limits(), guide.nbin)
    bar = pd.DataFrame({"colour": scale.map(values), "value": values})

    title = _resolve_title(guide, scale)
    return TrainedColorbar(
        guide=guide,
        title=title,
        aesthetic=output,
        key=key,
        bar=bar,
        hash=content_hash(title, key[".label"], bar, guide.name),
    )


def train_guides(pairs: Iterable[Tuple[GuideSpec, Scale]]) -> List[TrainedColorbar]:
    """
    Trains several guides, dropping the ones whose scale cannot be shown.

    Args:
        pairs (Iterable[Tuple[GuideSpec, Scale]]): (guide, scale) pairs.

    Returns:
        List[TrainedColorbar]: Trained guides in input order, unsupported ones omitted.
    """
    trained: List[TrainedColorbar] = []
    for guide, scale in pairs:
        try:
            trained.append(train_colorbar(guide, scale))
        except UnsupportedScaleKind as exc:
            warn(f"{exc} Dropping guide for scale {getattr(scale, 'name', None)!r}.", stacklevel=3)
    return trained
