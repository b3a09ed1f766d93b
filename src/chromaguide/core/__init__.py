"""
chromaguide/core
~~~~~~~~~~~~~~~~
"""

from .errors import InvalidLabelPosition, InvalidTitlePosition, UnsupportedScaleKind
from .guide import WAIVER, GuideSpec, guide_colorbar
from .scale import ContinuousColorScale, DiscreteColorScale, Scale
from .train import ColorStop, TickEntry, TrainedColorbar, train_colorbar, train_guides

__all__ = [
    "WAIVER",
    "ColorStop",
    "ContinuousColorScale",
    "DiscreteColorScale",
    "GuideSpec",
    "InvalidLabelPosition",
    "InvalidTitlePosition",
    "Scale",
    "TickEntry",
    "TrainedColorbar",
    "UnsupportedScaleKind",
    "guide_colorbar",
    "train_colorbar",
    "train_guides",
]
