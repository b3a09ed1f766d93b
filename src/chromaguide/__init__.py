"""
chromaguide
~~~~~~~~~~~

Continuous colorbar guides: geometry, grid layout and matplotlib rendering.
"""

from .core.errors import InvalidLabelPosition, InvalidTitlePosition, UnsupportedScaleKind
from .core.guide import WAIVER, GuideSpec, guide_colorbar
from .core.scale import ContinuousColorScale, DiscreteColorScale
from .core.train import TrainedColorbar, train_colorbar, train_guides
from .plot.gengrob import ColorbarGrob, build_colorbar, gengrob
from .plot.renderers import ColorbarRenderer
from .plot.theme import Theme

__all__ = [
    "WAIVER",
    "ColorbarGrob",
    "ColorbarRenderer",
    "ContinuousColorScale",
    "DiscreteColorScale",
    "GuideSpec",
    "InvalidLabelPosition",
    "InvalidTitlePosition",
    "Theme",
    "TrainedColorbar",
    "UnsupportedScaleKind",
    "build_colorbar",
    "gengrob",
    "guide_colorbar",
    "train_colorbar",
    "train_guides",
]

__version__ = "0.1.0"
