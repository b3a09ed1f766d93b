"""
chromaguide/plot
~~~~~~~~~~~~~~~~
"""

from .gengrob import ColorbarGrob, build_colorbar, gengrob
from .layout import ResolvedLayout, resolve_bar_label, resolve_layout, resolve_with_title
from .theme import Theme

__all__ = [
    "ColorbarGrob",
    "ResolvedLayout",
    "Theme",
    "build_colorbar",
    "gengrob",
    "resolve_bar_label",
    "resolve_layout",
    "resolve_with_title",
]
