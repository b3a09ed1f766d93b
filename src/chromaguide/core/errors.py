"""
chromaguide/core/errors
~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations


class UnsupportedScaleKind(TypeError):
    """
    Raised when a scale cannot be explained by a colorbar (not continuous,
    or not mapped to a colour aesthetic).
    """


class InvalidLabelPosition(ValueError):
    """
    Raised when a label position does not fit the guide direction.
    """


class InvalidTitlePosition(ValueError):
    """
    Raised when a title position is not one of top/bottom/left/right.
    """
