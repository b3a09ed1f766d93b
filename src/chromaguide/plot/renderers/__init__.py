"""Plot layer renderers."""

from .colorbar import ColorbarRenderer

__all__ = ["ColorbarRenderer"]
