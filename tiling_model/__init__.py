"""Layout tree model for a tiling window manager: node trees, selection, windows, sizes and springs."""

__version__ = "0.2.8"