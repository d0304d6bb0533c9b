"""Visualization tools for the ocean surface."""

from seasurface.viz.plots import plot_height_field, plot_height_history

__all__ = [
    "plot_height_field",
    "plot_height_history",
]
