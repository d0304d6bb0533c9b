"""Plotting functions for surface inspection."""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from seasurface.animation.surface import OceanSurface


def plot_height_field(
    surface: OceanSurface,
    cmap: str = "ocean",
    save_path: Path | None = None,
) -> Figure:
    """Plot the current vertex heights as an image over the plane.

    Args:
        surface: Initialised ocean surface.
        cmap: Matplotlib colormap name.
        save_path: Optional path to save figure.

    Returns:
        Matplotlib figure.
    """
    if not surface.is_initialized:
        raise ValueError("Surface not initialized. Call initialize() first.")

    grid = surface.mesh.geometry.grid
    heights = surface.heights.reshape(grid.shape)

    fig, ax = plt.subplots(figsize=(8, 7))

    # Row 0 of the grid is the +y edge, which imshow's default origin puts on top
    image = ax.imshow(
        heights,
        cmap=cmap,
        extent=(-grid.width / 2, grid.width / 2, -grid.height / 2, grid.height / 2),
        interpolation="bilinear",
    )
    cbar = plt.colorbar(image, ax=ax)
    cbar.set_label("Height")

    cfg = surface.config
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_title(
        f"Ocean Surface  t={surface.clock:.2f}\n"
        f"A={cfg.wave_amplitude:.2f}  speed={cfg.wave_speed:.2f}  "
        f"segments={cfg.segments}"
    )
    ax.set_aspect("equal")

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")

    return fig


def plot_height_history(
    heights: np.ndarray,
    dt: float,
    labels: list[str] | None = None,
    save_path: Path | None = None,
) -> Figure:
    """Plot height time series for one or more probe vertices.

    Args:
        heights: (frames,) or (frames, probes) array of heights.
        dt: Seconds between frames.
        labels: Optional legend label per probe.
        save_path: Optional path to save figure.

    Returns:
        Matplotlib figure.
    """
    heights = np.asarray(heights)
    if heights.ndim == 1:
        heights = heights[:, np.newaxis]

    times = np.arange(heights.shape[0]) * dt

    fig, ax = plt.subplots(figsize=(12, 4))

    for i in range(heights.shape[1]):
        label = labels[i] if labels and i < len(labels) else f"Probe {i}"
        ax.plot(times, heights[:, i], linewidth=1.2, label=label)

    ax.axhline(0.0, color="k", linewidth=0.5, alpha=0.5)
    ax.set_xlabel("Time (s)")
    ax.set_ylabel("Height")
    ax.set_title("Surface Height at Probe Vertices")
    ax.legend(loc="upper right")
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")

    return fig
