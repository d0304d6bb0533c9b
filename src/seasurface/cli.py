"""Command-line interface for the ocean surface animator."""

import json
from pathlib import Path
from typing import Annotated, Optional

import numpy as np
import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

app = typer.Typer(
    name="seasurface",
    help="Procedural ocean surface animator",
    add_completion=False,
)
console = Console()


def _build_surface(segments: int, weather: str):
    """Initialise a surface in a fresh in-memory scene."""
    from seasurface.animation.surface import OceanSurface
    from seasurface.core.config import get_settings
    from seasurface.scene.graph import Scene

    settings = get_settings()
    settings.surface.segments = segments

    surface = OceanSurface(
        config=settings.surface,
        material=settings.material,
        log_fn=lambda message: None,
    )
    scene = Scene()
    surface.initialize(scene)
    surface.apply_weather(weather)
    return surface, scene


def _height_stats(heights: np.ndarray) -> dict[str, float]:
    return {
        "min": float(heights.min()),
        "max": float(heights.max()),
        "mean": float(heights.mean()),
        "rms": float(np.sqrt(np.mean(heights.astype(np.float64) ** 2))),
    }


@app.command()
def presets():
    """List the weather presets."""
    from seasurface.models.weather import WEATHER_PRESETS

    table = Table(title="Weather Presets")
    table.add_column("Name")
    table.add_column("Amplitude", justify="right")
    table.add_column("Speed", justify="right")
    table.add_column("Color")

    for preset in WEATHER_PRESETS.values():
        table.add_row(
            preset.state.value,
            f"{preset.wave_amplitude:.1f}",
            f"{preset.wave_speed:.1f}",
            f"#{preset.color:06x}",
        )

    console.print(table)
    console.print("Unknown names fall back to [bold]default[/bold].")


@app.command()
def simulate(
    frames: Annotated[int, typer.Option(help="Number of frames to run")] = 120,
    fps: Annotated[float, typer.Option(help="Frame rate")] = 60.0,
    weather: Annotated[str, typer.Option(help="Weather preset")] = "default",
    segments: Annotated[int, typer.Option(help="Grid segments per side")] = 64,
    ripple: Annotated[
        Optional[tuple[float, float, float]],
        typer.Option(help="Ripple X Z INTENSITY injected after every frame"),
    ] = None,
    history: Annotated[Optional[Path], typer.Option(help="Save centre-vertex height plot")] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
):
    """Run the surface headless and report height statistics."""
    if frames < 1 or fps <= 0:
        raise typer.BadParameter("frames must be >= 1 and fps must be positive")

    surface, scene = _build_surface(segments, weather)
    dt = 1.0 / fps

    centre = surface.mesh.geometry.count // 2
    centre_heights = np.empty(frames, dtype=np.float32)

    for frame in range(frames):
        surface.update(dt)
        if ripple is not None:
            surface.create_ripple(*ripple)
        centre_heights[frame] = surface.mesh.geometry.position[centre, 2]

    heights = surface.heights
    result = {
        "frames": frames,
        "duration_s": frames * dt,
        "clock": surface.clock,
        "vertices": int(heights.size),
        "wave_amplitude": surface.config.wave_amplitude,
        "wave_speed": surface.config.wave_speed,
        "heights": _height_stats(heights),
    }

    if history is not None:
        import matplotlib
        matplotlib.use("Agg")
        from seasurface.viz.plots import plot_height_history

        plot_height_history(centre_heights, dt, labels=["Centre"], save_path=history)

    surface.cleanup()

    if json_output:
        console.print(json.dumps(result, indent=2))
        return

    console.print(Panel.fit(
        f"[bold]Ocean Surface[/bold]\n"
        f"{frames} frames at {fps:g} fps, {result['vertices']} vertices\n"
        f"Amplitude {result['wave_amplitude']:.2f}, speed {result['wave_speed']:.2f}"
    ))

    table = Table(title="Final Heights")
    table.add_column("Statistic")
    table.add_column("Value", justify="right")
    for name, value in result["heights"].items():
        table.add_row(name, f"{value:.4f}")
    table.add_row("clock", f"{result['clock']:.4f}")
    console.print(table)

    if history is not None:
        console.print(f"[green]History plot saved to {history}[/green]")


@app.command()
def snapshot(
    output: Annotated[Path, typer.Argument(help="Output PNG file")],
    time: Annotated[float, typer.Option(help="Elapsed seconds to advance")] = 0.0,
    weather: Annotated[str, typer.Option(help="Weather preset")] = "default",
    segments: Annotated[int, typer.Option(help="Grid segments per side")] = 128,
    ripple: Annotated[
        Optional[tuple[float, float, float]],
        typer.Option(help="Ripple X Z INTENSITY applied to the frame"),
    ] = None,
):
    """Render the height field at a point in time to an image."""
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    from seasurface.viz.plots import plot_height_field

    if time < 0:
        raise typer.BadParameter("time must be non-negative")

    surface, scene = _build_surface(segments, weather)
    surface.update(time)
    if ripple is not None:
        surface.create_ripple(*ripple)

    fig = plot_height_field(surface, save_path=output)
    plt.close(fig)
    surface.cleanup()

    console.print(f"[green]Snapshot saved to {output}[/green]")


@app.command()
def version():
    """Show version information."""
    from seasurface import __version__
    console.print(f"seasurface v{__version__}")


if __name__ == "__main__":
    app()
