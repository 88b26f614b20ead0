"""Trace command - club head trajectory from a detections file."""

from pathlib import Path

import typer
from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn

from golftrace.cli.utils import handle_errors, validate_output_path
from golftrace.core.config import GolfTraceConfig, get_config, set_config
from golftrace.core.detections import load_detections
from golftrace.core.models import VideoSize
from golftrace.tracking.club_head_tracker import ClubHeadTracker

console = Console()


def resolve_video_size(
    file_size: VideoSize | None,
    width: int | None,
    height: int | None,
) -> VideoSize:
    """Command line size wins, then the size recorded in the file, then config."""
    config = get_config()
    base = file_size or VideoSize(config.output.frame_width, config.output.frame_height)
    return VideoSize(width or base.width, height or base.height)


def load_config_option(config_path: Path | None) -> None:
    if config_path is not None:
        set_config(GolfTraceConfig.from_yaml(config_path))


@handle_errors
def trace(
    detections: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="Per-frame detections JSON file",
    ),
    output: Path | None = typer.Option(
        None,
        "--output", "-o",
        help="Output JSON file (default: <detections>_trace.json)",
    ),
    width: int | None = typer.Option(
        None,
        "--width",
        min=1,
        help="Video width in pixels (overrides file and config)",
    ),
    height: int | None = typer.Option(
        None,
        "--height",
        min=1,
        help="Video height in pixels (overrides file and config)",
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config", "-c",
        exists=True,
        dir_okay=False,
        help="YAML configuration file",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet", "-q",
        help="Suppress progress output",
    ),
) -> None:
    """Trace the club head through a swing.

    Reads detector output for every frame, follows the club and its head,
    fills short occlusions, and writes the head trajectory in pixels.

    Example:
        golftrace trace swing_detections.json -o swing_trace.json
    """
    load_config_option(config_path)

    if output is None:
        output = detections.with_name(f"{detections.stem}_trace.json")
    validate_output_path(output)

    frames, file_size = load_detections(detections)
    video_size = resolve_video_size(file_size, width, height)

    if not quiet:
        console.print(f"[bold]Club Head Trace:[/bold] {detections.name}")
        console.print(f"[dim]{len(frames)} frames at {video_size.width}x{video_size.height}[/dim]")

    tracker = ClubHeadTracker(video_size=video_size)

    if quiet:
        result = tracker.track(frames)
    else:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=console,
        ) as progress:
            task = progress.add_task("Tracking club head...", total=len(frames))
            result = tracker.track(
                frames,
                progress_callback=lambda _idx, _point: progress.advance(task),
            )

    result.to_json(output, indent=get_config().output.json_indent)

    if not quiet:
        console.print()
        console.print(f"Samples: {len(result.points)} "
                      f"({result.detected_samples} detected, {result.recovered_samples} recovered)")
        console.print(f"Club detection rate: {result.club_detection_rate:.1%}")
        if result.is_empty:
            console.print("[yellow]Warning: Tracking failed - no club head positions found[/yellow]")
        console.print(f"[green]Output saved to: {output}[/green]")
