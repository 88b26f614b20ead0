"""Overlay command - per-frame drawing data for the trace and raw boxes."""

import json
from pathlib import Path

import typer
from rich.console import Console

from golftrace.cli.commands.trace import load_config_option, resolve_video_size
from golftrace.cli.utils import handle_errors, validate_output_path
from golftrace.core.config import get_config
from golftrace.core.detections import load_detections
from golftrace.tracking.club_head_tracker import ClubHeadTracker
from golftrace.tracking.trace import detection_boxes, head_detection_dots

console = Console()


@handle_errors
def overlay(
    detections: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="Per-frame detections JSON file",
    ),
    output: Path | None = typer.Option(
        None,
        "--output", "-o",
        help="Output JSON file (default: <detections>_overlay.json)",
    ),
    width: int | None = typer.Option(None, "--width", min=1, help="Video width in pixels"),
    height: int | None = typer.Option(None, "--height", min=1, help="Video height in pixels"),
    config_path: Path | None = typer.Option(
        None,
        "--config", "-c",
        exists=True,
        dir_okay=False,
        help="YAML configuration file",
    ),
    dots: bool = typer.Option(
        False,
        "--dots/--no-dots",
        help="Include cumulative head detection dots",
    ),
) -> None:
    """Export overlay keyframes for a renderer.

    Each keyframe holds the trace path drawn so far, its normalized key
    time, and the raw detection rectangles for that frame.

    Example:
        golftrace overlay swing_detections.json --dots
    """
    load_config_option(config_path)

    if output is None:
        output = detections.with_name(f"{detections.stem}_overlay.json")
    validate_output_path(output)

    frames, file_size = load_detections(detections)
    video_size = resolve_video_size(file_size, width, height)

    result = ClubHeadTracker(video_size=video_size).track(frames)
    boxes = detection_boxes(frames, video_size)
    head_dots = head_detection_dots(frames, video_size) if dots else None

    keyframes = []
    for i, kf in enumerate(result.keyframes()):
        entry = {
            "frameIndex": kf.frame_index,
            "timestamp": kf.timestamp,
            "keyTime": kf.key_time,
            "path": [list(p) for p in kf.path],
            "boxes": [list(b) for b in boxes[i]],
        }
        if head_dots is not None:
            entry["dots"] = [list(p) for p in head_dots[i]]
        keyframes.append(entry)

    data = {
        "videoWidth": video_size.width,
        "videoHeight": video_size.height,
        "duration": frames[-1].timestamp if frames else 0.0,
        "keyframes": keyframes,
    }
    with open(output, "w") as f:
        json.dump(data, f, indent=get_config().output.json_indent)

    console.print(f"Keyframes: {len(keyframes)}")
    console.print(f"[green]Output saved to: {output}[/green]")
