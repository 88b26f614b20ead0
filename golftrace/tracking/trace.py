"""Trace history and pixel-space trajectory output."""

import json
import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from golftrace.core.config import get_config
from golftrace.core.errors import TimestampOrderError
from golftrace.core.models import (
    Box,
    DetectionClass,
    Frame,
    TracePoint,
    TraceSample,
    VideoSize,
)


def to_pixel(x: float, y: float, video_size: VideoSize) -> tuple[float, float]:
    """Normalized bottom-up coordinates to top-down pixel coordinates."""
    return (x * video_size.width, (1.0 - y) * video_size.height)


def box_to_pixel_rect(box: Box, video_size: VideoSize) -> tuple[float, float, float, float]:
    """Normalized center box to a top-left pixel rectangle (x, y, w, h)."""
    return (
        (box.center_x - box.width / 2) * video_size.width,
        ((1.0 - box.center_y) - box.height / 2) * video_size.height,
        box.width * video_size.width,
        box.height * video_size.height,
    )


def _default_video_size() -> VideoSize:
    config = get_config()
    return VideoSize(config.output.frame_width, config.output.frame_height)


class TraceHistory(Sequence[TraceSample]):
    """Append-only list of accepted head samples with increasing timestamps."""

    def __init__(self) -> None:
        self._samples: list[TraceSample] = []

    def append(self, sample: TraceSample) -> None:
        if not math.isfinite(sample.timestamp):
            raise TimestampOrderError(f"Trace timestamp {sample.timestamp} is not finite")
        if self._samples and not sample.timestamp > self._samples[-1].timestamp:
            raise TimestampOrderError(
                f"Trace timestamp {sample.timestamp} does not follow "
                f"{self._samples[-1].timestamp}"
            )
        self._samples.append(sample)

    def __getitem__(self, index):  # type: ignore[override]
        return self._samples[index]

    def __len__(self) -> int:
        return len(self._samples)

    @property
    def last(self) -> TraceSample | None:
        return self._samples[-1] if self._samples else None


class Trajectory:
    """
    Finite, restartable sequence of (timestamp, pixel point) samples.

    Points are already in pixel space. Each pass iterates the shared point
    list, so it sees every point accepted so far.
    """

    def __init__(self, points: Sequence[TracePoint]):
        self._points = points

    def __iter__(self) -> Iterator[tuple[float, tuple[float, float]]]:
        for p in self._points:
            yield (p.timestamp, p.point)

    def __len__(self) -> int:
        return len(self._points)


@dataclass
class TraceKeyframe:
    """Cumulative trace polyline as it should look at one frame."""

    frame_index: int
    timestamp: float
    key_time: float  # timestamp / last timestamp, 0-1
    path: list[tuple[float, float]]


@dataclass
class TrajectoryResult:
    """Complete club head trajectory for one video."""

    points: list[TracePoint] = field(default_factory=list)
    video_size: VideoSize = field(default_factory=_default_video_size)
    frames_processed: int = 0
    club_frames: int = 0  # Frames where the club anchor was matched
    # Frame index and timestamp for every processed frame, in order
    frame_times: list[tuple[int, float]] = field(default_factory=list)

    @property
    def detected_samples(self) -> int:
        return sum(1 for p in self.points if not p.is_recovered)

    @property
    def recovered_samples(self) -> int:
        return sum(1 for p in self.points if p.is_recovered)

    @property
    def club_detection_rate(self) -> float:
        """Fraction of frames with a matched club."""
        if self.frames_processed == 0:
            return 0.0
        return self.club_frames / self.frames_processed

    @property
    def is_empty(self) -> bool:
        return not self.points

    def trajectory(self) -> Trajectory:
        """Lazy (timestamp, pixel point) view of the trace."""
        return Trajectory(self.points)

    def keyframes(self) -> list[TraceKeyframe]:
        """
        Cumulative trace path for every processed frame.

        Frames that produced no sample repeat the previous path.
        """
        if not self.frame_times:
            return []

        last_time = self.frame_times[-1][1]
        keyframes = []
        path: list[tuple[float, float]] = []
        point_iter = iter(self.points)
        pending = next(point_iter, None)

        for frame_index, timestamp in self.frame_times:
            while pending is not None and pending.frame_index <= frame_index:
                path.append(pending.point)
                pending = next(point_iter, None)
            key_time = timestamp / last_time if last_time > 0 else 0.0
            keyframes.append(TraceKeyframe(
                frame_index=frame_index,
                timestamp=timestamp,
                key_time=key_time,
                path=list(path),
            ))
        return keyframes

    def to_dict(self) -> dict[str, Any]:
        return {
            "points": [p.to_dict() for p in self.points],
            "videoWidth": self.video_size.width,
            "videoHeight": self.video_size.height,
            "framesProcessed": self.frames_processed,
            "detectedSamples": self.detected_samples,
            "recoveredSamples": self.recovered_samples,
            "clubDetectionRate": self.club_detection_rate,
        }

    def to_json(self, path: Path, indent: int = 2) -> None:
        """Write result to JSON file."""
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=indent)


def detection_boxes(
    frames: Sequence[Frame], video_size: VideoSize
) -> list[list[tuple[float, float, float, float]]]:
    """Pixel rectangles of every raw detection, per frame, for box overlays."""
    return [
        [box_to_pixel_rect(d.box, video_size) for d in frame.detections]
        for frame in frames
    ]


def head_detection_dots(
    frames: Sequence[Frame], video_size: VideoSize
) -> list[list[tuple[float, float]]]:
    """Cumulative pixel centers of all head-class detections, per frame."""
    dots: list[tuple[float, float]] = []
    per_frame = []
    for frame in frames:
        for d in frame.detections:
            if d.detection_class is DetectionClass.HEAD:
                dots.append(to_pixel(d.box.center_x, d.box.center_y, video_size))
        per_frame.append(list(dots))
    return per_frame
