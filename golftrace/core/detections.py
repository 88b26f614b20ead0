"""Loading detector output into Frames."""

import json
import logging
from collections.abc import Sequence
from pathlib import Path

import numpy as np
from pydantic import ValidationError

from golftrace.core.errors import DetectionFormatError
from golftrace.core.models import Box, ClassConfidence, Detection, Frame, VideoSize
from golftrace.core.schemas import DetectionsFile, FrameRecord

logger = logging.getLogger(__name__)


def frame_from_arrays(
    index: int,
    timestamp: float,
    coordinates: Sequence[float] | np.ndarray,
    confidences: Sequence[float] | np.ndarray,
) -> Frame:
    """
    Build a Frame from raw detector output arrays.

    Args:
        index: Frame index in the video
        timestamp: Presentation time in seconds
        coordinates: Boxes as a flat array of length 4*N or an (N, 4) array
        confidences: Class scores as a flat array of length 2*N or an (N, 2) array

    Returns:
        Frame with N detections
    """
    coords = np.asarray(coordinates, dtype=np.float64)
    confs = np.asarray(confidences, dtype=np.float64)

    if coords.size % 4 != 0 or confs.size % 2 != 0:
        raise DetectionFormatError(
            f"Frame {index}: got {coords.size} coordinates and {confs.size} confidences",
            hint="Coordinates come in groups of 4 and confidences in groups of 2",
        )
    coords = coords.reshape(-1, 4)
    confs = confs.reshape(-1, 2)

    if len(coords) != len(confs):
        raise DetectionFormatError(
            f"Frame {index}: {len(coords)} boxes but {len(confs)} confidence pairs"
        )
    if not (np.all(np.isfinite(coords)) and np.all(np.isfinite(confs))):
        raise DetectionFormatError(f"Frame {index}: non-finite detector output")

    detections = tuple(
        Detection(
            box=Box(*(float(v) for v in box)),
            confidence=ClassConfidence(float(conf[0]), float(conf[1])),
        )
        for box, conf in zip(coords, confs)
    )
    return Frame(index=index, timestamp=float(timestamp), detections=detections)


def frame_from_record(index: int, record: FrameRecord) -> Frame:
    """Convert a validated FrameRecord to a Frame."""
    detections = tuple(
        Detection(
            box=Box(*d.box),
            confidence=ClassConfidence(*d.confidence),
        )
        for d in record.detections
    )
    return Frame(index=index, timestamp=record.timestamp, detections=detections)


def parse_detections(data: dict) -> tuple[list[Frame], VideoSize | None]:
    """
    Parse a detections document.

    Returns:
        Tuple of (frames in file order, video size if the file records one)
    """
    try:
        doc = DetectionsFile.model_validate(data)
    except ValidationError as e:
        raise DetectionFormatError(
            f"Invalid detections data: {e.error_count()} validation error(s)",
            hint=str(e.errors()[0]["msg"]) if e.errors() else None,
        ) from e

    frames = [frame_from_record(i, rec) for i, rec in enumerate(doc.frames)]

    video_size = None
    if doc.video_width is not None and doc.video_height is not None:
        video_size = VideoSize.from_natural_size(
            doc.video_width, doc.video_height, doc.rotation
        )

    logger.debug(f"Parsed {len(frames)} frames")
    return frames, video_size


def load_detections(path: Path) -> tuple[list[Frame], VideoSize | None]:
    """Load frames from a detections JSON file."""
    try:
        with open(path) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise DetectionFormatError(
            f"Not valid JSON: {path}",
            hint=f"Line {e.lineno}, column {e.colno}: {e.msg}",
        ) from e

    if not isinstance(data, dict):
        raise DetectionFormatError(
            f"Expected a JSON object in {path}",
            hint='Top level should look like {"frames": [...]}',
        )
    return parse_detections(data)
