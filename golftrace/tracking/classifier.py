"""Split a frame's detections into club and head candidates."""

from collections.abc import Iterable

from golftrace.core.models import Box, Detection, DetectionClass


def classify_detections(detections: Iterable[Detection]) -> tuple[list[Box], list[Box]]:
    """
    Partition detections by their confidence pair.

    Every detection lands in exactly one list, input order preserved.

    Returns:
        Tuple of (club boxes, head boxes)
    """
    clubs: list[Box] = []
    heads: list[Box] = []
    for detection in detections:
        if detection.detection_class is DetectionClass.HEAD:
            heads.append(detection.box)
        else:
            clubs.append(detection.box)
    return clubs, heads
