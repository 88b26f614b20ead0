"""Core domain models for GolfTrace."""

from dataclasses import dataclass
from enum import Enum


class DetectionClass(str, Enum):
    """Class assigned to a raw detection."""

    CLUB = "club"
    HEAD = "head"


@dataclass(frozen=True)
class Box:
    """Center-based bounding box, normalized to [0, 1] of the frame.

    The y axis points up (detector convention); pixel conversion flips it.
    """

    center_x: float
    center_y: float
    width: float
    height: float

    @property
    def center(self) -> tuple[float, float]:
        """Get center point of bounding box."""
        return (self.center_x, self.center_y)

    def to_list(self) -> list[float]:
        return [self.center_x, self.center_y, self.width, self.height]


@dataclass(frozen=True)
class ClassConfidence:
    """Two-class confidence pair produced by the detector."""

    club_score: float
    head_score: float

    @property
    def detection_class(self) -> DetectionClass:
        """Head iff head_score is strictly greater; ties go to club."""
        if self.head_score > self.club_score:
            return DetectionClass.HEAD
        return DetectionClass.CLUB


@dataclass(frozen=True)
class Detection:
    """A single detector output: box plus class confidences."""

    box: Box
    confidence: ClassConfidence

    @property
    def detection_class(self) -> DetectionClass:
        return self.confidence.detection_class


@dataclass(frozen=True)
class Frame:
    """Detections for one decoded video frame."""

    index: int
    timestamp: float  # Seconds, strictly increasing across a run
    detections: tuple[Detection, ...] = ()


@dataclass(frozen=True)
class TraceSample:
    """An accepted head position in normalized coordinates."""

    timestamp: float
    box: Box
    is_recovered: bool = False  # Synthesized by occlusion recovery


@dataclass(frozen=True)
class TracePoint:
    """An accepted head position converted to pixel space."""

    frame_index: int
    timestamp: float
    x: float
    y: float
    is_recovered: bool = False

    @property
    def point(self) -> tuple[float, float]:
        return (self.x, self.y)

    def to_dict(self) -> dict:
        return {
            "frameIndex": self.frame_index,
            "timestamp": self.timestamp,
            "x": self.x,
            "y": self.y,
            "isRecovered": self.is_recovered,
        }


@dataclass(frozen=True)
class VideoSize:
    """Render size of the source video in pixels."""

    width: int
    height: int

    @classmethod
    def from_natural_size(cls, width: int, height: int, rotation: int = 0) -> "VideoSize":
        """Build the display size from the encoded size and track rotation.

        Portrait recordings are stored landscape with a 90 or 270 degree
        rotation; the display size swaps the two dimensions.
        """
        if rotation % 180 == 90:
            return cls(width=height, height=width)
        return cls(width=width, height=height)

    @property
    def resolution(self) -> tuple[int, int]:
        """Get resolution as (width, height) tuple."""
        return (self.width, self.height)
