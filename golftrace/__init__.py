"""GolfTrace - Golf club head trajectory tracking from per-frame detections."""

__version__ = "0.1.0"

# Core exports for library usage
from golftrace.core.config import GolfTraceConfig, get_config
from golftrace.core.models import Box, ClassConfidence, Detection, Frame, TracePoint, VideoSize
from golftrace.tracking.club_head_tracker import ClubHeadTracker
from golftrace.tracking.trace import TrajectoryResult

__all__ = [
    "Box",
    "ClassConfidence",
    "ClubHeadTracker",
    "Detection",
    "Frame",
    "GolfTraceConfig",
    "TracePoint",
    "TrajectoryResult",
    "VideoSize",
    "get_config",
]
