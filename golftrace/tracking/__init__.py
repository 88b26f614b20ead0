"""Club and club head tracking for GolfTrace."""

from .club_head_tracker import ClubHeadTracker
from .club_tracker import ClubAnchorTracker
from .head_selector import HeadSelector, SelectionState
from .occlusion import Quadrant
from .trace import TraceHistory, Trajectory, TrajectoryResult

__all__ = [
    "ClubAnchorTracker",
    "ClubHeadTracker",
    "HeadSelector",
    "Quadrant",
    "SelectionState",
    "TraceHistory",
    "Trajectory",
    "TrajectoryResult",
]
