"""Frame-to-frame tracking of the club bounding box."""

import logging
import math

from golftrace.core.geometry import center_distance, iou
from golftrace.core.models import Box

logger = logging.getLogger(__name__)


class ClubAnchorTracker:
    """
    Maintains the single best-guess club box across frames.

    While no anchor exists, the club nearest the frame center is taken.
    Afterwards the club with the greatest IoU against the anchor replaces it;
    if nothing overlaps, the anchor carries forward unchanged.
    """

    def __init__(self, frame_center: tuple[float, float] = (0.5, 0.5)):
        self.frame_center = frame_center
        self._anchor: Box | None = None

    @property
    def anchor(self) -> Box | None:
        """Current club box, None until the first club is seen."""
        return self._anchor

    def update(self, clubs: list[Box]) -> bool:
        """
        Advance the anchor with this frame's club candidates.

        Args:
            clubs: Club-class boxes for the frame

        Returns:
            True if a club was matched this frame (club_detected)
        """
        if self._anchor is None:
            return self._initialize(clubs)
        return self._continue(clubs)

    def _initialize(self, clubs: list[Box]) -> bool:
        best: Box | None = None
        best_dist = math.inf
        for club in clubs:
            dist = center_distance(club.center, self.frame_center)
            if dist < best_dist:
                best_dist = dist
                best = club

        if best is None:
            return False

        self._anchor = best
        logger.debug(f"Club anchor initialized at {best.center} ({best_dist:.3f} from center)")
        return True

    def _continue(self, clubs: list[Box]) -> bool:
        assert self._anchor is not None
        best: Box | None = None
        best_iou = 0.0
        for club in clubs:
            overlap = iou(self._anchor, club)
            if math.isnan(overlap):
                logger.warning(f"Degenerate club box {club.to_list()}, treating IoU as 0")
                continue
            if overlap > best_iou:
                best_iou = overlap
                best = club

        if best is None:
            return False

        self._anchor = best
        return True
