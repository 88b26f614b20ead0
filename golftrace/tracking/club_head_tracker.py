"""Frame-by-frame club head tracking from raw detections."""

import logging
import math
from collections.abc import Callable, Iterable

from golftrace.core.config import get_config
from golftrace.core.errors import TimestampOrderError
from golftrace.core.models import Box, Frame, TracePoint, TraceSample, VideoSize
from golftrace.tracking.classifier import classify_detections
from golftrace.tracking.club_tracker import ClubAnchorTracker
from golftrace.tracking.head_filter import filter_head_candidates
from golftrace.tracking.head_selector import HeadSelector
from golftrace.tracking.occlusion import Quadrant, classify_quadrant, recover_head_box
from golftrace.tracking.trace import TraceHistory, TrajectoryResult, to_pixel

logger = logging.getLogger(__name__)


class ClubHeadTracker:
    """
    Tracks the golf club head through a swing video.

    Per frame: classify detections, advance the club anchor, keep head
    candidates overlapping the anchor, pick one (or synthesize one when the
    head is occluded), and append it to the trace.

    One instance covers one video. State is never shared between instances.
    """

    def __init__(
        self,
        video_size: VideoSize | None = None,
        frame_center: tuple[float, float] | None = None,
        initial_quadrant: int | None = None,
        max_prediction_samples: int | None = None,
        chain_occlusion_recovery: bool | None = None,
    ):
        """
        Initialize club head tracker.

        Args:
            video_size: Display size used for pixel conversion
            frame_center: Reference point for picking the first club
            initial_quadrant: Quadrant assumed before a real head is accepted
            max_prediction_samples: Samples used for extrapolation (2 or 3)
            chain_occlusion_recovery: Keep synthesizing across consecutive occluded frames
        """
        config = get_config()
        self.video_size = video_size or VideoSize(
            config.output.frame_width, config.output.frame_height
        )
        self.chain_occlusion_recovery = (
            chain_occlusion_recovery
            if chain_occlusion_recovery is not None
            else config.tracking.chain_occlusion_recovery
        )
        quadrant = (
            initial_quadrant if initial_quadrant is not None
            else config.tracking.initial_quadrant
        )

        self._club_tracker = ClubAnchorTracker(
            frame_center=frame_center or config.tracking.frame_center
        )
        self._selector = HeadSelector(
            max_prediction_samples=max_prediction_samples
            or config.tracking.max_prediction_samples
        )
        self._history = TraceHistory()
        self._points: list[TracePoint] = []
        self._last_quadrant = Quadrant(quadrant)
        self._last_timestamp: float | None = None
        self._frames_processed = 0
        self._club_frames = 0
        self._frame_times: list[tuple[int, float]] = []

    @property
    def last_club(self) -> Box | None:
        return self._club_tracker.anchor

    @property
    def last_head(self) -> Box | None:
        last = self._history.last
        return last.box if last else None

    @property
    def last_quadrant(self) -> Quadrant:
        return self._last_quadrant

    @property
    def history(self) -> TraceHistory:
        return self._history

    def process_frame(self, frame: Frame) -> TracePoint | None:
        """
        Run one frame through the tracker.

        Args:
            frame: Frame with a timestamp greater than the previous frame's

        Returns:
            The accepted TracePoint, or None if no head could be resolved
        """
        if not math.isfinite(frame.timestamp):
            raise TimestampOrderError(
                f"Frame {frame.index} has non-finite timestamp {frame.timestamp}",
                hint="Timestamps must be finite seconds",
            )
        if self._last_timestamp is not None and not frame.timestamp > self._last_timestamp:
            raise TimestampOrderError(
                f"Frame {frame.index} timestamp {frame.timestamp} is not after "
                f"{self._last_timestamp}",
                hint="Frames must be supplied in presentation order",
            )
        self._last_timestamp = frame.timestamp
        self._frames_processed += 1
        self._frame_times.append((frame.index, frame.timestamp))

        clubs, heads = classify_detections(frame.detections)
        club_detected = self._club_tracker.update(clubs)
        if club_detected:
            self._club_frames += 1
        club = self._club_tracker.anchor

        candidates = filter_head_candidates(heads, club)
        if candidates:
            assert club is not None
            head = self._selector.select(candidates, club, self._history, frame.timestamp)
            self._last_quadrant = classify_quadrant(head, club, self._last_quadrant)
            return self._accept(frame, head, recovered=False)

        if club_detected and self._can_recover():
            assert club is not None and self.last_head is not None
            head = recover_head_box(club, self.last_head, self._last_quadrant)
            logger.debug(
                f"Frame {frame.index}: head occluded, synthesized at {head.center} "
                f"(quadrant {self._last_quadrant.value})"
            )
            return self._accept(frame, head, recovered=True)

        logger.debug(f"Frame {frame.index}: no observable head")
        return None

    def _can_recover(self) -> bool:
        last = self._history.last
        if last is None:
            return False
        return self.chain_occlusion_recovery or not last.is_recovered

    def _accept(self, frame: Frame, head: Box, recovered: bool) -> TracePoint:
        self._history.append(TraceSample(frame.timestamp, head, is_recovered=recovered))
        x, y = to_pixel(head.center_x, head.center_y, self.video_size)
        point = TracePoint(
            frame_index=frame.index,
            timestamp=frame.timestamp,
            x=x,
            y=y,
            is_recovered=recovered,
        )
        self._points.append(point)
        return point

    def result(self) -> TrajectoryResult:
        """Snapshot of the trajectory accumulated so far."""
        return TrajectoryResult(
            points=list(self._points),
            video_size=self.video_size,
            frames_processed=self._frames_processed,
            club_frames=self._club_frames,
            frame_times=list(self._frame_times),
        )

    def track(
        self,
        frames: Iterable[Frame],
        progress_callback: Callable[[int, TracePoint | None], None] | None = None,
    ) -> TrajectoryResult:
        """
        Process all frames in order.

        Args:
            frames: Frames in presentation order
            progress_callback: Called after each frame with (frame index, point)

        Returns:
            TrajectoryResult with the full trace
        """
        for frame in frames:
            point = self.process_frame(frame)
            if progress_callback:
                progress_callback(frame.index, point)

        result = self.result()
        logger.info(
            f"Tracked {result.frames_processed} frames: "
            f"{result.detected_samples} detected, {result.recovered_samples} recovered, "
            f"club rate {result.club_detection_rate:.1%}"
        )
        if result.is_empty:
            logger.warning("No club head positions resolved")
        return result
