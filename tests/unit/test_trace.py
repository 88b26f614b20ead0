"""Tests for trace history and trajectory output."""

import json

import pytest

from golftrace.core.config import GolfTraceConfig, set_config
from golftrace.core.errors import TimestampOrderError
from golftrace.core.models import (
    Box,
    ClassConfidence,
    Detection,
    Frame,
    TracePoint,
    TraceSample,
    VideoSize,
)
from golftrace.tracking.trace import (
    TraceHistory,
    TrajectoryResult,
    box_to_pixel_rect,
    detection_boxes,
    head_detection_dots,
    to_pixel,
)

SIZE = VideoSize(100, 200)


def _point(frame_index: int, t: float, x: float, y: float, recovered: bool = False) -> TracePoint:
    return TracePoint(frame_index=frame_index, timestamp=t, x=x, y=y, is_recovered=recovered)


class TestPixelConversion:
    """Tests for normalized to pixel conversion."""

    def test_vertical_flip(self) -> None:
        assert to_pixel(0.25, 0.75, SIZE) == pytest.approx((25.0, 50.0))

    def test_box_rect_top_left(self) -> None:
        rect = box_to_pixel_rect(Box(0.5, 0.5, 0.2, 0.1), SIZE)
        assert rect == pytest.approx((40.0, 90.0, 20.0, 20.0))


class TestTraceHistory:
    """Tests for TraceHistory."""

    def test_append_and_index(self) -> None:
        history = TraceHistory()
        a = TraceSample(0.0, Box(0.1, 0.1, 0.1, 0.1))
        b = TraceSample(0.5, Box(0.2, 0.2, 0.1, 0.1))
        history.append(a)
        history.append(b)

        assert len(history) == 2
        assert history[-1] == b
        assert list(history[-2:]) == [a, b]
        assert history.last == b

    def test_rejects_non_increasing_timestamp(self) -> None:
        history = TraceHistory()
        history.append(TraceSample(1.0, Box(0.1, 0.1, 0.1, 0.1)))
        with pytest.raises(TimestampOrderError):
            history.append(TraceSample(1.0, Box(0.2, 0.2, 0.1, 0.1)))

    def test_rejects_nan_timestamp(self) -> None:
        history = TraceHistory()
        history.append(TraceSample(0.0, Box(0.1, 0.1, 0.1, 0.1)))
        with pytest.raises(TimestampOrderError):
            history.append(TraceSample(float("nan"), Box(0.2, 0.2, 0.1, 0.1)))
        assert len(history) == 1

    def test_rejects_nan_first_sample(self) -> None:
        with pytest.raises(TimestampOrderError):
            TraceHistory().append(TraceSample(float("nan"), Box(0.2, 0.2, 0.1, 0.1)))

    def test_empty_last(self) -> None:
        assert TraceHistory().last is None


class TestTrajectoryResult:
    """Tests for TrajectoryResult products."""

    @pytest.fixture
    def result(self) -> TrajectoryResult:
        return TrajectoryResult(
            points=[_point(0, 0.0, 10, 20), _point(2, 0.2, 12, 22, recovered=True)],
            video_size=SIZE,
            frames_processed=4,
            club_frames=3,
            frame_times=[(0, 0.0), (1, 0.1), (2, 0.2), (3, 0.4)],
        )

    def test_trajectory_is_restartable(self, result: TrajectoryResult) -> None:
        trajectory = result.trajectory()
        first = list(trajectory)
        second = list(trajectory)

        assert first == second == [(0.0, (10, 20)), (0.2, (12, 22))]
        assert len(trajectory) == 2

    def test_keyframes(self, result: TrajectoryResult) -> None:
        keyframes = result.keyframes()

        assert [kf.frame_index for kf in keyframes] == [0, 1, 2, 3]
        assert [kf.key_time for kf in keyframes] == pytest.approx([0.0, 0.25, 0.5, 1.0])
        assert [len(kf.path) for kf in keyframes] == [1, 1, 2, 2]

    def test_keyframes_empty(self) -> None:
        assert TrajectoryResult().keyframes() == []

    def test_to_dict(self, result: TrajectoryResult) -> None:
        data = result.to_dict()

        assert data["detectedSamples"] == 1
        assert data["recoveredSamples"] == 1
        assert data["clubDetectionRate"] == pytest.approx(0.75)
        assert data["points"][1]["isRecovered"] is True
        assert data["videoHeight"] == 200

    def test_to_json(self, result: TrajectoryResult, tmp_path) -> None:
        path = tmp_path / "trace.json"
        result.to_json(path)
        with open(path) as f:
            assert json.load(f)["framesProcessed"] == 4

    def test_default_video_size_from_config(self) -> None:
        set_config(GolfTraceConfig(output={"frame_width": 640, "frame_height": 480}))
        assert TrajectoryResult().video_size == VideoSize(640, 480)

    def test_empty_rates(self) -> None:
        result = TrajectoryResult()
        assert result.is_empty
        assert result.club_detection_rate == 0.0


class TestOverlayProducts:
    """Tests for raw detection overlays."""

    @pytest.fixture
    def frames(self) -> list[Frame]:
        club = Detection(Box(0.5, 0.5, 0.2, 0.1), ClassConfidence(0.9, 0.1))
        head = Detection(Box(0.6, 0.25, 0.1, 0.1), ClassConfidence(0.1, 0.9))
        return [
            Frame(0, 0.0, (club, head)),
            Frame(1, 0.1, (club,)),
            Frame(2, 0.2, (head,)),
        ]

    def test_detection_boxes_include_all_classes(self, frames: list[Frame]) -> None:
        boxes = detection_boxes(frames, SIZE)
        assert [len(b) for b in boxes] == [2, 1, 1]

    def test_head_dots_accumulate(self, frames: list[Frame]) -> None:
        dots = head_detection_dots(frames, SIZE)

        assert [len(d) for d in dots] == [1, 1, 2]
        assert dots[0][0] == pytest.approx((60.0, 150.0))
