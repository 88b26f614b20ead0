"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from golftrace.core.config import GolfTraceConfig, get_config, reset_config, set_config


class TestGolfTraceConfig:
    """Tests for GolfTraceConfig."""

    def test_defaults(self) -> None:
        config = GolfTraceConfig()
        assert config.tracking.frame_center == (0.5, 0.5)
        assert config.tracking.initial_quadrant == 2
        assert config.tracking.max_prediction_samples == 3
        assert config.output.frame_width == 1080

    def test_from_yaml(self, tmp_path) -> None:
        path = tmp_path / "golftrace.yaml"
        path.write_text("tracking:\n  initial_quadrant: 0\noutput:\n  frame_width: 720\n")

        config = GolfTraceConfig.from_yaml(path)
        assert config.tracking.initial_quadrant == 0
        assert config.output.frame_width == 720

    def test_empty_yaml(self, tmp_path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert GolfTraceConfig.from_yaml(path) == GolfTraceConfig()

    def test_find_and_load_cwd(self, tmp_path) -> None:
        (tmp_path / "golftrace.yaml").write_text("output:\n  frame_height: 640\n")
        assert GolfTraceConfig.find_and_load().output.frame_height == 640

    def test_env_override(self, monkeypatch) -> None:
        monkeypatch.setenv("GOLFTRACE_TRACKING__CHAIN_OCCLUSION_RECOVERY", "false")
        assert GolfTraceConfig().tracking.chain_occlusion_recovery is False

    def test_invalid_quadrant(self) -> None:
        with pytest.raises(ValidationError):
            GolfTraceConfig(tracking={"initial_quadrant": 4})

    def test_invalid_prediction_samples(self) -> None:
        with pytest.raises(ValidationError):
            GolfTraceConfig(tracking={"max_prediction_samples": 1})


class TestGlobalConfig:
    """Tests for the process-wide config instance."""

    def test_set_and_reset(self) -> None:
        custom = GolfTraceConfig(output={"frame_width": 320})
        set_config(custom)
        assert get_config() is custom

        reset_config()
        assert get_config().output.frame_width == 1080

    def test_tracker_reads_config(self) -> None:
        from golftrace.core.models import VideoSize
        from golftrace.tracking.club_head_tracker import ClubHeadTracker
        from golftrace.tracking.occlusion import Quadrant

        set_config(GolfTraceConfig(
            tracking={"initial_quadrant": 3},
            output={"frame_width": 640, "frame_height": 480},
        ))
        tracker = ClubHeadTracker()
        assert tracker.video_size == VideoSize(640, 480)
        assert tracker.last_quadrant is Quadrant.LOWER_RIGHT
