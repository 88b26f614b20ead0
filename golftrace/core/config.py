"""Configuration management for GolfTrace."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# =============================================================================
# Nested Configuration Classes
# =============================================================================


class TrackingConfig(BaseModel):
    """Club and head tracking configuration."""

    # Anchor initialization picks the club closest to this point
    frame_center: tuple[float, float] = (0.5, 0.5)
    # Quadrant assumed for occlusion recovery before any real head is seen
    initial_quadrant: int = Field(default=2, ge=0, le=3)
    # Samples fed to Lagrange extrapolation once enough history exists
    max_prediction_samples: int = Field(default=3, ge=2, le=3)
    # Keep synthesizing heads across consecutive occluded frames
    chain_occlusion_recovery: bool = True


class OutputConfig(BaseModel):
    """Pixel output configuration."""

    frame_width: int = Field(default=1080, gt=0)
    frame_height: int = Field(default=1920, gt=0)
    json_indent: int = Field(default=2, ge=0)


# =============================================================================
# Main Configuration Class
# =============================================================================


class GolfTraceConfig(BaseSettings):
    """Configuration settings for GolfTrace."""

    tracking: TrackingConfig = Field(default_factory=TrackingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    model_config = SettingsConfigDict(
        env_prefix="GOLFTRACE_",
        env_nested_delimiter="__",  # Allows GOLFTRACE_TRACKING__INITIAL_QUADRANT
    )

    # -------------------------------------------------------------------------
    # YAML Loading
    # -------------------------------------------------------------------------

    @classmethod
    def from_yaml(cls, path: Path) -> "GolfTraceConfig":
        """Load configuration from YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls(**data) if data else cls()

    @classmethod
    def find_and_load(cls) -> "GolfTraceConfig":
        """Find and load config from standard locations."""
        locations = [
            Path.cwd() / "golftrace.yaml",
            Path.home() / ".config" / "golftrace" / "golftrace.yaml",
        ]

        for path in locations:
            if path.exists():
                return cls.from_yaml(path)

        # Fall back to defaults + environment variables
        return cls()


# =============================================================================
# Global Config Instance
# =============================================================================

_config: Optional[GolfTraceConfig] = None


def get_config() -> GolfTraceConfig:
    """Get global configuration instance."""
    global _config
    if _config is None:
        _config = GolfTraceConfig.find_and_load()
    return _config


def set_config(config: GolfTraceConfig) -> None:
    """Set global configuration instance."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset global configuration instance (useful for testing)."""
    global _config
    _config = None
