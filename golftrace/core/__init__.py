"""Core domain models and configuration."""

from golftrace.core.config import GolfTraceConfig, get_config
from golftrace.core.errors import (
    DetectionFormatError,
    GolfTraceError,
    InsufficientHistoryError,
    TimestampOrderError,
)
from golftrace.core.models import (
    Box,
    ClassConfidence,
    Detection,
    DetectionClass,
    Frame,
    TracePoint,
    TraceSample,
    VideoSize,
)

__all__ = [
    "Box",
    "ClassConfidence",
    "Detection",
    "DetectionClass",
    "DetectionFormatError",
    "Frame",
    "GolfTraceConfig",
    "GolfTraceError",
    "InsufficientHistoryError",
    "TimestampOrderError",
    "TracePoint",
    "TraceSample",
    "VideoSize",
    "get_config",
]
