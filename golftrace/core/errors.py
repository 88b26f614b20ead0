"""Exceptions raised by GolfTrace."""


class GolfTraceError(Exception):
    """Base exception for GolfTrace errors."""

    def __init__(self, message: str, hint: str | None = None):
        self.message = message
        self.hint = hint
        super().__init__(message)


class InsufficientHistoryError(GolfTraceError):
    """Trajectory prediction requested with fewer than two samples."""
    pass


class TimestampOrderError(GolfTraceError):
    """Frames were supplied out of timestamp order."""
    pass


class DetectionFormatError(GolfTraceError):
    """Detection input could not be parsed."""
    pass
