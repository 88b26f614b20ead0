"""Pydantic models for GolfTrace detection input files."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DetectionRecord(BaseModel):
    """One detector output in a detections file."""

    model_config = ConfigDict(allow_inf_nan=False)

    box: tuple[float, float, float, float] = Field(
        description="Center-based box [cx, cy, w, h], normalized 0-1"
    )
    confidence: tuple[float, float] = Field(
        description="Class confidences [club, head]"
    )

    @field_validator("box")
    @classmethod
    def _non_negative_size(
        cls, v: tuple[float, float, float, float]
    ) -> tuple[float, float, float, float]:
        if v[2] < 0 or v[3] < 0:
            raise ValueError("box width and height must be >= 0")
        return v


class FrameRecord(BaseModel):
    """All detections for one decoded frame."""

    model_config = ConfigDict(allow_inf_nan=False)

    timestamp: float = Field(description="Presentation time in seconds")
    detections: list[DetectionRecord] = Field(default_factory=list)


class DetectionsFile(BaseModel):
    """Per-frame detections for one video, as written by the inference step."""

    model_config = ConfigDict(populate_by_name=True)

    video_width: int | None = Field(default=None, gt=0, alias="videoWidth")
    video_height: int | None = Field(default=None, gt=0, alias="videoHeight")
    rotation: int = Field(default=0, description="Track rotation in degrees")
    frames: list[FrameRecord] = Field(default_factory=list)
