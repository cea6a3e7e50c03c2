"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from pathviewer.path.bounds import Bounds
from pathviewer.path.commands import CommandKind


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    kinds_registered: int = 0


class BoundsModel(BaseModel):
    min_x: float
    min_y: float
    max_x: float
    max_y: float
    width: float
    height: float

    @classmethod
    def from_bounds(cls, bounds: Bounds | None) -> BoundsModel | None:
        if bounds is None:
            return None
        return cls(
            min_x=bounds.min_x,
            min_y=bounds.min_y,
            max_x=bounds.max_x,
            max_y=bounds.max_y,
            width=bounds.width,
            height=bounds.height,
        )


class CommandModel(BaseModel):
    kind: CommandKind
    designator: str
    text: str
    values: list[float] = Field(default_factory=list)
    flags: list[bool] = Field(default_factory=list)


class ParseResponse(BaseModel):
    data: str
    commands: list[CommandModel] = Field(default_factory=list)
    error: str | None = None
    bounds: BoundsModel | None = None
    margin: float = 0.0


class TransformResponse(BaseModel):
    data: str
    bounds: BoundsModel | None = None


class SegmentModel(BaseModel):
    index: int
    text: str
    segment_data: str
    path_up_to: str


class SegmentsResponse(BaseModel):
    segments: list[SegmentModel] = Field(default_factory=list)
    error: str | None = None


class EditorDescriptionResponse(BaseModel):
    kind: CommandKind
    letter: str
    value_labels: list[str | None]
    flag_labels: list[str | None]
    value_count: int
    flag_count: int
