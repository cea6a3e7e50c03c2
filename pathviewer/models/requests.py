"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from pathviewer.path.commands import CommandKind


class PathRequest(BaseModel):
    data: str = Field(..., description="Raw path data, e.g. 'M10,20 L30,40'")


class ScaleRequest(PathRequest):
    sx: float = Field(..., description="Factor applied to x positions and sizes")
    sy: float = Field(..., description="Factor applied to y positions and sizes")


class MoveRequest(PathRequest):
    dx: float = Field(..., description="Offset added to x positions")
    dy: float = Field(..., description="Offset added to y positions")


class FitRequest(PathRequest):
    width: float = Field(..., description="Target path width")
    height: float = Field(..., description="Target path height")
    keep_aspect: bool = Field(
        default=False,
        description="Derive height from width using the current aspect ratio",
    )


class BuildRequest(BaseModel):
    kind: CommandKind
    values: list[float] = Field(default_factory=list, description="Up to 6 value slots")
    flags: list[bool] = Field(default_factory=list, description="Up to 3 flag slots")


class DecomposeRequest(BaseModel):
    command: str = Field(..., description="A single path command, e.g. 'A10,20,0,1,0,50,60'")
