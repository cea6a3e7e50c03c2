"""Path endpoints: parsing, transforms and per-segment views."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from pathviewer.config import Settings
from pathviewer.dependencies import get_settings
from pathviewer.document import PathDocument
from pathviewer.editor.registry import decompose
from pathviewer.editor.scale_or_move import InvalidDimensions
from pathviewer.models.requests import FitRequest, MoveRequest, PathRequest, ScaleRequest
from pathviewer.models.responses import (
    BoundsModel,
    CommandModel,
    ParseResponse,
    SegmentModel,
    SegmentsResponse,
    TransformResponse,
)
from pathviewer.path.commands import PathCommand
from pathviewer.path.serializer import to_string

router = APIRouter()
logger = logging.getLogger(__name__)


def command_model(command: PathCommand) -> CommandModel:
    kind, values, flags = decompose(command)
    return CommandModel(
        kind=kind,
        designator=command.designator,
        text=to_string(command),
        values=values,
        flags=flags,
    )


def _transformed(doc: PathDocument) -> TransformResponse:
    return TransformResponse(data=doc.data, bounds=BoundsModel.from_bounds(doc.bounds))


@router.post("/parse", response_model=ParseResponse)
async def parse(req: PathRequest, settings: Settings = Depends(get_settings)) -> ParseResponse:
    doc = PathDocument(req.data)
    return ParseResponse(
        data=doc.data,
        commands=[command_model(c) for c in doc.commands],
        error=doc.error,
        bounds=BoundsModel.from_bounds(doc.bounds),
        margin=settings.path_margin,
    )


@router.post("/segments", response_model=SegmentsResponse)
async def segments(req: PathRequest) -> SegmentsResponse:
    doc = PathDocument(req.data)
    return SegmentsResponse(
        segments=[
            SegmentModel(
                index=i,
                text=to_string(c),
                segment_data=doc.segment_data(i),
                path_up_to=doc.path_up_to(i),
            )
            for i, c in enumerate(doc.commands)
        ],
        error=doc.error,
    )


@router.post("/transform/scale", response_model=TransformResponse)
async def scale(req: ScaleRequest) -> TransformResponse:
    doc = PathDocument(req.data)
    doc.scale(req.sx, req.sy)
    return _transformed(doc)


@router.post("/transform/move", response_model=TransformResponse)
async def move(req: MoveRequest) -> TransformResponse:
    doc = PathDocument(req.data)
    doc.move(req.dx, req.dy)
    return _transformed(doc)


@router.post("/transform/fit", response_model=TransformResponse)
async def fit(req: FitRequest) -> TransformResponse:
    doc = PathDocument(req.data)
    dialog = doc.scale_dialog()
    dialog.is_aspect_locked = req.keep_aspect
    dialog.width = req.width
    if not req.keep_aspect:
        dialog.height = req.height
    try:
        doc.apply(dialog)
    except InvalidDimensions as e:
        logger.warning("Fit rejected: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e
    return _transformed(doc)
