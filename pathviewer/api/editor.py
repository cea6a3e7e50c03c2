"""Editor endpoints for slot schemas and building or decomposing commands."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from pathviewer.api.path import command_model
from pathviewer.editor.model import EditorModel
from pathviewer.editor.registry import FLAG_SLOTS, VALUE_SLOTS, describe_for, get_registry
from pathviewer.models.requests import BuildRequest, DecomposeRequest
from pathviewer.models.responses import CommandModel, EditorDescriptionResponse
from pathviewer.path.commands import LETTERS, CommandKind
from pathviewer.path.errors import PathSyntaxError
from pathviewer.path.parser import parse_command

router = APIRouter(prefix="/editor")
logger = logging.getLogger(__name__)


def _description(kind: CommandKind) -> EditorDescriptionResponse:
    desc = describe_for(kind)
    return EditorDescriptionResponse(
        kind=kind,
        letter=LETTERS[kind],
        value_labels=list(desc.value_labels),
        flag_labels=list(desc.flag_labels),
        value_count=desc.value_count,
        flag_count=desc.flag_count,
    )


@router.get("/kinds", response_model=list[EditorDescriptionResponse])
async def kinds() -> list[EditorDescriptionResponse]:
    return [_description(row.kind) for row in get_registry().all()]


@router.get("/describe/{kind}", response_model=EditorDescriptionResponse)
async def describe(kind: CommandKind) -> EditorDescriptionResponse:
    return _description(kind)


@router.post("/build", response_model=CommandModel)
async def build(req: BuildRequest) -> CommandModel:
    if len(req.values) > VALUE_SLOTS or len(req.flags) > FLAG_SLOTS:
        raise HTTPException(
            status_code=422,
            detail=f"At most {VALUE_SLOTS} values and {FLAG_SLOTS} flags",
        )
    model = EditorModel()
    model.kind = req.kind
    for i, value in enumerate(req.values):
        model.set_value(i, value)
    for i, flag in enumerate(req.flags):
        model.set_flag(i, flag)
    return command_model(model.command)


@router.post("/decompose", response_model=CommandModel)
async def decompose(req: DecomposeRequest) -> CommandModel:
    try:
        command = parse_command(req.command)
    except PathSyntaxError as e:
        logger.warning("Decompose rejected %r: %s", req.command, e)
        raise HTTPException(status_code=422, detail=str(e)) from e
    return command_model(EditorModel(command).command)
