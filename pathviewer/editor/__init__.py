"""Generic command editing: schema registry, slot model, scale/move state."""

from pathviewer.editor.model import EditorModel
from pathviewer.editor.registry import (
    EditorDescription,
    EditorRow,
    build_command,
    decompose,
    describe_for,
    get_registry,
)
from pathviewer.editor.scale_or_move import InvalidDimensions, ScaleOrMoveModel

__all__ = [
    "EditorModel",
    "EditorDescription",
    "EditorRow",
    "build_command",
    "decompose",
    "describe_for",
    "get_registry",
    "InvalidDimensions",
    "ScaleOrMoveModel",
]
