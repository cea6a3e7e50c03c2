"""Path-data model: tokenizer, command variants, parser, serializer, transforms."""

from pathviewer.path.commands import (
    Close,
    CommandKind,
    CubicBezier,
    EllipticalArc,
    HorizontalLine,
    Line,
    Move,
    PathCommand,
    QuadraticBezier,
    SmoothCubicBezier,
    SmoothQuadraticBezier,
    VerticalLine,
)
from pathviewer.path.errors import (
    ArgumentCountMismatch,
    InvalidFlagDigit,
    NotANumber,
    PathSyntaxError,
    UnrecognizedDesignator,
)
from pathviewer.path.parser import ParsedPath, parse_command, parse_path
from pathviewer.path.serializer import format_number, serialize_path, to_string
from pathviewer.path.transforms import move_command, move_path, scale_command, scale_path

__all__ = [
    "Close",
    "CommandKind",
    "CubicBezier",
    "EllipticalArc",
    "HorizontalLine",
    "Line",
    "Move",
    "PathCommand",
    "QuadraticBezier",
    "SmoothCubicBezier",
    "SmoothQuadraticBezier",
    "VerticalLine",
    "ArgumentCountMismatch",
    "InvalidFlagDigit",
    "NotANumber",
    "PathSyntaxError",
    "UnrecognizedDesignator",
    "ParsedPath",
    "parse_command",
    "parse_path",
    "format_number",
    "serialize_path",
    "to_string",
    "move_command",
    "move_path",
    "scale_command",
    "scale_path",
]
