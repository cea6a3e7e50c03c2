"""Path command variants.

Ten command kinds, each a small mutable dataclass. Field order, axis roles
and letters live in the per-kind tables below; the parser, serializer,
transforms and editor registry all read the same ``LAYOUTS`` table, so the
order in which a kind's fields are parsed, written and edited cannot drift.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar


class CommandKind(str, enum.Enum):
    MOVE = "Move"
    LINE = "Line"
    HORIZONTAL_LINE = "HorizontalLine"
    VERTICAL_LINE = "VerticalLine"
    CUBIC_BEZIER = "CubicBezier"
    QUADRATIC_BEZIER = "QuadraticBezier"
    SMOOTH_CUBIC_BEZIER = "SmoothCubicBezier"
    SMOOTH_QUADRATIC_BEZIER = "SmoothQuadraticBezier"
    ELLIPTICAL_ARC = "EllipticalArc"
    CLOSE = "Close"


class Role(enum.Enum):
    """What a field means to the geometric transforms."""

    X = "x"
    Y = "y"
    SIZE_X = "size_x"
    SIZE_Y = "size_y"
    ANGLE = "angle"
    FLAG = "flag"


@dataclass(frozen=True)
class FieldSpec:
    name: str
    role: Role


LETTERS: dict[CommandKind, str] = {
    CommandKind.MOVE: "M",
    CommandKind.LINE: "L",
    CommandKind.HORIZONTAL_LINE: "H",
    CommandKind.VERTICAL_LINE: "V",
    CommandKind.CUBIC_BEZIER: "C",
    CommandKind.QUADRATIC_BEZIER: "Q",
    CommandKind.SMOOTH_CUBIC_BEZIER: "S",
    CommandKind.SMOOTH_QUADRATIC_BEZIER: "T",
    CommandKind.ELLIPTICAL_ARC: "A",
    CommandKind.CLOSE: "Z",
}

KINDS_BY_LETTER: dict[str, CommandKind] = {letter: kind for kind, letter in LETTERS.items()}

_X = Role.X
_Y = Role.Y

# Token order on the wire. Arc flags sit between the rotation angle and the end point.
LAYOUTS: dict[CommandKind, tuple[FieldSpec, ...]] = {
    CommandKind.MOVE: (FieldSpec("x", _X), FieldSpec("y", _Y)),
    CommandKind.LINE: (FieldSpec("end_x", _X), FieldSpec("end_y", _Y)),
    CommandKind.HORIZONTAL_LINE: (FieldSpec("end_x", _X),),
    CommandKind.VERTICAL_LINE: (FieldSpec("end_y", _Y),),
    CommandKind.CUBIC_BEZIER: (
        FieldSpec("control1_x", _X),
        FieldSpec("control1_y", _Y),
        FieldSpec("control2_x", _X),
        FieldSpec("control2_y", _Y),
        FieldSpec("end_x", _X),
        FieldSpec("end_y", _Y),
    ),
    CommandKind.QUADRATIC_BEZIER: (
        FieldSpec("control_x", _X),
        FieldSpec("control_y", _Y),
        FieldSpec("end_x", _X),
        FieldSpec("end_y", _Y),
    ),
    CommandKind.SMOOTH_CUBIC_BEZIER: (
        FieldSpec("control2_x", _X),
        FieldSpec("control2_y", _Y),
        FieldSpec("end_x", _X),
        FieldSpec("end_y", _Y),
    ),
    CommandKind.SMOOTH_QUADRATIC_BEZIER: (FieldSpec("end_x", _X), FieldSpec("end_y", _Y)),
    CommandKind.ELLIPTICAL_ARC: (
        FieldSpec("size_x", Role.SIZE_X),
        FieldSpec("size_y", Role.SIZE_Y),
        FieldSpec("rotation_angle", Role.ANGLE),
        FieldSpec("is_large_arc", Role.FLAG),
        FieldSpec("is_positive_sweep_direction", Role.FLAG),
        FieldSpec("end_x", _X),
        FieldSpec("end_y", _Y),
    ),
    CommandKind.CLOSE: (),
}


def layout_of(kind: CommandKind) -> tuple[FieldSpec, ...]:
    return LAYOUTS[kind]


def end_point_fields(kind: CommandKind) -> tuple[str | None, str | None]:
    """Names of the fields holding the pen position after this kind runs.

    The last x-position and last y-position field of the layout; ``None`` on an
    axis the command does not touch.
    """
    end_x = end_y = None
    for spec in LAYOUTS[kind]:
        if spec.role is Role.X:
            end_x = spec.name
        elif spec.role is Role.Y:
            end_y = spec.name
    return end_x, end_y


class PathCommand:
    """Shared behaviour of the ten variants.

    Nothing here is overridden per kind: everything goes through the
    ``LAYOUTS`` table keyed by ``kind``.
    """

    kind: ClassVar[CommandKind]
    is_absolute: bool

    @property
    def designator(self) -> str:
        letter = LETTERS[self.kind]
        return letter if self.is_absolute else letter.lower()

    @classmethod
    def parse(cls, text: str) -> PathCommand:
        """Parse a chunk that must start with this kind's letter."""
        from pathviewer.path.parser import parse_command_of_kind

        return parse_command_of_kind(cls.kind, text)

    def to_string(self) -> str:
        from pathviewer.path.serializer import to_string

        return to_string(self)

    def __str__(self) -> str:
        return self.to_string()

    def scale_path(self, sx: float, sy: float) -> None:
        from pathviewer.path.transforms import scale_command

        scale_command(self, sx, sy)

    def move_path(self, dx: float, dy: float) -> None:
        from pathviewer.path.transforms import move_command

        move_command(self, dx, dy)


@dataclass
class Move(PathCommand):
    kind: ClassVar[CommandKind] = CommandKind.MOVE

    x: float = 0.0
    y: float = 0.0
    is_absolute: bool = False


@dataclass
class Line(PathCommand):
    kind: ClassVar[CommandKind] = CommandKind.LINE

    end_x: float = 0.0
    end_y: float = 0.0
    is_absolute: bool = False


@dataclass
class HorizontalLine(PathCommand):
    kind: ClassVar[CommandKind] = CommandKind.HORIZONTAL_LINE

    end_x: float = 0.0
    is_absolute: bool = False


@dataclass
class VerticalLine(PathCommand):
    kind: ClassVar[CommandKind] = CommandKind.VERTICAL_LINE

    end_y: float = 0.0
    is_absolute: bool = False


@dataclass
class CubicBezier(PathCommand):
    kind: ClassVar[CommandKind] = CommandKind.CUBIC_BEZIER

    control1_x: float = 0.0
    control1_y: float = 0.0
    control2_x: float = 0.0
    control2_y: float = 0.0
    end_x: float = 0.0
    end_y: float = 0.0
    is_absolute: bool = False

    # Extrema of the control polygon minus the start point, which this command
    # does not know. Used for rough bounds only.
    @property
    def min_x(self) -> float:
        return min(self.control1_x, self.control2_x, self.end_x)

    @property
    def min_y(self) -> float:
        return min(self.control1_y, self.control2_y, self.end_y)

    @property
    def max_x(self) -> float:
        return max(self.control1_x, self.control2_x, self.end_x)

    @property
    def max_y(self) -> float:
        return max(self.control1_y, self.control2_y, self.end_y)


@dataclass
class QuadraticBezier(PathCommand):
    kind: ClassVar[CommandKind] = CommandKind.QUADRATIC_BEZIER

    control_x: float = 0.0
    control_y: float = 0.0
    end_x: float = 0.0
    end_y: float = 0.0
    is_absolute: bool = False


@dataclass
class SmoothCubicBezier(PathCommand):
    kind: ClassVar[CommandKind] = CommandKind.SMOOTH_CUBIC_BEZIER

    control2_x: float = 0.0
    control2_y: float = 0.0
    end_x: float = 0.0
    end_y: float = 0.0
    is_absolute: bool = False


@dataclass
class SmoothQuadraticBezier(PathCommand):
    kind: ClassVar[CommandKind] = CommandKind.SMOOTH_QUADRATIC_BEZIER

    end_x: float = 0.0
    end_y: float = 0.0
    is_absolute: bool = False


@dataclass
class EllipticalArc(PathCommand):
    kind: ClassVar[CommandKind] = CommandKind.ELLIPTICAL_ARC

    size_x: float = 0.0
    size_y: float = 0.0
    rotation_angle: float = 0.0
    is_large_arc: bool = False
    is_positive_sweep_direction: bool = False
    end_x: float = 0.0
    end_y: float = 0.0
    is_absolute: bool = False


@dataclass
class Close(PathCommand):
    kind: ClassVar[CommandKind] = CommandKind.CLOSE

    # Close has no editable fields, so "Z" and "z" compare equal.
    is_absolute: bool = field(default=False, compare=False)


COMMAND_TYPES: dict[CommandKind, type[PathCommand]] = {
    CommandKind.MOVE: Move,
    CommandKind.LINE: Line,
    CommandKind.HORIZONTAL_LINE: HorizontalLine,
    CommandKind.VERTICAL_LINE: VerticalLine,
    CommandKind.CUBIC_BEZIER: CubicBezier,
    CommandKind.QUADRATIC_BEZIER: QuadraticBezier,
    CommandKind.SMOOTH_CUBIC_BEZIER: SmoothCubicBezier,
    CommandKind.SMOOTH_QUADRATIC_BEZIER: SmoothQuadraticBezier,
    CommandKind.ELLIPTICAL_ARC: EllipticalArc,
    CommandKind.CLOSE: Close,
}


def command_type(kind: CommandKind) -> type[PathCommand]:
    return COMMAND_TYPES[kind]
