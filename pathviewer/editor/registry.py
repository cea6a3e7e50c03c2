"""Editor schema registry: one row per command kind.

A row maps a kind onto the generic editing surface: up to six numeric value
slots and three boolean flag slots. It names which command field each live
slot holds, labels it, and packs/unpacks commands.

Usage:
    desc = describe_for(CommandKind.ELLIPTICAL_ARC)
    cmd = build_command(CommandKind.LINE, [10, 20, 0, 0, 0, 0], [True, False, False])
    kind, values, flags = decompose(cmd)

Value fields are listed in the same order the parser reads them, with arc
flags moved to the flag slots after ``is_absolute``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from pathviewer.path.commands import CommandKind, PathCommand, command_type

logger = logging.getLogger(__name__)

VALUE_SLOTS = 6
FLAG_SLOTS = 3

ABSOLUTE = ("is_absolute", "Absolute Position")


@dataclass(frozen=True)
class EditorRow:
    kind: CommandKind
    value_fields: tuple[str, ...] = ()
    value_labels: tuple[str, ...] = ()
    flag_fields: tuple[str, ...] = ()
    flag_labels: tuple[str, ...] = ()

    @property
    def value_count(self) -> int:
        return len(self.value_fields)

    @property
    def flag_count(self) -> int:
        return len(self.flag_fields)

    def build(self, values: Sequence[float], flags: Sequence[bool]) -> PathCommand:
        """Construct the command from the live slots; trailing slots are ignored."""
        values = _pad(values, VALUE_SLOTS, 0.0)
        flags = _pad(flags, FLAG_SLOTS, False)
        kwargs: dict[str, float | bool] = {}
        for i, name in enumerate(self.value_fields):
            kwargs[name] = float(values[i])
        for i, name in enumerate(self.flag_fields):
            kwargs[name] = bool(flags[i])
        return command_type(self.kind)(**kwargs)

    def decompose(self, command: PathCommand) -> tuple[list[float], list[bool]]:
        if command.kind is not self.kind:
            raise ValueError(f"Row {self.kind.value} cannot decompose a {command.kind.value}")
        values = [0.0] * VALUE_SLOTS
        flags = [False] * FLAG_SLOTS
        for i, name in enumerate(self.value_fields):
            values[i] = float(getattr(command, name))
        for i, name in enumerate(self.flag_fields):
            flags[i] = bool(getattr(command, name))
        return values, flags


@dataclass(frozen=True)
class EditorDescription:
    """Slot labels for one kind, padded with None past the live slots."""

    kind: CommandKind
    value_labels: tuple[str | None, ...]
    flag_labels: tuple[str | None, ...]
    value_count: int
    flag_count: int


class EditorRegistry:
    """Registry of editor rows, keyed by kind."""

    def __init__(self) -> None:
        self._rows: dict[CommandKind, EditorRow] = {}

    def register(self, row: EditorRow) -> None:
        if row.kind in self._rows:
            raise ValueError(f"Duplicate editor row: {row.kind.value}")
        if row.value_count > VALUE_SLOTS or row.flag_count > FLAG_SLOTS:
            raise ValueError(f"Editor row {row.kind.value} exceeds the slot capacity")
        if len(row.value_labels) != row.value_count or len(row.flag_labels) != row.flag_count:
            raise ValueError(f"Editor row {row.kind.value} has mismatched labels")
        self._rows[row.kind] = row
        logger.debug(
            "Registered editor row %s (%d values, %d flags)",
            row.kind.value,
            row.value_count,
            row.flag_count,
        )

    def get(self, kind: CommandKind) -> EditorRow:
        return self._rows[kind]

    def all(self) -> list[EditorRow]:
        order = list(CommandKind)
        return sorted(self._rows.values(), key=lambda r: order.index(r.kind))

    @property
    def count(self) -> int:
        return len(self._rows)


_END = (("end_x", "End X"), ("end_y", "End Y"))


def _row(
    kind: CommandKind,
    values: Sequence[tuple[str, str]] = (),
    flags: Sequence[tuple[str, str]] = (ABSOLUTE,),
) -> EditorRow:
    return EditorRow(
        kind=kind,
        value_fields=tuple(name for name, _ in values),
        value_labels=tuple(label for _, label in values),
        flag_fields=tuple(name for name, _ in flags),
        flag_labels=tuple(label for _, label in flags),
    )


EDITOR_ROWS: tuple[EditorRow, ...] = (
    _row(CommandKind.MOVE, (("x", "X"), ("y", "Y"))),
    _row(CommandKind.LINE, _END),
    _row(CommandKind.HORIZONTAL_LINE, (("end_x", "End X"),)),
    _row(CommandKind.VERTICAL_LINE, (("end_y", "End Y"),)),
    _row(
        CommandKind.CUBIC_BEZIER,
        (
            ("control1_x", "Control 1 X"),
            ("control1_y", "Control 1 Y"),
            ("control2_x", "Control 2 X"),
            ("control2_y", "Control 2 Y"),
            *_END,
        ),
    ),
    _row(
        CommandKind.QUADRATIC_BEZIER,
        (("control_x", "Control X"), ("control_y", "Control Y"), *_END),
    ),
    _row(
        CommandKind.SMOOTH_CUBIC_BEZIER,
        (("control2_x", "Control 2 X"), ("control2_y", "Control 2 Y"), *_END),
    ),
    _row(CommandKind.SMOOTH_QUADRATIC_BEZIER, _END),
    _row(
        CommandKind.ELLIPTICAL_ARC,
        (
            ("size_x", "Size X"),
            ("size_y", "Size Y"),
            ("rotation_angle", "Rotation Angle"),
            *_END,
        ),
        (
            ABSOLUTE,
            ("is_large_arc", "Large Arc"),
            ("is_positive_sweep_direction", "Positive Sweep Direction"),
        ),
    ),
    _row(CommandKind.CLOSE, flags=()),
)

# Module-level singleton
_registry = EditorRegistry()
for _r in EDITOR_ROWS:
    _registry.register(_r)


def get_registry() -> EditorRegistry:
    return _registry


def describe_for(kind: CommandKind) -> EditorDescription:
    row = _registry.get(kind)
    return EditorDescription(
        kind=kind,
        value_labels=tuple(_pad(row.value_labels, VALUE_SLOTS, None)),
        flag_labels=tuple(_pad(row.flag_labels, FLAG_SLOTS, None)),
        value_count=row.value_count,
        flag_count=row.flag_count,
    )


def build_command(
    kind: CommandKind,
    values: Sequence[float],
    flags: Sequence[bool],
) -> PathCommand:
    return _registry.get(kind).build(values, flags)


def decompose(command: PathCommand) -> tuple[CommandKind, list[float], list[bool]]:
    values, flags = _registry.get(command.kind).decompose(command)
    return command.kind, values, flags


def _pad(items: Sequence, size: int, filler) -> list:
    padded = list(items[:size])
    padded.extend([filler] * (size - len(padded)))
    return padded
