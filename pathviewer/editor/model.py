"""Generic add/edit state for a single path command.

Holds a kind plus six value slots and three flag slots. Switching kind only
relabels the slots; whatever they already hold stays put, and slots past the
kind's count are ignored when the command is built.
"""

from __future__ import annotations

import logging

from pathviewer.editor.registry import (
    FLAG_SLOTS,
    VALUE_SLOTS,
    EditorDescription,
    build_command,
    decompose,
    describe_for,
)
from pathviewer.path.commands import CommandKind, PathCommand
from pathviewer.path.serializer import to_string

logger = logging.getLogger(__name__)


class EditorModel:
    item_kinds: tuple[CommandKind, ...] = tuple(CommandKind)

    def __init__(self, command: PathCommand | None = None) -> None:
        self._kind = CommandKind.MOVE
        self.values: list[float] = [0.0] * VALUE_SLOTS
        self.flags: list[bool] = [False] * FLAG_SLOTS
        if command is not None:
            self._kind, self.values, self.flags = decompose(command)
            logger.debug("Editing %s", to_string(command))

    @property
    def kind(self) -> CommandKind:
        return self._kind

    @kind.setter
    def kind(self, kind: CommandKind) -> None:
        self._kind = CommandKind(kind)

    @property
    def description(self) -> EditorDescription:
        return describe_for(self._kind)

    @property
    def value_labels(self) -> tuple[str | None, ...]:
        return self.description.value_labels

    @property
    def flag_labels(self) -> tuple[str | None, ...]:
        return self.description.flag_labels

    def set_value(self, slot: int, value: float) -> None:
        if not 0 <= slot < VALUE_SLOTS:
            raise IndexError(f"Value slot {slot} out of range")
        self.values[slot] = float(value)

    def set_flag(self, slot: int, value: bool) -> None:
        if not 0 <= slot < FLAG_SLOTS:
            raise IndexError(f"Flag slot {slot} out of range")
        self.flags[slot] = bool(value)

    @property
    def command(self) -> PathCommand:
        return build_command(self._kind, self.values, self.flags)

    @property
    def result(self) -> str:
        """Path-data text of the command the slots currently describe."""
        return to_string(self.command)
