"""PathDocument: the owned, ordered command sequence behind one path string.

Every mutation regenerates ``data`` from the commands and re-measures the
bounds. Not thread-safe: a host that shares a document between threads must
serialize all calls that mutate it.
"""

from __future__ import annotations

import logging

from pathviewer.config import settings
from pathviewer.editor.scale_or_move import ScaleOrMoveModel
from pathviewer.path.bounds import Bounds, path_bounds
from pathviewer.path.commands import PathCommand, end_point_fields
from pathviewer.path.parser import parse_path
from pathviewer.path.serializer import format_number, serialize_path, to_string
from pathviewer.path.transforms import move_path, scale_path

logger = logging.getLogger(__name__)


class PathDocument:
    def __init__(self, data: str | None = None) -> None:
        self.commands: list[PathCommand] = []
        # First parse failure of the last set_data(); None when all chunks parsed.
        self.error: str | None = None
        self.bounds: Bounds | None = None
        self._data = ""
        self.set_data(settings.default_path_data if data is None else data)

    @property
    def data(self) -> str:
        return self._data

    def set_data(self, data: str) -> None:
        """Replace the document from text, keeping whatever parsed before an error."""
        parsed = parse_path(data)
        self._data = data
        self.commands = parsed.commands
        self.error = parsed.error
        self.bounds = path_bounds(serialize_path(self.commands))
        logger.info(
            "Loaded path: %d commands%s",
            len(self.commands),
            f", error: {self.error}" if self.error else "",
        )

    @property
    def generated_data(self) -> str:
        return serialize_path(self.commands)

    def __len__(self) -> int:
        return len(self.commands)

    # --- Sequence edits ---

    def insert(self, index: int, command: PathCommand) -> None:
        """Insert before ``index``; -1 or len(self) appends."""
        if index == -1:
            index = len(self.commands)
        if not 0 <= index <= len(self.commands):
            raise IndexError(f"Insert position {index} out of range")
        self.commands.insert(index, command)
        logger.debug("Inserted %s at %d", to_string(command), index)
        self._regenerate()

    def append(self, command: PathCommand) -> None:
        self.insert(-1, command)

    def replace(self, index: int, command: PathCommand) -> None:
        self._check_index(index)
        self.commands[index] = command
        logger.debug("Replaced command %d with %s", index, to_string(command))
        self._regenerate()

    def delete(self, index: int) -> int:
        """Remove a command. Returns the index to select next, -1 if none are left."""
        self._check_index(index)
        removed = self.commands.pop(index)
        logger.debug("Deleted %s at %d", to_string(removed), index)
        self._regenerate()
        return min(index, len(self.commands) - 1)

    def can_move_up(self, index: int) -> bool:
        return 0 < index < len(self.commands)

    def can_move_down(self, index: int) -> bool:
        return 0 <= index < len(self.commands) - 1

    def move_up(self, index: int) -> int:
        if not self.can_move_up(index):
            raise IndexError(f"Cannot move command {index} up")
        return self._swap(index, index - 1)

    def move_down(self, index: int) -> int:
        if not self.can_move_down(index):
            raise IndexError(f"Cannot move command {index} down")
        return self._swap(index, index + 1)

    def clear(self) -> None:
        self.commands.clear()
        self._regenerate()

    # --- Sub-paths ---

    def path_up_to(self, index: int) -> str:
        if not 0 <= index < len(self.commands):
            return ""
        return serialize_path(self.commands[: index + 1])

    def start_position(self, index: int) -> tuple[float, float]:
        """Pen position just before command ``index`` runs, starting from (0, 0)."""
        x = y = 0.0
        for command in self.commands[:index]:
            end_x, end_y = end_point_fields(command.kind)
            if end_x is not None:
                value = getattr(command, end_x)
                x = value if command.is_absolute else x + value
            if end_y is not None:
                value = getattr(command, end_y)
                y = value if command.is_absolute else y + value
        return x, y

    def segment_data(self, index: int) -> str:
        """One command as a standalone path, prefixed with a move to its start."""
        if not 0 <= index < len(self.commands):
            return ""
        x, y = self.start_position(index)
        return f"M{format_number(x)},{format_number(y)} {to_string(self.commands[index])}"

    # --- Whole-path transforms ---

    def scale(self, sx: float, sy: float) -> None:
        scale_path(self.commands, sx, sy)
        logger.debug("Scaled path by %s x %s", sx, sy)
        self._regenerate()

    def move(self, dx: float, dy: float) -> None:
        move_path(self.commands, dx, dy)
        logger.debug("Moved path by %s, %s", dx, dy)
        self._regenerate()

    def scale_to(self, width: float, height: float) -> None:
        """Scale so the bounds take the given size. Flat axes are left alone."""
        b = self.bounds
        sx = width / b.width if b is not None and b.width else 1.0
        sy = height / b.height if b is not None and b.height else 1.0
        self.scale(sx, sy)

    def move_to_origin_offset(self) -> tuple[float, float]:
        if self.bounds is None:
            return 0.0, 0.0
        return -self.bounds.min_x, -self.bounds.min_y

    def scale_dialog(self) -> ScaleOrMoveModel:
        """Dialog state pre-filled with the current size."""
        b = self.bounds
        width, height = (b.width, b.height) if b is not None else (0.0, 0.0)
        return ScaleOrMoveModel(width, height, is_scale_mode=True)

    def move_dialog(self) -> ScaleOrMoveModel:
        """Dialog state pre-filled with the offset that moves the bounds to (0, 0)."""
        dx, dy = self.move_to_origin_offset()
        return ScaleOrMoveModel(dx, dy, is_scale_mode=False)

    def apply(self, model: ScaleOrMoveModel) -> None:
        model.validate()
        if model.is_scale_mode:
            self.scale_to(model.width, model.height)
        else:
            self.move(model.width, model.height)

    # --- Internals ---

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.commands):
            raise IndexError(f"Command index {index} out of range")

    def _swap(self, index: int, target: int) -> int:
        self.commands[index], self.commands[target] = self.commands[target], self.commands[index]
        self._regenerate()
        return target

    def _regenerate(self) -> None:
        self._data = self.generated_data
        self.error = None
        self.bounds = path_bounds(self._data)
