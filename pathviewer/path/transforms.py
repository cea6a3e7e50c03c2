"""Uniform scale and translate over path commands.

Both work field by field from the axis roles in ``LAYOUTS`` and ignore
``is_absolute``: a relative delta scales like a distance, and is shifted like
a coordinate. Shifting relative deltas changes the shape of a path that
mixes absolute and relative commands; callers that need a rigid move should
convert to absolute first.

Arc rotation is never scaled, so non-uniform scaling of a rotated arc is
only approximate.
"""

from __future__ import annotations

from collections.abc import Iterable

from pathviewer.path.commands import PathCommand, Role, layout_of

_SCALE_AXIS = {Role.X: 0, Role.SIZE_X: 0, Role.Y: 1, Role.SIZE_Y: 1}
_MOVE_AXIS = {Role.X: 0, Role.Y: 1}


def scale_command(command: PathCommand, sx: float, sy: float) -> None:
    factors = (sx, sy)
    for spec in layout_of(command.kind):
        axis = _SCALE_AXIS.get(spec.role)
        if axis is not None:
            setattr(command, spec.name, getattr(command, spec.name) * factors[axis])


def move_command(command: PathCommand, dx: float, dy: float) -> None:
    offsets = (dx, dy)
    for spec in layout_of(command.kind):
        axis = _MOVE_AXIS.get(spec.role)
        if axis is not None:
            setattr(command, spec.name, getattr(command, spec.name) + offsets[axis])


def scale_path(commands: Iterable[PathCommand], sx: float, sy: float) -> None:
    for command in commands:
        scale_command(command, sx, sy)


def move_path(commands: Iterable[PathCommand], dx: float, dy: float) -> None:
    for command in commands:
        move_command(command, dx, dy)
