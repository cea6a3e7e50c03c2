"""Write path commands back to path-data text."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Final

from pathviewer.path.commands import PathCommand, Role, layout_of

_number_strip_trailing_zeros: Final = re.compile(r"^(-?[0-9]*\.([0-9]*[1-9])?)0*$")
_number_strip_dot: Final = re.compile(r"\.$")
_number_exponent: Final = re.compile(r"e\+?(-?)0*(?=\d)")


def format_number(value: float) -> str:
    """Shortest round-trip decimal form: no trailing zeros, no '+', '.' separator."""
    if value == 0:
        # Also folds -0.0.
        return "0"
    s = repr(float(value))
    s = _number_strip_trailing_zeros.sub(r"\1", s)
    s = _number_strip_dot.sub("", s)
    # "1e+16" -> "1e16", "1e-07" -> "1e-7"
    return _number_exponent.sub(r"e\1", s)


def to_string(command: PathCommand) -> str:
    parts: list[str] = []
    for spec in layout_of(command.kind):
        value = getattr(command, spec.name)
        if spec.role is Role.FLAG:
            parts.append("1" if value else "0")
        else:
            parts.append(format_number(value))
    return command.designator + ",".join(parts)


def serialize_path(commands: Iterable[PathCommand]) -> str:
    return " ".join(to_string(c) for c in commands)
