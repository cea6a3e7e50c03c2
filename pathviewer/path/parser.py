"""Path-data parser.

``parse_command`` turns one chunk into a command and raises on the first
problem. ``parse_path`` runs it over every chunk of a path string, stopping at
the first failure but keeping the commands parsed before it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pathviewer.path.commands import (
    KINDS_BY_LETTER,
    LETTERS,
    CommandKind,
    PathCommand,
    Role,
    command_type,
    layout_of,
)
from pathviewer.path.errors import (
    ArgumentCountMismatch,
    InvalidFlagDigit,
    NotANumber,
    PathSyntaxError,
    UnrecognizedDesignator,
)
from pathviewer.path.tokenizer import NUMBER_RE, iter_chunks, split_arguments

logger = logging.getLogger(__name__)

_FLAG_DIGITS = {"0": False, "1": True}


@dataclass
class ParsedPath:
    """Result of parsing a whole path string."""

    commands: list[PathCommand] = field(default_factory=list)
    # Message of the first chunk that failed; later chunks were not read.
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_command(text: str) -> PathCommand:
    """Parse a single chunk, dispatching on its designator letter."""
    stripped = text.strip()
    if not stripped:
        raise UnrecognizedDesignator("")
    char = stripped[0]
    kind = KINDS_BY_LETTER.get(char.upper())
    if kind is None:
        raise UnrecognizedDesignator(char)
    return _parse_payload(kind, char.isupper(), stripped[1:])


def parse_command_of_kind(kind: CommandKind, text: str) -> PathCommand:
    """Parse a chunk that must carry ``kind``'s designator."""
    stripped = text.strip()
    if not stripped or stripped[0].upper() != LETTERS[kind]:
        raise PathSyntaxError(
            f"{kind.value}: expected designator {LETTERS[kind]!r}, got {stripped[:1]!r}",
            kind=kind.value,
        )
    return _parse_payload(kind, stripped[0].isupper(), stripped[1:])


def parse_path(text: str) -> ParsedPath:
    result = ParsedPath()
    for chunk in iter_chunks(text):
        try:
            result.commands.append(parse_command(chunk))
        except PathSyntaxError as e:
            result.error = str(e)
            logger.warning("Path parse stopped at %r: %s", chunk.strip(), e)
            break
    logger.debug("Parsed %d path commands", len(result.commands))
    return result


def _parse_payload(kind: CommandKind, is_absolute: bool, payload: str) -> PathCommand:
    layout = layout_of(kind)
    cls = command_type(kind)
    # Close takes no arguments; anything after the letter is ignored.
    if not layout:
        return cls(is_absolute=is_absolute)

    tokens = split_arguments(payload)
    # Every token must be a number before the count is checked.
    numbers = [_parse_number(kind, token) for token in tokens]
    if len(tokens) != len(layout):
        raise ArgumentCountMismatch(kind.value, len(layout), len(tokens))

    values: dict[str, float | bool] = {}
    for spec, token, number in zip(layout, tokens, numbers):
        if spec.role is Role.FLAG:
            values[spec.name] = _parse_flag(kind, spec.name, token)
        else:
            values[spec.name] = number
    return cls(is_absolute=is_absolute, **values)


def _parse_number(kind: CommandKind, token: str) -> float:
    # float() alone would also accept "nan", "inf" and "1_000".
    if NUMBER_RE.fullmatch(token) is None:
        raise NotANumber(kind.value, token)
    return float(token)


def _parse_flag(kind: CommandKind, name: str, token: str) -> bool:
    try:
        return _FLAG_DIGITS[token]
    except KeyError:
        raise InvalidFlagDigit(kind.value, name, token) from None
