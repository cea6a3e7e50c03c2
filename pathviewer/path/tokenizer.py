"""Split path-data text into command chunks and chunk payloads into number tokens."""

from __future__ import annotations

import re
from collections.abc import Iterator

# One designator letter and everything up to the next one. An "e"/"E" between
# a digit and an exponent ("1e5", "2.5E-3") belongs to the number, not to a
# new chunk. Anything that is not a number stays in the payload for the
# parser to reject.
_CHUNK_RE = re.compile(r"[A-Za-z](?:(?<=[\d.])[eE](?=[+\-]?\d)|[^A-Za-z])*")
_SEPARATOR_RE = re.compile(r"[\s,]+")
NUMBER_RE = re.compile(r"[+\-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+\-]?\d+)?")


class PathChunks:
    """Lazy, restartable view of the chunks in a path-data string.

    Text before the first designator letter belongs to no chunk and is
    skipped.
    """

    def __init__(self, text: str) -> None:
        self.text = text

    def __iter__(self) -> Iterator[str]:
        for match in _CHUNK_RE.finditer(self.text):
            yield match.group(0)

    def __repr__(self) -> str:
        return f"PathChunks({self.text!r})"


def iter_chunks(text: str) -> Iterator[str]:
    return iter(PathChunks(text))


def split_arguments(payload: str) -> list[str]:
    """Split a chunk payload (designator already removed) into number tokens.

    A piece that is not made up entirely of numbers is kept whole so the
    parser can report it.
    """
    tokens: list[str] = []
    for piece in _SEPARATOR_RE.split(payload.strip()):
        if not piece:
            continue
        numbers = NUMBER_RE.findall(piece)
        if numbers and "".join(numbers) == piece:
            tokens.extend(numbers)
        else:
            tokens.append(piece)
    return tokens
