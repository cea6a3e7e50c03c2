"""Path-data syntax errors.

Raised while parsing a single chunk; callers decide whether to stop or keep
what parsed before the failure.
"""

from __future__ import annotations


class PathSyntaxError(ValueError):
    """Base class for every malformed-chunk failure."""

    def __init__(self, message: str, kind: str | None = None) -> None:
        super().__init__(message)
        self.kind = kind


class UnrecognizedDesignator(PathSyntaxError):
    def __init__(self, char: str) -> None:
        super().__init__(f"Unrecognized command: {char!r}")
        self.char = char


class ArgumentCountMismatch(PathSyntaxError):
    def __init__(self, kind: str, expected: int, actual: int) -> None:
        super().__init__(
            f"Invalid argument count for {kind}: expected {expected}, got {actual}",
            kind=kind,
        )
        self.expected = expected
        self.actual = actual


class NotANumber(PathSyntaxError):
    def __init__(self, kind: str, token: str) -> None:
        super().__init__(f"{kind}: {token!r} is not a number", kind=kind)
        self.token = token


class InvalidFlagDigit(PathSyntaxError):
    def __init__(self, kind: str, name: str, token: str) -> None:
        super().__init__(
            f"{kind}: flag {name} must be 0 or 1, got {token!r}",
            kind=kind,
        )
        self.name = name
        self.token = token
