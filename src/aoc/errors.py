"""Exception types raised while loading and solving puzzle inputs."""

from pathlib import Path
from typing import Optional, Union


class AocError(Exception):
    """Base class for every failure surfaced by the runner."""


class InputReadError(AocError):
    """The puzzle input file could not be opened or read."""

    def __init__(self, path: Union[str, Path], original: Exception):
        self.path = Path(path)
        self.original = original
        super().__init__(f"Failed to read {self.path}: {original}")


class InvalidInput(AocError):
    """A line (or block of lines) does not match the expected puzzle format."""

    def __init__(self, reason: str, text: Optional[str] = None):
        self.reason = reason
        self.text = text
        message = reason if text is None else f"{reason}: {text!r}"
        super().__init__(message)


class PartNotImplemented(AocError):
    """A puzzle part has no solver yet."""

    def __init__(self, part: int, day: Optional[int] = None):
        self.part = part
        self.day = day
        where = f"Day {day} part {part}" if day is not None else f"Part {part}"
        super().__init__(f"{where} is not implemented yet")


class UnknownDay(AocError):
    def __init__(self, day: int):
        self.day = day
        super().__init__(f"Day {day} is outside the 1-25 puzzle calendar")


__all__ = [
    "AocError",
    "InputReadError",
    "InvalidInput",
    "PartNotImplemented",
    "UnknownDay",
]
