"""Puzzle solvers for the daily two-part challenges, plus their error types."""

from .errors import AocError, InputReadError, InvalidInput, PartNotImplemented, UnknownDay
from .days import get_day, implemented_days

__all__ = [
    "AocError",
    "InputReadError",
    "InvalidInput",
    "PartNotImplemented",
    "UnknownDay",
    "get_day",
    "implemented_days",
]
