"""Small parsing helpers shared by the day solvers."""

import re
from typing import List

from .errors import InvalidInput

UNSIGNED_RE = re.compile(r"[0-9]+")
SIGNED_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(raw: str, context: str, signed: bool = False) -> int:
    """
    Parse a plain decimal integer, reporting failures as InvalidInput against the
    surrounding text. Only ASCII digits are accepted (no underscores), and a sign
    only when `signed` is set.
    """
    pattern = SIGNED_RE if signed else UNSIGNED_RE
    if not pattern.fullmatch(raw):
        raise InvalidInput(f"Invalid number {raw!r}", context)
    return int(raw)


def parse_ints(text: str, context: str, signed: bool = False) -> List[int]:
    """Whitespace-separated integers; runs of spaces are allowed."""
    return [parse_int(token, context, signed=signed) for token in text.split()]
