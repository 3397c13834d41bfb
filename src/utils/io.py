"""I/O helpers for puzzle inputs: file and string line splitting, input paths."""

import os
from pathlib import Path
from typing import List, Optional, Union

from src.aoc.errors import InputReadError

DEFAULT_INPUT_DIR = "inputs"
INPUT_DIR_ENV = "AOC_INPUT_DIR"


def read_lines(path: Union[str, Path]) -> List[str]:
    """
    Read a text file and return its lines without line terminators.
    Lines end at LF or CRLF only; a lone CR stays part of the line.
    Empty lines are kept; a trailing newline does not produce an extra element.
    Raises InputReadError if the file cannot be opened or read.
    """
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(path, e) from e
    return to_lines(text)


def to_lines(text: str) -> List[str]:
    """Split in-memory text the same way `read_lines` splits a file."""
    *lines, last = text.split("\n")
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    if last:
        lines.append(last)
    return lines


def input_dir(override: Optional[Union[str, Path]] = None) -> Path:
    if override is not None:
        return Path(override)
    return Path(os.environ.get(INPUT_DIR_ENV, DEFAULT_INPUT_DIR))


def input_path_for(day: int, directory: Optional[Union[str, Path]] = None) -> Path:
    """Default input location for a day, e.g. inputs/day07.txt."""
    return input_dir(directory) / f"day{day:02d}.txt"
