"""Day 6: boat races won by holding the button for the right amount of time."""

import math
import re
from dataclasses import dataclass
from typing import List, Tuple

from src.aoc.errors import InvalidInput
from src.aoc.parsing import parse_int, parse_ints


@dataclass(frozen=True)
class Race:
    time: int
    record: int

    def distance(self, held: int) -> int:
        return held * max(self.time - held, 0)

    def ways_to_win(self) -> int:
        """
        Number of whole hold times in (0, time) that beat the record.
        The distance is a downward parabola symmetric around time / 2, so it is
        enough to find the shortest winning hold and mirror it.
        """
        disc = self.time * self.time - 4 * self.record
        if disc <= 0:
            return 0
        half = self.time // 2
        shortest = max((self.time - math.isqrt(disc)) // 2, 0)
        while shortest <= half and self.distance(shortest) <= self.record:
            shortest += 1
        if shortest > half:
            return 0
        while shortest > 1 and self.distance(shortest - 1) > self.record:
            shortest -= 1
        return self.time - 2 * shortest + 1


def _split_sheet(lines: List[str]) -> Tuple[str, str]:
    if len(lines) != 2 or not lines[0].startswith("Time:") or not lines[1].startswith("Distance:"):
        raise InvalidInput("Expected a Time line and a Distance line", "\n".join(lines))
    return lines[0][len("Time:"):], lines[1][len("Distance:"):]


def parse_races(lines: List[str]) -> List[Race]:
    times, records = _split_sheet(lines)
    times_list = parse_ints(times, lines[0])
    records_list = parse_ints(records, lines[1])
    if len(times_list) != len(records_list):
        raise InvalidInput("Times and distances differ in count", "\n".join(lines))
    return [Race(t, r) for t, r in zip(times_list, records_list)]


def parse_single_race(lines: List[str]) -> Race:
    """Read the sheet with the spaces between digits removed."""
    times, records = _split_sheet(lines)
    return Race(
        time=parse_int(re.sub(r"\s+", "", times), lines[0]),
        record=parse_int(re.sub(r"\s+", "", records), lines[1]),
    )


def part1(lines: List[str]) -> int:
    return math.prod(race.ways_to_win() for race in parse_races(lines))


def part2(lines: List[str]) -> int:
    return parse_single_race(lines).ways_to_win()
