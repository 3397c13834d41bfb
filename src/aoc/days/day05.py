"""Day 5: seeds pushed through the almanac's chain of range maps.

Part 2 reads the seed list as (start, length) pairs. The ranges are far too
large to enumerate, so whole intervals are pushed through each map instead,
splitting them wherever a map range begins or ends.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from src.aoc.errors import InvalidInput
from src.aoc.parsing import parse_ints

MAP_HEADERS = [
    "seed-to-soil map:",
    "soil-to-fertilizer map:",
    "fertilizer-to-water map:",
    "water-to-light map:",
    "light-to-temperature map:",
    "temperature-to-humidity map:",
    "humidity-to-location map:",
]

# Half-open [start, end)
Interval = Tuple[int, int]


@dataclass(frozen=True)
class RangeMap:
    destination: int
    source: int
    length: int

    @classmethod
    def parse(cls, line: str) -> "RangeMap":
        values = parse_ints(line, line)
        if len(values) != 3:
            raise InvalidInput("Invalid almanac map", line)
        return cls(*values)

    @property
    def source_end(self) -> int:
        return self.source + self.length

    def apply(self, value: int) -> Optional[int]:
        if self.source <= value < self.source_end:
            return value - self.source + self.destination
        return None


@dataclass
class MapSection:
    header: str
    ranges: List[RangeMap] = field(default_factory=list)

    def convert(self, value: int) -> int:
        for r in self.ranges:
            mapped = r.apply(value)
            if mapped is not None:
                return mapped
        return value

    def convert_interval(self, interval: Interval) -> List[Interval]:
        """Map a whole interval, returning the (possibly split) images."""
        pending = [interval]
        mapped: List[Interval] = []
        for r in self.ranges:
            remaining = []
            for start, end in pending:
                lo = max(start, r.source)
                hi = min(end, r.source_end)
                if lo >= hi:
                    remaining.append((start, end))
                    continue
                offset = r.destination - r.source
                mapped.append((lo + offset, hi + offset))
                if start < lo:
                    remaining.append((start, lo))
                if hi < end:
                    remaining.append((hi, end))
            pending = remaining
        return mapped + pending


@dataclass
class Almanac:
    seeds: List[int]
    sections: List[MapSection]

    @classmethod
    def parse(cls, lines: List[str]) -> "Almanac":
        it = iter(lines)
        first = next(it, None)
        if first is None or not first.startswith("seeds: "):
            raise InvalidInput("Almanac must start with a seeds line", first)
        seeds = parse_ints(first[len("seeds: "):], first)

        blank = next(it, None)
        if blank != "":
            raise InvalidInput("Expected a blank line after the seeds", blank)

        sections = [cls._parse_section(header, it) for header in MAP_HEADERS]
        return cls(seeds=seeds, sections=sections)

    @staticmethod
    def _parse_section(header: str, lines: Iterator[str]) -> MapSection:
        found = next(lines, None)
        if found != header:
            raise InvalidInput(f"Expected {header!r}", found)
        section = MapSection(header)
        for line in lines:
            if not line:
                break
            section.ranges.append(RangeMap.parse(line))
        return section

    def location(self, seed: int) -> int:
        value = seed
        for section in self.sections:
            value = section.convert(value)
        return value

    def seed_intervals(self) -> List[Interval]:
        """(start, length) pairs as intervals; an unpaired trailing seed is ignored."""
        pairs = zip(self.seeds[::2], self.seeds[1::2])
        return [(start, start + length) for start, length in pairs if length > 0]

    def location_intervals(self) -> List[Interval]:
        intervals = self.seed_intervals()
        for section in self.sections:
            intervals = [out for interval in intervals for out in section.convert_interval(interval)]
        return intervals


def part1(lines: List[str]) -> int:
    almanac = Almanac.parse(lines)
    if not almanac.seeds:
        raise InvalidInput("Almanac lists no seeds")
    return min(almanac.location(seed) for seed in almanac.seeds)


def part2(lines: List[str]) -> int:
    intervals = Almanac.parse(lines).location_intervals()
    if not intervals:
        raise InvalidInput("Almanac lists no seed ranges")
    return min(start for start, _ in intervals)
