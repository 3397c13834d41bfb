"""Day 3: part numbers and gear ratios in an engine schematic."""

import string
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

Position = Tuple[int, int]


@dataclass(frozen=True)
class SchematicNumber:
    value: int
    x_start: int
    x_end: int  # inclusive
    y: int

    def neighbours(self) -> List[Position]:
        """Every cell touching the number, diagonals included."""
        cells = [(x, y) for y in (self.y - 1, self.y + 1) for x in range(self.x_start - 1, self.x_end + 2)]
        cells.append((self.x_start - 1, self.y))
        cells.append((self.x_end + 1, self.y))
        return [(x, y) for x, y in cells if x >= 0 and y >= 0]

    def touches(self, position: Position) -> bool:
        x, y = position
        return abs(y - self.y) <= 1 and self.x_start - 1 <= x <= self.x_end + 1


@dataclass
class Schematic:
    numbers: List[SchematicNumber] = field(default_factory=list)
    symbols: Dict[Position, str] = field(default_factory=dict)

    @classmethod
    def parse(cls, lines: List[str]) -> "Schematic":
        schematic = cls()
        for y, line in enumerate(lines):
            start: Optional[int] = None
            for x, c in enumerate(line):
                if c in string.digits:
                    if start is None:
                        start = x
                    continue
                if start is not None:
                    schematic._add_number(line, start, x - 1, y)
                    start = None
                if c != ".":
                    schematic.symbols[(x, y)] = c
            if start is not None:
                schematic._add_number(line, start, len(line) - 1, y)
        return schematic

    def _add_number(self, line: str, x_start: int, x_end: int, y: int) -> None:
        self.numbers.append(SchematicNumber(int(line[x_start:x_end + 1]), x_start, x_end, y))

    def part_numbers(self) -> List[int]:
        return [n.value for n in self.numbers if any(pos in self.symbols for pos in n.neighbours())]

    def gear_ratios(self) -> List[int]:
        """Products of the two numbers around each '*' that touches exactly two numbers."""
        ratios = []
        for position, symbol in self.symbols.items():
            if symbol != "*":
                continue
            adjacent = [n.value for n in self.numbers if n.touches(position)]
            if len(adjacent) == 2:
                ratios.append(adjacent[0] * adjacent[1])
        return ratios


def part1(lines: List[str]) -> int:
    return sum(Schematic.parse(lines).part_numbers())


def part2(lines: List[str]) -> int:
    return sum(Schematic.parse(lines).gear_ratios())
