"""Day 4: scratch cards, scored directly and by cascading copies."""

import re
from dataclasses import dataclass
from typing import FrozenSet, List

from src.aoc.errors import InvalidInput
from src.aoc.parsing import parse_int, parse_ints

CARD_RE = re.compile(r"^Card\s+(\d+):\s+([^|]*) \|\s+([^|]*)$")


@dataclass(frozen=True)
class ScratchCard:
    id: int
    winning: FrozenSet[int]
    held: FrozenSet[int]

    @classmethod
    def parse(cls, line: str) -> "ScratchCard":
        match = CARD_RE.match(line)
        if not match:
            raise InvalidInput("Invalid scratch card", line)
        card_id, winning, held = match.groups()
        return cls(
            id=parse_int(card_id, line),
            winning=frozenset(parse_ints(winning, line)),
            held=frozenset(parse_ints(held, line)),
        )

    def matches(self) -> int:
        return len(self.winning & self.held)

    def points(self) -> int:
        count = self.matches()
        return 2 ** (count - 1) if count else 0


def count_cards(cards: List[ScratchCard]) -> int:
    """Total cards held once every win has added copies of the following cards."""
    copies = {}
    total = 0
    for card in cards:
        held = 1 + copies.get(card.id, 0)
        total += held
        for offset in range(1, card.matches() + 1):
            copies[card.id + offset] = copies.get(card.id + offset, 0) + held
    return total


def part1(lines: List[str]) -> int:
    return sum(ScratchCard.parse(line).points() for line in lines)


def part2(lines: List[str]) -> int:
    return count_cards([ScratchCard.parse(line) for line in lines])
