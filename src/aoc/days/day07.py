"""Day 7: camel cards, ranked by hand type and then card by card."""

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, List, Tuple

from src.aoc.errors import InvalidInput
from src.aoc.parsing import parse_int

CARD_ORDER = "23456789TJQKA"
JOKER_CARD_ORDER = "J23456789TQKA"


class HandType(IntEnum):
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    FULL_HOUSE = 4
    FOUR_OF_A_KIND = 5
    FIVE_OF_A_KIND = 6


_TYPES_BY_SHAPE = {
    (5,): HandType.FIVE_OF_A_KIND,
    (4, 1): HandType.FOUR_OF_A_KIND,
    (3, 2): HandType.FULL_HOUSE,
    (3, 1, 1): HandType.THREE_OF_A_KIND,
    (2, 2, 1): HandType.TWO_PAIR,
    (2, 1, 1, 1): HandType.ONE_PAIR,
    (1, 1, 1, 1, 1): HandType.HIGH_CARD,
}


@dataclass(frozen=True)
class Hand:
    cards: str

    @classmethod
    def parse(cls, text: str) -> "Hand":
        if len(text) != 5:
            raise InvalidInput("A hand has exactly five cards", text)
        bad = [c for c in text if c not in CARD_ORDER]
        if bad:
            raise InvalidInput(f"Invalid card {bad[0]!r}", text)
        return cls(text)

    def hand_type(self) -> HandType:
        shape = tuple(sorted(Counter(self.cards).values(), reverse=True))
        return _TYPES_BY_SHAPE[shape]

    def hand_type_with_jokers(self) -> HandType:
        """Best type reachable when every J may stand in for any other card."""
        counts = Counter(self.cards)
        jokers = counts.pop("J", 0)
        if jokers == 5:
            return HandType.FIVE_OF_A_KIND
        shape = sorted(counts.values(), reverse=True)
        shape[0] += jokers
        return _TYPES_BY_SHAPE[tuple(shape)]

    def strength(self) -> Tuple[int, ...]:
        return (self.hand_type(), *(CARD_ORDER.index(c) for c in self.cards))

    def strength_with_jokers(self) -> Tuple[int, ...]:
        return (self.hand_type_with_jokers(), *(JOKER_CARD_ORDER.index(c) for c in self.cards))


def parse_hand_and_bid(line: str) -> Tuple[Hand, int]:
    parts = line.split(" ")
    if len(parts) != 2:
        raise InvalidInput("Invalid hand and bid", line)
    return Hand.parse(parts[0]), parse_int(parts[1], line)


def total_winnings(lines: List[str], strength: Callable[[Hand], Tuple[int, ...]]) -> int:
    hands = sorted((parse_hand_and_bid(line) for line in lines), key=lambda hb: strength(hb[0]))
    return sum(rank * bid for rank, (_, bid) in enumerate(hands, start=1))


def part1(lines: List[str]) -> int:
    return total_winnings(lines, Hand.strength)


def part2(lines: List[str]) -> int:
    return total_winnings(lines, Hand.strength_with_jokers)
