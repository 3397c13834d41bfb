"""Day 2: bags of coloured cubes drawn over several rounds of a game."""

from dataclasses import dataclass, field
from typing import List

from src.aoc.errors import InvalidInput
from src.aoc.parsing import parse_int

BAG_LIMITS = {"red": 12, "green": 13, "blue": 14}


@dataclass(frozen=True)
class Draw:
    red: int = 0
    green: int = 0
    blue: int = 0

    @classmethod
    def parse(cls, text: str) -> "Draw":
        counts = {}
        for chunk in text.split(", "):
            parts = chunk.split()
            if len(parts) != 2 or parts[1] not in BAG_LIMITS:
                raise InvalidInput("Invalid drawn cubes", text)
            amount, colour = parts
            counts[colour] = parse_int(amount, text)
        return cls(**counts)

    def power(self) -> int:
        return self.red * self.green * self.blue


@dataclass
class Game:
    id: int
    draws: List[Draw] = field(default_factory=list)

    @classmethod
    def parse(cls, line: str) -> "Game":
        prefix, sep, draws = line.partition(": ")
        if not sep or not prefix.startswith("Game "):
            raise InvalidInput("Invalid game", line)
        game_id = parse_int(prefix[len("Game "):], line)
        return cls(id=game_id, draws=[Draw.parse(d) for d in draws.split("; ")])

    def is_possible(self, red: int, green: int, blue: int) -> bool:
        return all(d.red <= red and d.green <= green and d.blue <= blue for d in self.draws)

    def minimum_draw(self) -> Draw:
        """Fewest cubes of each colour that make every draw of the game possible."""
        return Draw(
            red=max((d.red for d in self.draws), default=0),
            green=max((d.green for d in self.draws), default=0),
            blue=max((d.blue for d in self.draws), default=0),
        )


def parse_games(lines: List[str]) -> List[Game]:
    return [Game.parse(line) for line in lines]


def part1(lines: List[str]) -> int:
    games = parse_games(lines)
    return sum(g.id for g in games if g.is_possible(**BAG_LIMITS))


def part2(lines: List[str]) -> int:
    return sum(g.minimum_draw().power() for g in parse_games(lines))
