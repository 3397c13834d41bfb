"""Day 8: following left/right instructions through a network of nodes."""

import math
import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from src.aoc.errors import InvalidInput

ENTRY_RE = re.compile(r"^(\w+) = \((\w+), (\w+)\)$")


@dataclass
class Network:
    moves: str
    nodes: Dict[str, Tuple[str, str]] = field(default_factory=dict)

    @classmethod
    def parse(cls, lines: List[str]) -> "Network":
        if len(lines) < 2 or lines[1] != "" or not lines[0]:
            raise InvalidInput("Expected moves, a blank line, then network entries", "\n".join(lines))
        bad = [c for c in lines[0] if c not in "LR"]
        if bad:
            raise InvalidInput(f"Invalid move {bad[0]!r}", lines[0])

        network = cls(moves=lines[0])
        for line in lines[2:]:
            match = ENTRY_RE.match(line)
            if not match:
                raise InvalidInput("Invalid network entry", line)
            node, left, right = match.groups()
            network.nodes[node] = (left, right)
        return network

    def step(self, node: str, move: str) -> str:
        if node not in self.nodes:
            raise InvalidInput("Walked onto a node with no entry", node)
        left, right = self.nodes[node]
        return left if move == "L" else right

    def steps_to_end(self, start: str) -> int:
        """Steps from `start` until a node ending in 'Z' is reached."""
        node = start
        steps = 0
        while not node.endswith("Z"):
            node = self.step(node, self.moves[steps % len(self.moves)])
            steps += 1
        return steps

    def ghost_steps(self, starts: Iterable[str]) -> int:
        return math.lcm(*(self.steps_to_end(s) for s in starts))


def part1(lines: List[str]) -> int:
    return Network.parse(lines).steps_to_end("AAA")


def part2(lines: List[str]) -> int:
    network = Network.parse(lines)
    return network.ghost_steps(n for n in network.nodes if n.endswith("A"))
