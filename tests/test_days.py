"""Example puzzles for each solved day, plus the helpers they are built from."""

import pytest

from src.aoc.days import day01, day02, day03, day04, day05, day06, day07, day08, day09
from src.aoc.errors import InvalidInput
from src.utils.io import to_lines

DAY01_PART1 = """\
1abc2
pqr3stu8vwx
a1b2c3d4e5f
treb7uchet
"""

DAY01_PART2 = """\
two1nine
eightwothree
abcone2threexyz
xtwone3four
4nineeightseven2
zoneight234
7pqrstsixteen
"""

DAY02 = """\
Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green
Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue
Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red
Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red
Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green
"""

DAY03 = """\
467..114..
...*......
..35..633.
......#...
617*......
.....+.58.
..592.....
......755.
...$.*....
.664.598..
"""

DAY04 = """\
Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53
Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19
Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1
Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83
Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36
Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11
"""

DAY05 = """\
seeds: 79 14 55 13

seed-to-soil map:
50 98 2
52 50 48

soil-to-fertilizer map:
0 15 37
37 52 2
39 0 15

fertilizer-to-water map:
49 53 8
0 11 42
42 0 7
57 7 4

water-to-light map:
88 18 7
18 25 70

light-to-temperature map:
45 77 23
81 45 19
68 64 13

temperature-to-humidity map:
0 69 1
1 0 69

humidity-to-location map:
60 56 37
56 93 4
"""

DAY06 = """\
Time:      7  15   30
Distance:  9  40  200
"""

DAY07 = """\
32T3K 765
T55J5 684
KK677 28
KTJJT 220
QQQJA 483
"""

DAY08 = """\
LLR

AAA = (BBB, BBB)
BBB = (AAA, ZZZ)
ZZZ = (ZZZ, ZZZ)
"""

DAY08_GHOSTS = """\
LR

11A = (11B, XXX)
11B = (XXX, 11Z)
11Z = (11B, XXX)
22A = (22B, XXX)
22B = (22C, 22C)
22C = (22Z, 22Z)
22Z = (22B, 22B)
XXX = (XXX, XXX)
"""

DAY09 = """\
0 3 6 9 12 15
1 3 6 10 15 21
10 13 16 21 30 45
"""


@pytest.mark.parametrize(
    "solve, example, expected",
    [
        (day01.part1, DAY01_PART1, 142),
        (day01.part2, DAY01_PART2, 281),
        (day02.part1, DAY02, 8),
        (day02.part2, DAY02, 2286),
        (day03.part1, DAY03, 4361),
        (day03.part2, DAY03, 467835),
        (day04.part1, DAY04, 13),
        (day04.part2, DAY04, 30),
        (day05.part1, DAY05, 35),
        (day05.part2, DAY05, 46),
        (day06.part1, DAY06, 288),
        (day06.part2, DAY06, 71503),
        (day07.part1, DAY07, 6440),
        (day07.part2, DAY07, 5905),
        (day08.part1, DAY08, 6),
        (day08.part2, DAY08_GHOSTS, 6),
        (day09.part1, DAY09, 114),
        (day09.part2, DAY09, 2),
    ],
)
def test_published_examples(solve, example, expected):
    assert solve(to_lines(example)) == expected


def test_solvers_do_not_mutate_lines():
    lines = to_lines(DAY05)
    snapshot = list(lines)

    day05.part1(lines)
    day05.part2(lines)

    assert lines == snapshot


# Day 1

def test_spelled_digits_may_overlap():
    assert day01.first_and_last_digits_spelled("eightwo") == ("8", "2")


def test_line_without_digits_is_invalid():
    with pytest.raises(InvalidInput):
        day01.part1(["abc"])


# Day 2

def test_game_parse_and_minimum_draw():
    game = day02.Game.parse("Game 7: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green")

    assert game.id == 7
    assert game.minimum_draw() == day02.Draw(red=4, green=2, blue=6)
    assert game.minimum_draw().power() == 48


@pytest.mark.parametrize("line", ["Gme 1: 3 blue", "Game x: 3 blue", "Game 1: 3 purple"])
def test_invalid_games(line):
    with pytest.raises(InvalidInput):
        day02.Game.parse(line)


# Day 3

def test_schematic_parse_finds_numbers_and_symbols():
    schematic = day03.Schematic.parse(to_lines("123.123#123\n..123.123.#.123"))

    assert [(n.value, n.x_start, n.x_end, n.y) for n in schematic.numbers] == [
        (123, 0, 2, 0),
        (123, 4, 6, 0),
        (123, 8, 10, 0),
        (123, 2, 4, 1),
        (123, 6, 8, 1),
        (123, 12, 14, 1),
    ]
    assert schematic.symbols == {(7, 0): "#", (10, 1): "#"}


def test_neighbours_in_the_corner():
    number = day03.SchematicNumber(value=1, x_start=0, x_end=0, y=0)

    assert sorted(number.neighbours()) == [(0, 1), (1, 0), (1, 1)]


def test_neighbours_of_wide_number():
    number = day03.SchematicNumber(value=123, x_start=1, x_end=3, y=1)

    assert len(number.neighbours()) == 12


def test_non_ascii_digits_are_symbols():
    assert day03.part1(["5\u00b2"]) == 5
    assert day03.Schematic.parse(["5\u00b2"]).symbols == {(1, 0): "\u00b2"}


# Day 4

def test_scratch_card_parse():
    card = day04.ScratchCard.parse("Card 123:  1 23 |  4 56")

    assert card.id == 123
    assert card.winning == {1, 23}
    assert card.held == {4, 56}
    assert card.points() == 0


def test_invalid_scratch_card():
    with pytest.raises(InvalidInput):
        day04.ScratchCard.parse("Card 1: 1 2 3")


# Day 5

def test_range_map_apply():
    rm = day05.RangeMap(destination=50, source=98, length=2)

    assert rm.apply(0) is None
    assert rm.apply(98) == 50
    assert rm.apply(99) == 51
    assert rm.apply(100) is None


def test_section_convert_falls_through_unmapped_values():
    section = day05.MapSection(
        "seed-to-soil map:",
        [day05.RangeMap(50, 98, 2), day05.RangeMap(52, 50, 48)],
    )

    assert [section.convert(v) for v in (79, 14, 55, 13)] == [81, 14, 57, 13]


def test_convert_interval_splits_on_range_edges():
    section = day05.MapSection("seed-to-soil map:", [day05.RangeMap(100, 10, 5)])

    assert sorted(section.convert_interval((5, 20))) == [(5, 10), (15, 20), (100, 105)]


def test_almanac_with_misordered_header_is_invalid():
    lines = to_lines(DAY05.replace("soil-to-fertilizer map:", "water-to-light map:", 1))

    with pytest.raises(InvalidInput):
        day05.Almanac.parse(lines)


def test_almanac_without_seeds_line_is_invalid():
    with pytest.raises(InvalidInput):
        day05.part1(["", "seed-to-soil map:"])


def test_unpaired_trailing_seed_is_ignored_for_ranges():
    lines = to_lines(DAY05.replace("seeds: 79 14 55 13", "seeds: 79 14 55 13 7", 1))

    assert day05.Almanac.parse(lines).seed_intervals() == [(79, 93), (55, 68)]
    assert day05.part2(lines) == 46


# Day 6

def test_ways_to_win_counts_strictly_better_holds():
    assert day06.Race(time=7, record=9).ways_to_win() == 4
    assert day06.Race(time=30, record=200).ways_to_win() == 9
    assert day06.Race(time=3, record=2).ways_to_win() == 0


def test_ways_to_win_matches_brute_force():
    for time in range(1, 40):
        for record in range(0, 60, 7):
            race = day06.Race(time=time, record=record)
            expected = sum(1 for held in range(1, time) if race.distance(held) > record)
            assert race.ways_to_win() == expected


def test_race_sheet_needs_two_lines():
    with pytest.raises(InvalidInput):
        day06.part1(["Time: 7 15"])


@pytest.mark.parametrize("sheet", [
    ["Time: 3", "Distance: -1"],
    ["Time: +3", "Distance: 1"],
    ["Time: 1_000", "Distance: 1"],
])
def test_signed_or_underscored_numbers_are_rejected(sheet):
    with pytest.raises(InvalidInput):
        day06.part1(sheet)


# Day 7

def test_hand_types():
    assert day07.Hand.parse("QQQJA").hand_type() == day07.HandType.THREE_OF_A_KIND
    assert day07.Hand.parse("QJJQ2").hand_type_with_jokers() == day07.HandType.FOUR_OF_A_KIND
    assert day07.Hand.parse("JJJJJ").hand_type_with_jokers() == day07.HandType.FIVE_OF_A_KIND


def test_hand_tiebreaks():
    assert day07.Hand.parse("33332").strength() > day07.Hand.parse("2AAAA").strength()
    assert day07.Hand.parse("77888").strength() > day07.Hand.parse("77788").strength()
    assert day07.Hand.parse("QQQQ2").strength_with_jokers() > day07.Hand.parse("JKKK2").strength_with_jokers()


@pytest.mark.parametrize("line", ["32T3 765", "32T3X 765", "32T3K", "32T3K abc"])
def test_invalid_hands(line):
    with pytest.raises(InvalidInput):
        day07.parse_hand_and_bid(line)


# Day 8

def test_network_parse():
    network = day08.Network.parse(to_lines(DAY08))

    assert network.moves == "LLR"
    assert network.nodes == {
        "AAA": ("BBB", "BBB"),
        "BBB": ("AAA", "ZZZ"),
        "ZZZ": ("ZZZ", "ZZZ"),
    }


def test_invalid_move_is_rejected():
    with pytest.raises(InvalidInput):
        day08.Network.parse(["LXR", "", "AAA = (ZZZ, ZZZ)"])


def test_invalid_network_entry_is_rejected():
    with pytest.raises(InvalidInput):
        day08.Network.parse(["LR", "", "AAA -> ZZZ"])


# Day 9

def test_extrapolate_both_ways():
    assert day09.extrapolate([10, 13, 16, 21, 30, 45]) == 68
    assert day09.extrapolate_backwards([10, 13, 16, 21, 30, 45]) == 5


def test_negative_values_are_allowed_in_sequences():
    assert day09.part1(["-3 -1 1 3"]) == 5
    assert day09.part2(["-3 -1 1 3"]) == -5


def test_blank_sequence_is_invalid():
    with pytest.raises(InvalidInput):
        day09.part1(["0 3 6", ""])
