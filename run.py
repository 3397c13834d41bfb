"""CLI entrypoint: load a day's puzzle input, run both parts, and report the answers."""

import argparse
import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import pandas as pd
from tqdm import tqdm

from solver import solve_day
from src.aoc.days import implemented_days
from src.aoc.errors import AocError
from src.utils.io import input_path_for, read_lines
from src.utils.trace import get_tracer, reset_tracer

ALL_DAYS = "all"


def _day_arg(value: str) -> Union[int, str]:
    if value.lower() == ALL_DAYS:
        return ALL_DAYS
    try:
        return int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a day number or '{ALL_DAYS}', got {value!r}") from None


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Solve both parts of a daily puzzle")
    parser.add_argument("day", type=_day_arg, help="Day number (1-25), or 'all' for every solved day")
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Puzzle input file (defaults to <input-dir>/dayNN.txt; single day only)",
    )
    parser.add_argument(
        "--input-dir",
        type=Path,
        default=None,
        help="Directory holding dayNN.txt inputs (defaults to $AOC_INPUT_DIR or ./inputs)",
    )
    parser.add_argument("--trace", type=Path, default=None, help="Optional path to write the run trace CSV")
    parser.add_argument(
        "--summary",
        type=Path,
        default=None,
        help="Optional path to write the per-day results CSV ('all' only)",
    )
    args = parser.parse_args(argv)
    if args.day == ALL_DAYS and args.input is not None:
        parser.error("--input applies to a single day; use --input-dir with 'all'")
    if args.day != ALL_DAYS and args.summary is not None:
        parser.error("--summary only applies to 'all'")
    return args


def load_input(path: Path, day: Optional[int] = None) -> List[str]:
    lines = read_lines(path)
    get_tracer().log_load(str(path), len(lines), day=day)
    return lines


def report(results: Tuple[Any, Any]) -> None:
    part1, part2 = results
    print(f"Part 1: {part1!r}")
    print(f"Part 2: {part2!r}")


def run_day(day: int, input_path: Path) -> int:
    try:
        lines = load_input(input_path, day=day)
        results = solve_day(day, lines)
    except AocError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    report(results)
    return 0


def summarize_days(days: List[int], input_dir: Optional[Path] = None) -> pd.DataFrame:
    """Solve each day whose input exists and collect one row per day."""
    rows: List[Dict[str, Any]] = []
    for day in tqdm(days, desc="Solving", unit="day"):
        path = input_path_for(day, input_dir)
        if not path.is_file():
            continue

        started = time.perf_counter()
        row: Dict[str, Any] = {"day": day, "part1": None, "part2": None, "status": "solved", "error": None}
        try:
            row["part1"], row["part2"] = solve_day(day, load_input(path, day=day))
        except AocError as e:
            row["status"] = "error"
            row["error"] = str(e)
        row["seconds"] = time.perf_counter() - started
        rows.append(row)

    return pd.DataFrame(rows, columns=["day", "part1", "part2", "status", "error", "seconds"])


def run_all(input_dir: Optional[Path], summary_path: Optional[Path]) -> int:
    df = summarize_days(implemented_days(), input_dir)
    if df.empty:
        print(f"ERROR: No puzzle inputs found in {input_path_for(1, input_dir).parent}", file=sys.stderr)
        return 1

    print(df.to_string(index=False))
    if summary_path:
        summary_path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(summary_path, index=False)
        print(f"Summary written to {summary_path} ({len(df)} days)")

    return 1 if (df["status"] == "error").any() else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    reset_tracer()

    if args.day == ALL_DAYS:
        status = run_all(args.input_dir, args.summary)
    else:
        status = run_day(args.day, args.input or input_path_for(args.day, args.input_dir))

    if args.trace:
        get_tracer().to_csv(args.trace)
    return status


if __name__ == "__main__":
    raise SystemExit(main())
