"""Command-line runner that feeds judge input to a solver and prints the answer."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator

from judgekit.numbers import max_cycle_length, perfection_line
from judgekit.puzzles import minesweeper, triangle_wave, year_festivals

__all__ = ["run", "main"]


def _ints(text: str) -> Iterator[int]:
    return (int(token) for token in text.split())


def _three_n_plus_one(text: str) -> str:
    numbers = _ints(text)
    return "".join(
        f"{i} {j} {max_cycle_length(i, j)}\n" for i, j in zip(numbers, numbers)
    )


def _minesweeper(text: str) -> str:
    lines = iter(line.strip() for line in text.splitlines() if line.strip())
    blocks = []
    for header in lines:
        rows, columns = (int(v) for v in header.split()[:2])
        if rows == 0 and columns == 0:
            break
        field = [next(lines, "")[:columns] for _ in range(rows)]
        body = "".join(f"{row}\n" for row in minesweeper(field))
        blocks.append(f"Field #{len(blocks) + 1}:\n{body}")
    return "\n".join(blocks)


def _triangle_wave(text: str) -> str:
    numbers = _ints(text)
    count = next(numbers, 0)
    parts = []
    for _ in range(count):
        try:
            amplitude, frequency = next(numbers), next(numbers)
        except StopIteration:
            break
        wave = "".join(f"{line}\n" for line in triangle_wave(amplitude))
        parts.append("\n".join([wave] * frequency))
    return "\n".join(parts)


def _perfection(text: str) -> str:
    lines = ["PERFECTION OUTPUT"]
    for n in _ints(text):
        if n == 0:
            break
        lines.append(perfection_line(n))
    lines.append("END OF OUTPUT")
    return "".join(f"{line}\n" for line in lines)


def _leap_years(text: str) -> str:
    years = text.split("\n")
    if years and years[-1] == "":
        years.pop()
    blocks = ["".join(f"{line}\n" for line in year_festivals(y)) for y in years]
    return "\n".join(blocks)


_SOLVERS: dict[str, Callable[[str], str]] = {
    "100": _three_n_plus_one,
    "10189": _minesweeper,
    "488": _triangle_wave,
    "382": _perfection,
    "10070": _leap_years,
}


def run(problem: str, text: str) -> str:
    """Solve ``problem`` for the judge input ``text`` and return the output."""
    try:
        solver = _SOLVERS[problem]
    except KeyError:
        raise ValueError(f"unknown problem: {problem}") from None
    return solver(text)


def main(argv: list[str] | None = None) -> int:
    """Read judge input from standard input and write the answer."""
    parser = argparse.ArgumentParser(
        prog="judgekit", description="Solve a judge problem from standard input."
    )
    parser.add_argument("problem", choices=sorted(_SOLVERS), help="problem number")
    args = parser.parse_args(argv)
    sys.stdout.write(run(args.problem, sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())