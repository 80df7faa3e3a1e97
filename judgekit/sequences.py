"""Puzzles over lists of numbers: ordering, averages, swaps and balances."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations, pairwise

__all__ = [
    "is_jolly",
    "above_average_percent",
    "parking_distance",
    "age_sort",
    "middle_salary",
    "fastest_speed",
    "brick_game_captain",
    "is_ordered",
    "emoogle_balance",
    "fits_luggage",
    "train_swaps",
    "box_moves",
]

LUGGAGE_LIMIT = 20


def is_jolly(values: Sequence[int]) -> bool:
    """True when the gaps between neighbours cover 1 to ``n - 1``.

    Every gap must lie in ``1..n-1`` and the gaps must add up to the sum of
    ``1..n-1``. A sequence of one value is always jolly.
    """
    n = len(values)
    if n == 1:
        return True
    expected = (n - 1) * n // 2
    gaps = [abs(b - a) for a, b in pairwise(values)]
    if any(not 1 <= gap < n for gap in gaps):
        return False
    return sum(gaps) == expected


def above_average_percent(marks: Sequence[float]) -> float:
    """Percentage of marks strictly above the mean."""
    if not marks:
        raise ValueError("at least one mark is needed")
    average = sum(marks) / len(marks)
    above = sum(1 for mark in marks if mark > average)
    return 100.0 / len(marks) * above


def parking_distance(positions: Sequence[int]) -> int:
    """Walking distance to visit every store and return to the car."""
    if not positions:
        return 0
    return (max(positions) - min(positions)) * 2


def age_sort(ages: Sequence[int]) -> list[int]:
    """Ages in ascending order."""
    return sorted(ages)


def middle_salary(salaries: Sequence[int]) -> int | None:
    """The salary strictly between the highest and the lowest of three.

    When all three are equal that shared value is returned; when exactly two
    are equal no salary lies strictly between and ``None`` is returned.
    """
    if len(salaries) != 3:
        raise ValueError("exactly three salaries are needed")
    if len(set(salaries)) == 1:
        return salaries[0]
    low, high = min(salaries), max(salaries)
    return next((s for s in salaries if low < s < high), None)


def fastest_speed(speeds: Sequence[int]) -> int:
    """Highest speed, never below zero."""
    return max([0, *speeds])


def brick_game_captain(ages: Sequence[int]) -> list[int]:
    """Ages, in team order, with as many older as younger players.

    Players of the same age are counted on neither side.
    """
    captains = []
    for age in ages:
        younger = sum(1 for other in ages if other < age)
        older = sum(1 for other in ages if other > age)
        if older == younger:
            captains.append(age)
    return captains


def is_ordered(lengths: Sequence[int]) -> bool:
    """True when the lengths never decrease or never increase."""
    return all(a <= b for a, b in pairwise(lengths)) or all(
        a >= b for a, b in pairwise(lengths)
    )


def emoogle_balance(values: Sequence[int]) -> int:
    """Number of non-zero entries minus the number of zeros."""
    zeros = sum(1 for value in values if value == 0)
    return len(values) - 2 * zeros


def fits_luggage(dimensions: Sequence[int]) -> bool:
    """True when no dimension of the bag exceeds the allowed size."""
    return all(d <= LUGGAGE_LIMIT for d in dimensions)


def train_swaps(carriages: Sequence[int]) -> int:
    """Adjacent swaps needed to put the carriages in ascending order."""
    return sum(1 for a, b in combinations(carriages, 2) if a > b)


def box_moves(heights: Sequence[int]) -> int:
    """Bricks to move so every stack matches the (truncated) mean height."""
    if not heights:
        raise ValueError("at least one stack is needed")
    total = sum(heights)
    sign = -1 if total < 0 else 1
    average = sign * (abs(total) // len(heights))
    return sum(h - average for h in heights if h > average)