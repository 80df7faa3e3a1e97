"""Assorted judge puzzles: geometry, calendars, grids and small simulations."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

__all__ = [
    "soldier_difference",
    "year_remainder",
    "year_festivals",
    "minesweeper",
    "ecological_premium",
    "nessy_sonars",
    "cola_bottles",
    "relational_operator",
    "quadrant",
    "bafana_server",
    "thermal_change",
    "flag_areas",
    "little_masters",
    "triangle_wave",
    "clock_angle",
]

MINE = "*"

LEAP = "This is leap year."
HULUCULU = "This is huluculu festival year."
BULUKULU = "This is bulukulu festival year."
ORDINARY = "This is an ordinary year."


def soldier_difference(a: int, b: int) -> int:
    """Absolute difference between two army sizes."""
    return abs(a - b)


def year_remainder(year: str, divisor: int) -> int:
    """Remainder of a decimal number, given as text of any length, by ``divisor``."""
    if divisor <= 0:
        raise ValueError("divisor must be positive")
    remainder = 0
    for ch in year:
        remainder = remainder * 10 + (ord(ch) - ord("0"))
        if remainder >= divisor:
            remainder %= divisor
    return remainder


def year_festivals(year: str) -> list[str]:
    """Lines describing a year: leap, huluculu, bulukulu or ordinary."""
    leap = (
        year_remainder(year, 4) == 0 and year_remainder(year, 100) != 0
    ) or year_remainder(year, 400) == 0
    huluculu = year_remainder(year, 15) == 0
    bulukulu = year_remainder(year, 55) == 0

    lines = []
    if leap:
        lines.append(LEAP)
    if huluculu:
        lines.append(HULUCULU)
    if bulukulu and leap:
        lines.append(BULUKULU)
    if not huluculu and not leap:
        lines.append(ORDINARY)
    return lines


def minesweeper(field: Sequence[str]) -> list[str]:
    """Replace every non-mine cell with the number of adjacent mines."""
    mines = {
        (r, c)
        for r, row in enumerate(field)
        for c, cell in enumerate(row)
        if cell == MINE
    }

    def count(r: int, c: int) -> int:
        return sum(
            (r + dr, c + dc) in mines
            for dr in (-1, 0, 1)
            for dc in (-1, 0, 1)
            if dr or dc
        )

    return [
        "".join(
            MINE if cell == MINE else str(count(r, c)) for c, cell in enumerate(row)
        )
        for r, row in enumerate(field)
    ]


def ecological_premium(farmers: Iterable[tuple[int, int, int]]) -> int:
    """Total premium: farm size times environment-friendliness, per farmer.

    Each farmer is ``(size, animals, friendliness)``; the animal count
    cancels out of the formula.
    """
    return sum(size * friendliness for size, _animals, friendliness in farmers)


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def nessy_sonars(rows: int, columns: int) -> int:
    """Sonars needed to cover a grid when each one watches a 3x3 block."""
    return _trunc_div(rows, 3) * _trunc_div(columns, 3)


def _bottles_to_borrow(n: int) -> int:
    return -n % 3


def _drink_without_borrowing(n: int) -> int:
    total = 0
    while n >= 3:
        total += n // 3
        n = n // 3 + n % 3
    return total


def _drink_with_borrowing(n: int) -> int:
    borrowed = _bottles_to_borrow(n)
    may_borrow_later = borrowed == 0
    total = 0
    empties = borrowed + n
    while empties >= 3:
        total += empties // 3
        empties = empties // 3 + empties % 3
        if may_borrow_later and empties % 3:
            extra = _bottles_to_borrow(empties)
            if extra <= empties:
                empties += extra
                may_borrow_later = False
    if empties < borrowed:
        return _drink_without_borrowing(n)
    return total


def cola_bottles(n: int) -> int:
    """Bottles of cola that can be drunk starting from ``n`` full ones.

    Three empties buy a new bottle, and empties may be borrowed as long as
    they can be returned.
    """
    if n == 1:
        return n
    return n + _drink_with_borrowing(n)


def relational_operator(a: int, b: int) -> str:
    """The operator that holds between ``a`` and ``b``: ``<``, ``>`` or ``=``."""
    if a < b:
        return "<"
    if a > b:
        return ">"
    return "="


def quadrant(origin: tuple[int, int], point: tuple[int, int]) -> str:
    """Region of ``point`` relative to the division point ``origin``."""
    dx = point[0] - origin[0]
    dy = point[1] - origin[1]
    if dx == 0 or dy == 0:
        return "divisa"
    if dx >= 0 and dy >= 0:
        return "NE"
    if dx >= 0 and dy <= 0:
        return "SE"
    if dx <= 0 and dy >= 0:
        return "NO"
    return "SO"


def bafana_server(players: int, first: int, passes: int) -> int:
    """Player holding the ball after ``passes`` passes around a circle."""
    if players < 1:
        raise ValueError("there must be at least one player")
    if passes <= 0:
        return first
    current = first + 1 if first + 1 <= players else 1
    return (current - 1 + passes - 1) % players + 1


def thermal_change(celsius: float, delta: float) -> float:
    """Celsius reading after the Fahrenheit temperature rises by ``delta``."""
    fahrenheit = 9 * celsius / 5 + 32 + delta
    return (fahrenheit - 32) / 9 * 5


def flag_areas(length: float) -> tuple[float, float]:
    """Red and green areas of a flag ``length`` long."""
    radius = length / 5.0
    width = length * 0.6
    red = math.pi * radius * radius
    return red, length * width - red


def little_masters(x: float, y: float, radius: float) -> tuple[float, float]:
    """Shortest and longest distance from ``(x, y)`` to a circle at the origin."""
    distance = math.sqrt(x * x + y * y)
    small = radius - distance
    return small, 2 * radius - small


def triangle_wave(amplitude: int) -> list[str]:
    """Lines of one triangle wave: 1, 22, 333 ... up to the amplitude and back."""
    if amplitude < 1:
        return ["1"]
    rising = [str(k) * k for k in range(1, amplitude + 1)]
    return rising + rising[-2::-1]


def clock_angle(hour: int, minute: int) -> float:
    """Smaller angle, in degrees, between the hands of a clock."""
    angle = abs((hour * 5.0 - minute) * 6 + minute / 2.0)
    return min(360 - angle, angle)