"""Text puzzles: keyboard shifts, ciphers, word games and lookups."""

from __future__ import annotations

import math
import re

__all__ = [
    "wertyu",
    "decode_mad_man",
    "is_subsequence",
    "name_value",
    "love_ratio",
    "phone_number",
    "sms_presses",
    "detect_language",
    "hajj_kind",
    "decode_line",
    "scramble_words",
    "count_words",
]

_KEYBOARD_UPPER = "`1234567890-=QWERTYUIOP[]\\ASDFGHJKL;'ZXCVBNM,./"
_KEYBOARD_LOWER = "`1234567890-=qwertyuiop[]\\asdfghjkl;'zxcvbnm,./"


def _shift_table(keyboard: str, offset: int) -> dict[str, str]:
    table = {key: keyboard[i - offset] for i, key in enumerate(keyboard) if i >= offset}
    table[" "] = " "
    return table


_WERTYU = _shift_table(_KEYBOARD_UPPER, 1)
_MAD_MAN = _shift_table(_KEYBOARD_LOWER, 2)


def wertyu(line: str) -> str:
    """Undo typing with hands moved one key to the right.

    Characters with no key to their left are dropped.
    """
    return "".join(_WERTYU.get(ch, "") for ch in line)


def decode_mad_man(line: str) -> str:
    """Decode text typed two keys to the right, ignoring case."""
    return "".join(_MAD_MAN.get(ch, "") for ch in line.lower())


def is_subsequence(pattern: str, text: str) -> bool:
    """True when ``pattern`` can be read out of ``text`` in order."""
    remaining = iter(text)
    return all(ch in remaining for ch in pattern)


def _digital_root(n: int) -> int:
    while n > 9:
        n = sum(int(d) for d in str(n))
    return n


def name_value(name: str) -> int:
    """Digital root of the alphabet positions of the letters in ``name``."""
    total = sum(
        ord(ch.lower()) - ord("a") + 1 for ch in name if ch.isascii() and ch.isalpha()
    )
    return _digital_root(total)


def love_ratio(first: str, second: str) -> float:
    """Smaller name value as a percentage of the larger one.

    Returns NaN when neither name holds a letter.
    """
    r1, r2 = name_value(first), name_value(second)
    if r1 == 0 and r2 == 0:
        return math.nan
    if r1 > r2:
        return r2 / r1 * 100
    return r1 / r2 * 100


_PHONE = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "22233344455566677778889999",
)


def phone_number(text: str) -> str:
    """Replace capital letters with their telephone keypad digits."""
    return text.translate(_PHONE)


_SMS_KEYS = ("abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz")
_SMS_PRESSES = {ch: i + 1 for key in _SMS_KEYS for i, ch in enumerate(key)}


def sms_presses(text: str) -> int:
    """Key presses needed to type ``text`` on a phone keypad.

    Any character that is not a lower-case letter costs one press.
    """
    return sum(_SMS_PRESSES.get(ch, 1) for ch in text)


_GREETINGS = {
    "HELLO": "ENGLISH",
    "ZDRAVSTVUJTE": "RUSSIAN",
    "CIAO": "ITALIAN",
    "HALLO": "GERMAN",
    "BONJOUR": "FRENCH",
    "HOLA": "SPANISH",
}


def detect_language(word: str) -> str:
    """Name the language a greeting belongs to, or ``UNKNOWN``."""
    return _GREETINGS.get(word, "UNKNOWN")


def hajj_kind(word: str) -> str:
    """Tell Hajj from Umrah by the first letter."""
    return "Hajj-e-Akbar" if word.startswith("H") else "Hajj-e-Asghar"


def decode_line(line: str) -> str:
    """Shift every non-space character down by seven code points."""
    return "".join(ch if ch == " " else chr(ord(ch) - 7) for ch in line)


def scramble_words(line: str) -> str:
    """Reverse each space-separated word, keeping the spaces in place."""
    return " ".join(word[::-1] for word in line.split(" "))


_WORD = re.compile(r"[A-Za-z]+")


def count_words(line: str) -> int:
    """Count maximal runs of ASCII letters."""
    return len(_WORD.findall(line))