import math

import pytest

from judgekit.text import (
    count_words,
    decode_line,
    decode_mad_man,
    detect_language,
    hajj_kind,
    is_subsequence,
    love_ratio,
    name_value,
    phone_number,
    scramble_words,
    sms_presses,
    wertyu,
)


def test_wertyu_sample():
    assert wertyu("O S, GOMR YPFSU/") == "I AM FINE TODAY."


def test_wertyu_keeps_spaces_and_drops_unknown():
    assert wertyu("   ") == "   "
    assert wertyu("\n") == ""
    assert wertyu("`") == ""


def test_decode_mad_man_sample():
    assert decode_mad_man("k[r dyt I[o") == "how are you"


def test_decode_mad_man_ignores_case():
    text = "k[r dyt i[o"
    assert decode_mad_man(text.upper()) == decode_mad_man(text)


@pytest.mark.parametrize(
    "pattern,text,expected",
    [
        ("sequence", "subsequence", True),
        ("person", "compression", False),
        ("", "anything", True),
        ("abc", "", False),
    ],
)
def test_is_subsequence(pattern, text, expected):
    assert is_subsequence(pattern, text) is expected


@pytest.mark.parametrize("word", ["VERDI", "AllIsWell", "z"])
def test_is_subsequence_of_itself(word):
    assert is_subsequence(word, word) is True


def test_name_value_ignores_case_and_symbols():
    assert name_value("A b!") == name_value("ab")
    assert name_value("") == 0


@pytest.mark.parametrize("name", ["alex", "Shakil Ahmed", "zzzzzz", "Yo-Yo"])
def test_name_value_is_single_digit(name):
    assert 1 <= name_value(name) <= 9


def test_love_ratio_properties():
    assert love_ratio("alex", "alex") == 100.0
    assert love_ratio("alex", "nasima") == love_ratio("nasima", "alex")
    assert 0.0 <= love_ratio("alex", "nasima") <= 100.0


def test_love_ratio_without_letters_is_nan():
    result = love_ratio("123", "!!")
    assert str(result) == "nan"
    assert math.isnan(result) is True


def test_phone_number_sample():
    assert phone_number("1-HOME-SWEET-HOME") == "1-4663-79338-4663"


def test_phone_number_leaves_other_characters():
    text = "0123-456 lower\n"
    assert phone_number(text) == text


@pytest.mark.parametrize("ch", list("adgjmptw"))
def test_sms_first_letters_cost_like_space(ch):
    assert sms_presses(ch) == sms_presses(" ")


def test_sms_presses_counts():
    assert sms_presses("s") == sms_presses("z") == sms_presses("aaaa")
    assert sms_presses("welcome" + "ulab") == sms_presses("welcome") + sms_presses("ulab")
    assert sms_presses("") == 0


@pytest.mark.parametrize(
    "word,language",
    [
        ("HELLO", "ENGLISH"),
        ("HOLA", "SPANISH"),
        ("HALLO", "GERMAN"),
        ("BONJOUR", "FRENCH"),
        ("CIAO", "ITALIAN"),
        ("ZDRAVSTVUJTE", "RUSSIAN"),
        ("hello", "UNKNOWN"),
    ],
)
def test_detect_language(word, language):
    assert detect_language(word) == language


def test_hajj_kind():
    assert hajj_kind("Hajj") == "Hajj-e-Akbar"
    assert hajj_kind("Umrah") == "Hajj-e-Asghar"
    assert hajj_kind("") == "Hajj-e-Asghar"


@pytest.mark.parametrize("plain", ["*CDC is the trademark", "hello world", "A"])
def test_decode_line_round_trip(plain):
    encoded = "".join(ch if ch == " " else chr(ord(ch) + 7) for ch in plain)
    assert decode_line(encoded) == plain


@pytest.mark.parametrize("line", ["I love you.", "You love me.", "  two  gaps ", ""])
def test_scramble_words_is_an_involution(line):
    scrambled = scramble_words(line)
    assert scramble_words(scrambled) == line
    assert len(scrambled) == len(line)
    assert [i for i, c in enumerate(scrambled) if c == " "] == [
        i for i, c in enumerate(line) if c == " "
    ]


@pytest.mark.parametrize("n", [0, 1, 5, 12])
def test_count_words_counts_repeats(n):
    assert count_words(" ".join(["word"] * n)) == n


def test_count_words_ignores_non_letters():
    assert count_words("123 !! ??") == 0
    assert count_words("Meep Meep!") == count_words("Meep Meep")