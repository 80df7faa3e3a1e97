import io

import pytest

from judgekit.cli import main, run
from judgekit.numbers import max_cycle_length, perfection_line
from judgekit.puzzles import minesweeper, triangle_wave, year_festivals


def test_three_n_plus_one_sample_line():
    assert run("100", "1 10\n").splitlines()[0] == "1 10 20"


def test_three_n_plus_one_each_pair():
    pairs = [(1, 10), (100, 200), (210, 201)]
    text = "\n".join(f"{i} {j}" for i, j in pairs)
    lines = run("100", text).splitlines()
    assert len(lines) == len(pairs)
    for (i, j), line in zip(pairs, lines):
        assert line == f"{i} {j} {max_cycle_length(i, j)}"


def test_minesweeper_fields():
    text = "4 4\n*...\n....\n.*..\n....\n3 5\n**...\n.....\n.*...\n0 0\n"
    out = run("10189", text)
    blocks = out.split("\n\n")
    assert len(blocks) == 2
    first = blocks[0].splitlines()
    assert first[0] == "Field #1:"
    assert first[1:] == minesweeper(["*...", "....", ".*..", "...."])
    second = blocks[1].splitlines()
    assert second[0] == "Field #2:"
    assert second[1:] == minesweeper(["**...", ".....", ".*..."])


def test_minesweeper_stops_at_zero():
    out = run("10189", "0 0\n1 1\n*\n")
    assert out == ""


def test_triangle_wave_cases():
    out = run("488", "2\n3\n2\n2\n1\n")
    wave3 = "\n".join(triangle_wave(3)) + "\n"
    wave2 = "\n".join(triangle_wave(2)) + "\n"
    assert out == wave3 + "\n" + wave3 + "\n" + wave2


def test_perfection_report():
    out = run("382", "15 28 6 56 60000 22 496 0 12")
    lines = out.splitlines()
    assert lines[0] == "PERFECTION OUTPUT"
    assert lines[-1] == "END OF OUTPUT"
    numbers = [15, 28, 6, 56, 60000, 22, 496]
    assert lines[1:-1] == [perfection_line(n) for n in numbers]


def test_leap_years_separated():
    out = run("10070", "2000\n3600\n4515\n2001\n")
    blocks = out.split("\n\n")
    assert len(blocks) == 4
    for year, block in zip(["2000", "3600", "4515", "2001"], blocks):
        assert block.splitlines() == year_festivals(year)


def test_unknown_problem():
    with pytest.raises(ValueError):
        run("99999", "")


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 10\n"))
    assert main(["100"]) == 0
    assert capsys.readouterr().out == run("100", "1 10\n")


def test_main_rejects_unknown_problem():
    with pytest.raises(SystemExit):
        main(["nope"])