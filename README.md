# judgekit

Answers to a collection of classic online-judge exercises, written as plain
Python functions, plus a command that reads a problem's input and prints its
expected output for a handful of the problems.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

The package has no dependencies outside the standard library and needs
Python 3.10 or later.

## Using the library

The functions are grouped by the kind of work they do. Each takes the values
of a single case and returns the answer.

- `judgekit.numbers`: digit and number puzzles: `cycle_length`,
  `max_cycle_length`, `reverse_number`, `reverse_and_add`,
  `carry_operations`, `carry_message`, `is_prime`, `emirp_verdict`,
  `cube_sum`, `f91`, `word_value`, `is_prime_word`, `multiple_of_eleven`,
  `digit_sum`, `repeated_digit_sum`, `ugly_number`, `classify_perfection`
  (returning a `Perfection` member), `perfection_line` and `collatz_terms`.
- `judgekit.text`: string puzzles: `wertyu`, `decode_mad_man`,
  `is_subsequence`, `name_value`, `love_ratio`, `phone_number`,
  `sms_presses`, `detect_language`, `hajj_kind`, `decode_line`,
  `scramble_words` and `count_words`.
- `judgekit.sequences`: puzzles over lists of numbers: `is_jolly`,
  `above_average_percent`, `parking_distance`, `age_sort`, `middle_salary`,
  `fastest_speed`, `brick_game_captain`, `is_ordered`, `emoogle_balance`,
  `fits_luggage`, `train_swaps` and `box_moves`.
- `judgekit.puzzles`: the remaining exercises: `soldier_difference`,
  `year_remainder`, `year_festivals`, `minesweeper`, `ecological_premium`,
  `nessy_sonars`, `cola_bottles`, `relational_operator`, `quadrant`,
  `bafana_server`, `thermal_change`, `flag_areas`, `little_masters`,
  `triangle_wave` and `clock_angle`.

A short session:

    >>> from judgekit.numbers import cycle_length, f91
    >>> cycle_length(22)
    16
    >>> f91(500)
    490
    >>> from judgekit.text import is_subsequence
    >>> is_subsequence("abc", "aXbYc")
    True

Some answers follow the judge's conventions rather than textbook ones: for
example `is_prime` treats every number below 2 as prime, and `middle_salary`
returns `None` when exactly two of the three salaries are equal. A few
functions raise `ValueError` on input they cannot answer, such as
`ugly_number(0)`, `carry_operations` with a negative number, or an empty list
passed to `above_average_percent` or `box_moves`.

## Using the command

The `judgekit` command names a problem and reads that problem's input in the
judge's format from standard input, printing the output the judge expects:

    judgekit 100 < input.txt

The command knows these problems:

- `100`: the 3n+1 problem (maximum cycle length over each range)
- `382`: perfection report
- `488`: triangle waves
- `10070`: leap years and festival years
- `10189`: minesweeper fields

From Python the same work is done by `judgekit.cli.run(problem, text)`, which
takes the whole input as a string and returns the whole output as a string;
an unknown problem number raises `ValueError`.

## What it does not do

The command reads full judge input only for the five problems listed above.
Every other exercise is available as a library function that answers one case
at a time; parsing the judge's input format for those, and printing their
output, is left to the caller.