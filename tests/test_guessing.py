import io
import random

import pytest

from consoledrills.guessing import (
    HIGH,
    LOW,
    RETRY_PROMPT,
    guessing_game,
    main,
    random_number,
    rng_main,
)


def test_random_number_stays_in_default_range():
    rng = random.Random(5)
    values = [random_number(rng) for _ in range(500)]
    assert all(LOW <= v < HIGH for v in values)


def test_random_number_single_value_range():
    assert random_number(random.Random(1), 5, 6) == 5


def test_random_number_rejects_empty_range():
    with pytest.raises(ValueError):
        random_number(random.Random(1), 5, 5)


def test_random_number_is_reproducible():
    first_rng = random.Random(9)
    second_rng = random.Random(9)
    first = [random_number(first_rng) for _ in range(20)]
    second = [random_number(second_rng) for _ in range(20)]
    assert first == second
    assert all(LOW <= v < HIGH for v in first)


def test_first_guess_wins():
    out = io.StringIO()
    assert guessing_game(42, ["42"], out) == 1
    assert "You win!" in out.getvalue()
    assert RETRY_PROMPT not in out.getvalue()


def test_counts_wrong_guesses():
    out = io.StringIO()
    guesses = ["1", "2", "7"]
    assert guessing_game(7, guesses, out) == len(guesses)
    assert out.getvalue().count(RETRY_PROMPT) == len(guesses) - 1


def test_non_numbers_count_as_wrong():
    out = io.StringIO()
    assert guessing_game(3, ["abc", " 3 \n"], out) == 2


def test_running_out_of_guesses():
    out = io.StringIO()
    assert guessing_game(50, ["1", "2"], out) is None
    assert "You win!" not in out.getvalue()


def test_rng_main_prints_number_in_range(capsys):
    assert rng_main([]) == 0
    value = int(capsys.readouterr().out.strip())
    assert LOW <= value < HIGH


def test_main_without_input_fails(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 1
    assert "Guess the number (0-100): " in capsys.readouterr().out