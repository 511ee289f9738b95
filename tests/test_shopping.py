import io

import pytest

from consoledrills.shopping import FIELD_LIMIT, cart_total, collect_words, main, receipt


def test_cart_total_of_nothing_is_zero():
    assert cart_total(9.99, 0) == 0


def test_cart_total_of_one_is_price():
    assert cart_total(4.25, 1) == pytest.approx(4.25)


def test_cart_total_scales_with_quantity():
    assert cart_total(2.5, 4) == pytest.approx(10.0)


def test_receipt_lines():
    text = receipt("apples\n", 1.5, 2)
    lines = text.splitlines()
    assert lines[0] == "You have bought: 2 apples"
    assert lines[1] == f"Your total price is: ${cart_total(1.5, 2):.2f}"


def test_receipt_uses_dollar_sign_and_two_decimals():
    lines = receipt("tea\n", 1.0, 3).splitlines()
    assert lines[0] == "You have bought: 3 tea"
    assert lines[1] == "Your total price is: $3.00"


def test_collect_words_in_prompt_order():
    out = io.StringIO()
    words = collect_words(["big\n", "cat\n", "red\n", "running\n", "tiny\n"], out)
    assert words == {
        "adjective1": "big",
        "noun": "cat",
        "adjective2": "red",
        "verb": "running",
        "adjective3": "tiny",
    }
    assert out.getvalue().count("Enter an adjective (descriptive word): ") == 3


def test_collect_words_truncates_long_input():
    words = collect_words(["x" * 80] * 5, io.StringIO())
    assert all(len(word) == FIELD_LIMIT for word in words.values())
    assert FIELD_LIMIT == 49


def test_collect_words_raises_when_input_runs_out():
    with pytest.raises(EOFError):
        collect_words(["big", "cat"], io.StringIO())


def test_main_prints_receipt(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("widget\n2.50\n3\n"))
    assert main([]) == 0
    assert receipt("widget", 2.5, 3) in capsys.readouterr().out


def test_main_rejects_bad_quantity(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("widget\n2.50\nmany\n"))
    assert main([]) == 1
    assert "Invalid input" in capsys.readouterr().out