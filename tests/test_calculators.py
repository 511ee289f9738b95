import io

import pytest

from consoledrills.calculators import (
    PI,
    circle_main,
    circle_metrics,
    compound_interest,
    interest_main,
    kg_to_lbs,
    lbs_to_kg,
    weight_main,
)


def test_unit_circle_area_is_pi():
    assert circle_metrics(1.0).area == pytest.approx(PI)
    assert PI == 3.14159


def test_area_scales_with_square_of_radius():
    assert circle_metrics(3.0).area == pytest.approx(9 * circle_metrics(1.0).area)


@pytest.mark.parametrize("radius", [0.5, 1.0, 2.5, 10.0])
def test_metric_relations(radius):
    m = circle_metrics(radius)
    assert m.radius == radius
    assert m.surface_area == pytest.approx(4 * m.area)
    assert m.circumference == pytest.approx(2 * m.area / radius)
    assert m.volume == pytest.approx(m.surface_area * radius / 3)


def test_zero_radius_is_all_zero():
    m = circle_metrics(0.0)
    assert (m.area, m.circumference, m.surface_area, m.volume) == (0, 0, 0, 0)


def test_zero_rate_keeps_principal():
    assert compound_interest(1000.0, 0.0, 10) == pytest.approx(1000.0)


def test_zero_years_keeps_principal():
    assert compound_interest(100.0, 5.0, 0) == pytest.approx(100.0)


def test_yearly_compounding_at_full_rate_doubles():
    assert compound_interest(100.0, 100.0, 1, times_compounded=1) == pytest.approx(200.0)


def test_interest_grows_with_years():
    values = [compound_interest(500.0, 3.0, y) for y in range(6)]
    assert values == sorted(values)
    assert len(set(values)) == len(values)


def test_interest_rejects_nonpositive_compounding():
    with pytest.raises(ValueError):
        compound_interest(100.0, 5.0, 1, times_compounded=0)


def test_kg_to_lbs_factor():
    assert kg_to_lbs(1.0) == pytest.approx(2.205)


@pytest.mark.parametrize("value", [0.0, 1.0, 72.3, 150.0])
def test_weight_round_trip(value):
    assert lbs_to_kg(kg_to_lbs(value)) == pytest.approx(value)


def test_circle_main_output(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    assert circle_main([]) == 0
    out = capsys.readouterr().out
    assert "Circle with a radius of 1.0 has an area of: 3.1" in out
    assert out.count("radius of 1.0") == 4


def test_circle_main_rejects_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert circle_main([]) == 1


def test_interest_main_output(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1000\n0\n5\n"))
    assert interest_main([]) == 0
    out = capsys.readouterr().out
    assert f"investing for 5 is: {compound_interest(1000, 0, 5):.2f}" in out


def test_weight_main_kg_to_lbs(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n10\n"))
    assert weight_main([]) == 0
    assert "Your weight in pounds is: 22.05" in capsys.readouterr().out


def test_weight_main_lbs_to_kg(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n10\n"))
    assert weight_main([]) == 0
    assert f"Your weight in kilograms is: {lbs_to_kg(10):.2f}" in capsys.readouterr().out


def test_weight_main_invalid_selection(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    assert weight_main([]) == 1
    assert "Invalid input" in capsys.readouterr().out