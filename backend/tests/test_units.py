import pytest

from runova.core.units import (
    convert_between,
    convert_distance,
    format_distance,
    km_to_miles,
    miles_to_km,
    round_to_half,
)


def test_mile_km_conversion():
    assert miles_to_km(1) == pytest.approx(1.60934)
    assert km_to_miles(1.60934) == pytest.approx(1.0)
    assert convert_distance(10, "km") == pytest.approx(16.0934)
    assert convert_distance(10, "mi") == 10
    assert convert_between(5, "km", "km") == 5
    assert convert_between(5, "km", "mi") == pytest.approx(3.1069, rel=1e-3)


def test_round_to_half():
    assert round_to_half(3.2) == 3.0
    assert round_to_half(3.3) == 3.5
    assert round_to_half(1.25) == 1.5
    assert round_to_half(6.8) == 7.0


def test_format_distance():
    assert format_distance(None, "mi") == "-"
    assert format_distance(6.4, "km") == "6.5 km"
    assert format_distance(6.0, "mi") == "6 mi"
