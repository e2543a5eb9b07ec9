from __future__ import annotations

from unitkit.formatting import format_magnitude, format_quantity


def test_format_magnitude_trims_trailing_zeros() -> None:
    assert format_magnitude(1.0) == "1"
    assert format_magnitude(0.0) == "0"
    assert format_magnitude(0.1) == "0.1"
    assert format_magnitude(0.111) == "0.11"
    assert format_magnitude(-2.5) == "-2.5"
    assert format_magnitude(-0.001) == "0"
    assert format_magnitude(1234.5) == "1234.5"
    assert format_magnitude(3.14159, digits=4) == "3.1416"
    assert format_magnitude(10.0, digits=0) == "10"


def test_format_quantity_default_and_custom() -> None:
    assert format_quantity(1.0, "m") == "1 m"
    assert format_quantity(0.5, "kg", "{1}={0}") == "kg=0.5"
    assert format_quantity(2.0, "s", "{0:.1f} {1} {2}/{3}", ("a", "b")) == "2.0 s a/b"
