from __future__ import annotations

import math

import pytest

from clubgap.bag.units import (
    METERS_TO_YARDS,
    YARDS_TO_METERS,
    as_distance,
    convert_distance,
    normalize_unit,
    round_distance,
)


def test_same_unit_returns_input_unchanged() -> None:
    assert convert_distance(140.5, "meters", "meters") == 140.5
    assert convert_distance(151.25, "yards", "yards") == 151.25


def test_yards_and_meters_use_fixed_factors() -> None:
    assert convert_distance(100, "yards", "meters") == pytest.approx(100 * YARDS_TO_METERS)
    assert convert_distance(100, "meters", "yards") == pytest.approx(100 * METERS_TO_YARDS)


def test_converter_does_not_round() -> None:
    assert convert_distance(150, "yards", "meters") == pytest.approx(137.16)


@pytest.mark.parametrize("value", [None, "abc", [], {}, math.nan, math.inf, -math.inf, True])
def test_non_numeric_input_becomes_zero(value) -> None:
    assert convert_distance(value, "yards", "meters") == 0.0
    assert convert_distance(value, "meters", "meters") == 0.0


def test_numeric_strings_are_accepted() -> None:
    assert as_distance("150") == 150.0
    assert as_distance(" 12.5 ") == 12.5


def test_unknown_unit_pair_passes_value_through() -> None:
    assert convert_distance(42, "feet", "meters") == 42


@pytest.mark.parametrize("value", [0, 1, 7.5, 99, 150, 287.3, 400])
def test_round_trip_stays_within_tolerance(value: float) -> None:
    there = convert_distance(value, "yards", "meters")
    back = convert_distance(there, "meters", "yards")
    assert back == pytest.approx(value, abs=0.01)


def test_round_distance_rounds_half_up() -> None:
    assert round_distance(2.5) == 3
    assert round_distance(2.49) == 2
    assert round_distance(-2.5) == -2
    assert round_distance(math.nan) == 0


def test_normalize_unit_aliases() -> None:
    assert normalize_unit("YD") == "yards"
    assert normalize_unit("metres") == "meters"
    assert normalize_unit("furlongs") is None
    assert normalize_unit(None) is None
