"""
Unit Tests for header-driven API column resolution

Uses a trimmed One Call style response so no API calls are made.
"""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import polars as pl
import pytest
from src.coreutils.utils import PathNotFoundError
from src.transformation.api_columns import (
    build_api_frame,
    fill_api_row,
    resolve_api_values,
)

HEADERS = [
    "city",
    "api:daily.0.weather.0.id",
    "bid modifier",
    "api:daily.0.temp.day",
]

WARSAW = {
    "lat": 52.23,
    "lon": 21.01,
    "daily": [
        {"temp": {"day": 21.5}, "weather": [{"id": 800, "main": "Clear"}]},
        {"temp": {"day": 18.0}, "weather": [{"id": 500, "main": "Rain"}]},
    ],
}

OSLO = {
    "lat": 59.91,
    "lon": 10.75,
    "daily": [
        {"temp": {"day": 12.0}, "weather": [{"id": 601, "main": "Snow"}]},
    ],
}


def test_resolve_api_values():
    values = resolve_api_values(HEADERS, WARSAW)
    assert values == {"daily.0.weather.0.id": 800, "daily.0.temp.day": 21.5}
    assert list(values) == ["daily.0.weather.0.id", "daily.0.temp.day"]


def test_resolve_api_values_without_markers():
    assert resolve_api_values(["city", "bid modifier"], WARSAW) == {}


def test_resolve_api_values_strict_raises():
    with pytest.raises(PathNotFoundError):
        resolve_api_values(HEADERS + ["api:daily.3.temp.day"], WARSAW)


def test_resolve_api_values_lenient(caplog):
    values = resolve_api_values(HEADERS + ["api:alerts.0.event"], WARSAW, strict=False)
    assert values["alerts.0.event"] is None
    assert values["daily.0.weather.0.id"] == 800
    assert "alerts.0.event" in caplog.text


def test_fill_api_row():
    row = ["Warsaw", "old", "1.2", "old"]
    filled = fill_api_row(row, HEADERS, WARSAW)

    assert filled == ["Warsaw", 800, "1.2", 21.5]
    assert row == ["Warsaw", "old", "1.2", "old"]


def test_fill_api_row_pads_short_rows():
    filled = fill_api_row(["Oslo"], HEADERS, OSLO)
    assert filled == ["Oslo", 601, None, 12.0]


def test_fill_api_row_writes_every_repeated_marker():
    headers = ["api:daily.0.temp.day", "city", "api:daily.0.temp.day"]
    document = {"daily": [{"temp": {"day": 21.5}}]}

    filled = fill_api_row(["old", "Warsaw", "old"], headers, document)

    assert filled == [21.5, "Warsaw", 21.5]


def test_build_api_frame():
    df = build_api_frame(HEADERS, [WARSAW, OSLO])

    assert df.columns == ["daily.0.weather.0.id", "daily.0.temp.day"]
    assert df.height == 2
    assert df["daily.0.weather.0.id"].to_list() == [800, 601]
    assert df["daily.0.temp.day"].to_list() == [21.5, 12.0]


def test_build_api_frame_missing_values_are_null():
    df = build_api_frame(HEADERS + ["api:daily.1.temp.day"], [WARSAW, OSLO])
    assert df["daily.1.temp.day"].to_list() == [18.0, None]


def test_build_api_frame_empty_inputs():
    assert build_api_frame(["city"], [WARSAW]).shape == (0, 0)

    df = build_api_frame(HEADERS, [])
    assert df.height == 0
    assert df.columns == ["daily.0.weather.0.id", "daily.0.temp.day"]
    assert isinstance(df, pl.DataFrame)
