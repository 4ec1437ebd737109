"""Tests for domain.timeseries."""

from datetime import UTC, datetime
from decimal import Decimal

import pytest

from domain.timeseries import Bar, TimeSeries


def _bar(day: int, close: str = "1.0") -> Bar:
    price = Decimal(close)
    return Bar(
        timestamp=datetime(2026, 1, day, tzinfo=UTC),
        open=price,
        high=price,
        low=price,
        close=price,
        volume=Decimal(0),
    )


def test_new_series_is_empty():
    series = TimeSeries(name="EURUSD")

    assert series.is_empty
    assert len(series) == 0
    assert series.first_bar is None
    assert series.last_bar is None


def test_add_bar_appends_in_order():
    series = TimeSeries(name="EURUSD")
    series.add_bar(_bar(5, "1.2"))
    series.add_bar(_bar(2, "1.1"))

    assert series.bar_count == 2
    assert series.first_bar.close == Decimal("1.2")
    assert series.last_bar.close == Decimal("1.1")
    assert [b.timestamp.day for b in series] == [5, 2]


def test_duplicates_are_kept():
    series = TimeSeries(name="EURUSD")
    series.add_bar(_bar(3))
    series.add_bar(_bar(3))

    assert len(series) == 2


def test_bar_is_immutable():
    bar = _bar(1)
    with pytest.raises(AttributeError):
        bar.close = Decimal("2")  # type: ignore[misc]


def test_series_instances_do_not_share_bars():
    a = TimeSeries(name="A")
    b = TimeSeries(name="B")
    a.add_bar(_bar(1))

    assert b.is_empty
