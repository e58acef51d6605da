"""Tests for viewer timezone handling."""

from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest
from conftest import CET

from polybar_agenda.core import timezone as timezone_module
from polybar_agenda.core.timezone import day_bounds, resolve_timezone, to_local


def test_empty_name_resolves_to_system_timezone():
    tz = resolve_timezone("")

    assert datetime.now(tz).utcoffset() is not None


def test_unknown_name_raises():
    with pytest.raises(ValueError, match="Unknown timezone"):
        resolve_timezone("Nowhere/Special")


def test_date_becomes_local_midnight():
    assert to_local(date(2025, 11, 7), CET) == datetime(2025, 11, 7, tzinfo=CET)


def test_floating_datetime_keeps_wall_clock():
    assert to_local(datetime(2025, 11, 7, 9, 30), CET) == datetime(2025, 11, 7, 9, 30, tzinfo=CET)


def test_aware_datetime_is_converted():
    utc = datetime(2025, 11, 7, 9, 30, tzinfo=timezone.utc)

    local = to_local(utc, CET)

    assert local.hour == 10
    assert local.utcoffset() == timedelta(hours=1)


def test_day_bounds(now):
    start_of_day, end_of_day = day_bounds(now)

    assert start_of_day == datetime(2025, 11, 7, tzinfo=CET)
    assert end_of_day == datetime(2025, 11, 8, tzinfo=CET)


def test_empty_name_uses_system_zone_rules(monkeypatch):
    berlin = ZoneInfo("Europe/Berlin")
    monkeypatch.setattr(timezone_module, "get_localzone", lambda: berlin)

    assert resolve_timezone("") is berlin


def test_day_bounds_on_dst_change():
    # Europe/Berlin falls back from +02:00 to +01:00 on 2025-10-26
    berlin = ZoneInfo("Europe/Berlin")
    now = datetime(2025, 10, 26, 12, 0, tzinfo=berlin)

    start_of_day, end_of_day = day_bounds(now)

    assert start_of_day.utcoffset() == timedelta(hours=2)
    assert end_of_day.utcoffset() == timedelta(hours=1)
    assert end_of_day - start_of_day == timedelta(hours=25)
    assert to_local(date(2025, 10, 26), berlin) == start_of_day
