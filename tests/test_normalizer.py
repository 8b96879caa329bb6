from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from zoneinfo import ZoneInfo

import pandas as pd

from transit_utils.timing.normalizer import next_occurrence, normalize, to_minutes

LA = ZoneInfo("America/Los_Angeles")


def test_normalize_google_time_object():
    result = normalize({"value": 1700000000, "text": "2:13pm", "time_zone": "America/Chicago"})
    assert result == pd.Timestamp("2023-11-14 22:13:20", tz="UTC")


def test_normalize_object_with_value_attribute():
    result = normalize(SimpleNamespace(value=1700000000))
    assert result == pd.Timestamp(1700000000, unit="s", tz="UTC")


def test_normalize_datetime_is_returned_unchanged():
    moment = datetime(2024, 5, 1, 8, 30, tzinfo=timezone.utc)
    assert normalize(moment) is moment


def test_normalize_iso_string():
    assert normalize("2024-05-01T08:30:00Z") == pd.Timestamp("2024-05-01 08:30", tz="UTC")


def test_normalize_bad_string_is_invalid():
    assert normalize("not a time") is pd.NaT


def test_normalize_missing_or_unknown_is_invalid():
    assert normalize(None) is pd.NaT
    assert normalize(42) is pd.NaT
    assert normalize({"text": "2:13pm"}) is pd.NaT


def test_next_occurrence_later_today():
    now = datetime(2024, 5, 1, 8, 30, tzinfo=LA)
    assert next_occurrence(17, 45, now=now) == datetime(2024, 5, 1, 17, 45, tzinfo=LA)


def test_next_occurrence_already_passed_goes_to_tomorrow():
    now = datetime(2024, 5, 1, 8, 30, tzinfo=LA)
    assert next_occurrence(7, 0, now=now) == datetime(2024, 5, 2, 7, 0, tzinfo=LA)


def test_next_occurrence_same_minute_is_tomorrow():
    now = datetime(2024, 5, 1, 8, 30, 42, tzinfo=LA)
    result = next_occurrence(8, 30, now=now)
    assert result == now.replace(second=0) + timedelta(hours=24)


def test_next_occurrence_uses_target_zone_wall_clock():
    # 15:30 UTC is 08:30 in Los Angeles during daylight time.
    now = datetime(2024, 5, 1, 15, 30, tzinfo=timezone.utc)
    result = next_occurrence(9, 0, time_zone="America/Los_Angeles", now=now)
    assert result == datetime(2024, 5, 1, 9, 0, tzinfo=LA)


def test_next_occurrence_defaults_to_now():
    result = next_occurrence(0, 0)
    assert result > datetime.now(LA)


def test_to_minutes():
    assert to_minutes(5, 30) == 330
    assert to_minutes(0, 0) == 0


def test_normalize_unusable_epochs_are_invalid():
    assert normalize({"value": float("inf")}) is pd.NaT
    assert normalize({"value": float("-inf")}) is pd.NaT
    assert normalize({"value": float("nan")}) is pd.NaT
    assert normalize({"value": 1e13}) is pd.NaT
    assert normalize(SimpleNamespace(value=-1e13)) is pd.NaT


def test_normalize_epoch_zero():
    assert normalize({"value": 0}) == pd.Timestamp("1970-01-01", tz="UTC")
