import numbers
import pandas as pd
from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import Any, Optional, Union
from zoneinfo import ZoneInfo

DEFAULT_TIME_ZONE: str = "America/Los_Angeles"
EPOCH_FIELD: str = "value"

NormalizedTime = Union[datetime, type(pd.NaT)]

_MIN_EPOCH_S: float = pd.Timestamp.min.tz_localize("UTC").timestamp()
_MAX_EPOCH_S: float = pd.Timestamp.max.tz_localize("UTC").timestamp()


def _epoch_seconds(time_value: Any) -> Optional[float]:
    if isinstance(time_value, Mapping):
        seconds = time_value.get(EPOCH_FIELD)
    else:
        seconds = getattr(time_value, EPOCH_FIELD, None)
    if isinstance(seconds, numbers.Real) and not isinstance(seconds, bool):
        return seconds
    return None


def normalize(time_value: Any) -> NormalizedTime:
    """Turn a provider time value into an absolute time.

    Accepts a Google time object (``{"value": <epoch seconds>, ...}`` or any
    object with a numeric ``value`` attribute), a ``datetime`` or a timestamp
    string. Missing, unparseable or unsupported input gives ``pd.NaT``.
    """
    if time_value is None:
        return pd.NaT
    if isinstance(time_value, datetime):
        return time_value

    seconds = _epoch_seconds(time_value)
    if seconds is not None:
        # NaN and infinities fail the range check as well.
        if not _MIN_EPOCH_S <= seconds <= _MAX_EPOCH_S:
            return pd.NaT
        try:
            return pd.to_datetime(seconds * 1000, unit="ms", utc=True, errors="coerce")
        except (OverflowError, ValueError, pd.errors.OutOfBoundsDatetime):
            return pd.NaT

    if isinstance(time_value, str):
        return pd.to_datetime(time_value, errors="coerce", utc=True)
    return pd.NaT


def next_occurrence(hour: int, minute: int, time_zone: str = DEFAULT_TIME_ZONE, now: Optional[datetime] = None) -> datetime:
    tz = ZoneInfo(time_zone)
    local_now = (now or datetime.now(tz)).astimezone(tz)
    target = local_now.replace(hour=hour, minute=minute, second=0, microsecond=0)

    # A time equal to the current minute already counts as passed.
    if (hour, minute) <= (local_now.hour, local_now.minute):
        target += timedelta(days=1)
    return target


def to_minutes(hour: int, minute: int) -> int:
    return hour * 60 + minute
