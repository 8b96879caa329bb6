import pandas as pd
from datetime import datetime
from typing import Any
from zoneinfo import ZoneInfo
from .normalizer import normalize

DISPLAY_TIME_ZONE: str = "America/Chicago"
MISSING_TIME_TEXT: str = "N/A"


def format_arrival_time(value: Any, time_zone: str = DISPLAY_TIME_ZONE) -> str:
    if value is None or value == "":
        return MISSING_TIME_TEXT

    moment = normalize(value)
    if moment is pd.NaT or not isinstance(moment, datetime):
        return MISSING_TIME_TEXT
    if moment.tzinfo is None:
        moment = moment.astimezone()

    local = moment.astimezone(ZoneInfo(time_zone))
    hour = local.hour % 12 or 12
    suffix = "AM" if local.hour < 12 else "PM"
    return f"{hour}:{local.minute:02d} {suffix}"
