from datetime import datetime, timedelta
from typing import Optional
from pydantic import BaseModel

class Arrival(BaseModel):
    arrival_time: datetime
    is_real_time: bool = False


def minutes_of_day(moment: datetime) -> int:
    return moment.hour * 60 + moment.minute


def next_date_for_minutes(time_in_minutes: int, now: Optional[datetime] = None) -> datetime:
    now = now or datetime.now().astimezone()
    # Minutes past the end of the day carry over into later days.
    days, day_minutes = divmod(time_in_minutes, 24 * 60)
    hours, minutes = divmod(day_minutes, 60)
    next_date = now.replace(hour=hours, minute=minutes, second=0, microsecond=0) + timedelta(days=days)
    if next_date <= now:
        next_date += timedelta(days=1)
    return next_date


def _by_time_of_day(arrivals: list[Arrival]) -> list[tuple[int, Arrival]]:
    return sorted(
        ((minutes_of_day(arrival.arrival_time), arrival) for arrival in arrivals),
        key=lambda pair: pair[0],
    )


def find_next_arrival(arrivals: list[Arrival], now: Optional[datetime] = None) -> Optional[Arrival]:
    now = now or datetime.now().astimezone()

    real_time = [a for a in arrivals if a.is_real_time and a.arrival_time > now]
    if real_time:
        return real_time[0]

    by_time_of_day = _by_time_of_day(arrivals)
    if not by_time_of_day:
        return None

    current = minutes_of_day(now)
    time_of_day, arrival = next(
        (pair for pair in by_time_of_day if pair[0] > current),
        by_time_of_day[0],
    )
    return arrival.model_copy(update={"arrival_time": next_date_for_minutes(time_of_day, now)})


def last_stop_time(arrivals: list[Arrival], next_arrival: Optional[Arrival], now: Optional[datetime] = None) -> Optional[datetime]:
    if not arrivals or next_arrival is None:
        return None
    now = now or datetime.now().astimezone()

    last_time_of_day, _ = _by_time_of_day(arrivals)[-1]
    last_stop = next_date_for_minutes(last_time_of_day, now)
    if last_time_of_day > minutes_of_day(next_arrival.arrival_time):
        return last_stop
    return last_stop + timedelta(days=1)


def is_within_two_stops(next_arrival: Optional[Arrival], last_stop: Optional[datetime], arrivals: list[Arrival]) -> bool:
    if next_arrival is None or last_stop is None:
        return False

    times = [time_of_day for time_of_day, _ in _by_time_of_day(arrivals)]
    next_minutes = minutes_of_day(next_arrival.arrival_time)
    last_minutes = minutes_of_day(last_stop)
    if next_minutes not in times or last_minutes not in times:
        return False
    return abs(times.index(last_minutes) - times.index(next_minutes)) <= 2
