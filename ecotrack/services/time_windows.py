"""Reporting windows (yesterday / this week / last week), weeks starting Monday."""

import logging
from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Any, FrozenSet, Tuple

logger = logging.getLogger(__name__)


class TimeWindow(str, Enum):
    yesterday = "yesterday"
    this_week = "this_week"
    last_week = "last_week"


def start_of_week(now: datetime) -> datetime:
    monday = now.date() - timedelta(days=now.weekday())
    return datetime.combine(monday, time.min, tzinfo=now.tzinfo)


def end_of_week(now: datetime) -> datetime:
    """Last representable instant of Sunday."""
    return start_of_week(now) + timedelta(days=7) - timedelta(microseconds=1)


def week_range(now: datetime) -> Tuple[datetime, datetime]:
    return start_of_week(now), end_of_week(now)


def last_week_range(now: datetime) -> Tuple[datetime, datetime]:
    return week_range(now - timedelta(days=7))


def coerce_timestamp(value: Any, now: datetime) -> datetime:
    """Turn a stored date value into a datetime comparable with ``now``.

    Missing or unparseable values fall back to ``now``.
    """
    if value is None:
        return now

    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            logger.warning("Unparseable activity date %r, using now", value)
            return now

    if isinstance(value, date) and not isinstance(value, datetime):
        value = datetime.combine(value, time.min)

    if not isinstance(value, datetime):
        logger.warning("Unsupported activity date type %s, using now", type(value).__name__)
        return now

    if now.tzinfo is None and value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    if now.tzinfo is not None:
        if value.tzinfo is None:
            return value.replace(tzinfo=now.tzinfo)
        return value.astimezone(now.tzinfo)
    return value


def is_same_day(timestamp: datetime, day: date) -> bool:
    return timestamp.date() == day


def classify(timestamp: Any, now: datetime) -> FrozenSet[TimeWindow]:
    """Every window ``timestamp`` falls in; the empty set means none."""
    moment = coerce_timestamp(timestamp, now)
    windows = set()

    if is_same_day(moment, (now - timedelta(days=1)).date()):
        windows.add(TimeWindow.yesterday)

    this_start, this_end = week_range(now)
    if this_start <= moment <= this_end:
        windows.add(TimeWindow.this_week)

    last_start, last_end = last_week_range(now)
    if last_start <= moment <= last_end:
        windows.add(TimeWindow.last_week)

    return frozenset(windows)
