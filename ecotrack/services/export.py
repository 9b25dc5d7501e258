from datetime import datetime
from typing import Iterable

from ..models.activity_schema import Activity
from .time_windows import coerce_timestamp

CSV_HEADER = "id,date,description,category,co2e"


def _quote(text: str) -> str:
    return '"' + text.replace('"', '""') + '"'


def activities_to_csv(activities: Iterable[Activity], now: datetime) -> str:
    lines = [CSV_HEADER]
    for activity in activities:
        day = coerce_timestamp(activity.date, now).strftime("%Y-%m-%d")
        category = getattr(activity.category, "value", activity.category)
        lines.append(
            f"{activity.id},{day},{_quote(activity.description)},{category},{activity.co2e:.2f}"
        )
    return "\n".join(lines)
