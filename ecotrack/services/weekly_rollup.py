from datetime import datetime, timedelta
from typing import Dict, Iterable, List

from ..models.activity_schema import Activity, ActivityCategory
from ..models.report_schema import (
    CategoryBreakdown,
    CategoryTotals,
    ChartPoint,
    WeeklyRollup,
)
from .time_windows import TimeWindow, classify, coerce_timestamp, is_same_day

# waste stays out of the chart breakdown
CHART_CATEGORY: Dict[ActivityCategory, str] = {
    ActivityCategory.travel: "transport",
    ActivityCategory.household: "energy",
    ActivityCategory.food: "food",
}


def aggregate(activities: Iterable[Activity], now: datetime) -> WeeklyRollup:
    """Fold activities into yesterday / this week / last week totals.

    Buckets overlap (yesterday is usually inside this week). Bucket totals are
    floored at zero so a recycling credit cannot produce a negative card.
    """
    day_before = (now - timedelta(days=2)).date()
    totals = {window: 0.0 for window in TimeWindow}
    previous_daily = 0.0
    breakdown = {
        TimeWindow.this_week: CategoryBreakdown(),
        TimeWindow.last_week: CategoryBreakdown(),
    }

    for activity in activities:
        moment = coerce_timestamp(activity.date, now)
        co2e = float(activity.co2e or 0)

        if is_same_day(moment, day_before):
            previous_daily += co2e

        chart_key = CHART_CATEGORY.get(ActivityCategory(activity.category))
        for window in classify(moment, now):
            totals[window] += co2e
            if chart_key and window in breakdown:
                bucket = breakdown[window]
                setattr(bucket, chart_key, getattr(bucket, chart_key) + co2e)

    return WeeklyRollup(
        daily=max(totals[TimeWindow.yesterday], 0.0),
        previousDaily=max(previous_daily, 0.0),
        weekly=max(totals[TimeWindow.this_week], 0.0),
        lastWeekly=max(totals[TimeWindow.last_week], 0.0),
        categoryTotals=CategoryTotals(
            thisWeek=breakdown[TimeWindow.this_week],
            lastWeek=breakdown[TimeWindow.last_week],
        ),
    )


def chart_data(rollup: WeeklyRollup) -> List[ChartPoint]:
    return [
        ChartPoint(name="Last Wk", **rollup.categoryTotals.lastWeek.model_dump()),
        ChartPoint(name="This Wk", **rollup.categoryTotals.thisWeek.model_dump()),
    ]


def percent_change(current: float, previous: float) -> float:
    if previous > 0:
        return (current - previous) / previous * 100
    return 100.0 if current > 0 else 0.0


def total_between(activities: Iterable[Activity], start: datetime, end: datetime) -> float:
    """Sum of co2e inside ``[start, end]``, floored at zero."""
    total = 0.0
    for activity in activities:
        moment = coerce_timestamp(activity.date, start)
        if start <= moment <= end:
            total += float(activity.co2e or 0)
    return max(total, 0.0)
