from collections import defaultdict
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Set

from ..models.activity_schema import Activity, ActivityCategory
from ..models.report_schema import Badge, GamificationResponse
from .time_windows import coerce_timestamp, last_week_range
from .weekly_rollup import aggregate

GREEN_FUELS = frozenset({"ev", "train"})
GREEN_COMMUTES_REQUIRED = 5
ENERGY_SAVER_LIMIT = 5.0
STREAK_DAYS_REQUIRED = 7
LOW_CARBON_MEAL_DAYS = 3
LOW_CARBON_DAILY_FOOD_LIMIT = 3.0
FOOTPRINT_HERO_RATIO = 0.8


def activity_days(activities: Iterable[Activity], now: datetime) -> Set[date]:
    return {coerce_timestamp(a.date, now).date() for a in activities}


def current_streak(activities: Iterable[Activity], now: datetime) -> int:
    """Consecutive logged days ending today, or yesterday if today is still empty."""
    days = activity_days(activities, now)
    day = now.date()
    if day not in days:
        day -= timedelta(days=1)

    streak = 0
    while day in days:
        streak += 1
        day -= timedelta(days=1)
    return streak


def _is_green_commute(activity: Activity) -> bool:
    if activity.category != ActivityCategory.travel:
        return False
    fuel = str(activity.attributes.get("fuelType") or "").lower()
    return fuel in GREEN_FUELS or activity.co2e == 0


def _has_low_carbon_diet_run(activities: List[Activity], now: datetime) -> bool:
    food_by_day: Dict[date, float] = defaultdict(float)
    for activity in activities:
        if activity.category == ActivityCategory.food:
            food_by_day[coerce_timestamp(activity.date, now).date()] += activity.co2e

    low_days = {day for day, total in food_by_day.items() if total <= LOW_CARBON_DAILY_FOOD_LIMIT}
    for day in low_days:
        if all(day + timedelta(days=i) in low_days for i in range(LOW_CARBON_MEAL_DAYS)):
            return True
    return False


def _had_household_last_week(activities: List[Activity], now: datetime) -> bool:
    start, end = last_week_range(now)
    return any(
        a.category == ActivityCategory.household and start <= coerce_timestamp(a.date, now) <= end
        for a in activities
    )


def evaluate_gamification(activities: Iterable[Activity], now: datetime) -> GamificationResponse:
    activities = list(activities)
    rollup = aggregate(activities, now)
    streak = current_streak(activities, now)

    green_commutes = sum(1 for a in activities if _is_green_commute(a))
    energy_saver = (
        _had_household_last_week(activities, now)
        and rollup.categoryTotals.lastWeek.energy < ENERGY_SAVER_LIMIT
    )
    footprint_hero = (
        rollup.lastWeekly > 0 and rollup.weekly <= rollup.lastWeekly * FOOTPRINT_HERO_RATIO
    )

    badges = [
        Badge(id="1", name="Eco Starter", description="Logged your first activity.",
              unlocked=bool(activities)),
        Badge(id="2", name="Green Commuter", description="Used a green transport option 5 times.",
              unlocked=green_commutes >= GREEN_COMMUTES_REQUIRED),
        Badge(id="3", name="Energy Saver", description="Kept energy usage below 5kg CO2e for a week.",
              unlocked=energy_saver),
        Badge(id="4", name="Activity Streak", description="Logged an activity for 7 days in a row.",
              unlocked=streak >= STREAK_DAYS_REQUIRED),
        Badge(id="5", name="Low Carbon Diet", description="Ate low-carbon meals for 3 consecutive days.",
              unlocked=_has_low_carbon_diet_run(activities, now)),
        Badge(id="6", name="Footprint Hero", description="Reduced your weekly footprint by 20%.",
              unlocked=footprint_hero),
    ]
    return GamificationResponse(streak=streak, badges=badges)
