from datetime import datetime, timedelta

from ecotrack.services.gamification import current_streak, evaluate_gamification

from .conftest import NOW, make_activity


def _unlocked(activities):
    result = evaluate_gamification(activities, NOW)
    return {badge.name for badge in result.badges if badge.unlocked}


def test_no_activities():
    result = evaluate_gamification([], NOW)

    assert result.streak == 0
    assert len(result.badges) == 6
    assert not any(badge.unlocked for badge in result.badges)


def test_streak_counts_back_from_today():
    activities = [make_activity(NOW - timedelta(days=d), "food", 2.5) for d in range(3)]
    assert current_streak(activities, NOW) == 3


def test_streak_survives_empty_today():
    activities = [make_activity(NOW - timedelta(days=d), "food", 2.5) for d in (1, 2)]
    assert current_streak(activities, NOW) == 2


def test_streak_breaks_on_gap():
    activities = [make_activity(NOW - timedelta(days=d), "food", 2.5) for d in (0, 2, 3)]
    assert current_streak(activities, NOW) == 1


def test_first_activity_unlocks_eco_starter():
    assert _unlocked([make_activity(NOW, "waste", 0.7)]) == {"Eco Starter"}


def test_seven_day_streak():
    activities = [make_activity(NOW - timedelta(days=d), "household", 8.0) for d in range(7)]
    assert "Activity Streak" in _unlocked(activities)


def test_green_commuter():
    activities = [
        make_activity(NOW - timedelta(hours=h), "travel", 0.5, fuelType="ev", vehicleType="car")
        for h in range(4)
    ]
    assert "Green Commuter" not in _unlocked(activities)

    activities.append(make_activity(NOW, "travel", 4.1, fuelType="train"))
    assert "Green Commuter" in _unlocked(activities)


def test_energy_saver_needs_low_household_last_week():
    low = [make_activity(datetime(2024, 7, 17, 20, 0), "household", 2.0)]
    high = [make_activity(datetime(2024, 7, 17, 20, 0), "household", 6.0)]

    assert "Energy Saver" in _unlocked(low)
    assert "Energy Saver" not in _unlocked(high)


def test_low_carbon_diet_needs_three_consecutive_days():
    days = [datetime(2024, 7, 20, 13, 0), datetime(2024, 7, 21, 13, 0), datetime(2024, 7, 22, 13, 0)]
    assert "Low Carbon Diet" in _unlocked([make_activity(d, "food", 2.5) for d in days])

    heavy_middle = [
        make_activity(days[0], "food", 2.5),
        make_activity(days[1], "food", 5.0),
        make_activity(days[2], "food", 2.5),
    ]
    assert "Low Carbon Diet" not in _unlocked(heavy_middle)


def test_footprint_hero():
    activities = [
        make_activity(datetime(2024, 7, 16, 9, 0), "travel", 10.0),
        make_activity(datetime(2024, 7, 22, 9, 0), "travel", 7.0),
    ]
    assert "Footprint Hero" in _unlocked(activities)

    activities.append(make_activity(datetime(2024, 7, 22, 18, 0), "travel", 2.0))
    assert "Footprint Hero" not in _unlocked(activities)
