from datetime import datetime

import pytest

from ecotrack.services.weekly_rollup import aggregate, chart_data, percent_change, total_between

from .conftest import NOW, make_activity


def test_empty_collection_is_all_zero():
    rollup = aggregate([], NOW)

    assert rollup.daily == 0
    assert rollup.previousDaily == 0
    assert rollup.weekly == 0
    assert rollup.lastWeekly == 0
    for breakdown in (rollup.categoryTotals.thisWeek, rollup.categoryTotals.lastWeek):
        assert (breakdown.transport, breakdown.energy, breakdown.food) == (0, 0, 0)


@pytest.fixture
def activities():
    return [
        make_activity(datetime(2024, 7, 23, 10, 0), "travel", 9.6),
        make_activity(datetime(2024, 7, 23, 18, 0), "waste", 0.7),
        make_activity(datetime(2024, 7, 22, 8, 0), "household", 3.0),
        make_activity(datetime(2024, 7, 22, 13, 0), "food", 1.0),
        make_activity(datetime(2024, 7, 16, 19, 0), "food", 2.5),
        make_activity(datetime(2024, 7, 15, 7, 0), "travel", 4.0),
        make_activity(datetime(2024, 6, 1, 12, 0), "travel", 100.0),
    ]


def test_bucket_totals(activities):
    rollup = aggregate(activities, NOW)

    assert rollup.daily == pytest.approx(10.3)
    assert rollup.previousDaily == pytest.approx(4.0)
    assert rollup.weekly == pytest.approx(14.3)
    assert rollup.lastWeekly == pytest.approx(6.5)


def test_category_breakdown_excludes_waste(activities):
    totals = aggregate(activities, NOW).categoryTotals

    assert totals.thisWeek.transport == pytest.approx(9.6)
    assert totals.thisWeek.energy == pytest.approx(3.0)
    assert totals.thisWeek.food == pytest.approx(1.0)
    assert totals.lastWeek.transport == pytest.approx(4.0)
    assert totals.lastWeek.food == pytest.approx(2.5)
    assert totals.lastWeek.energy == 0


def test_order_does_not_matter(activities):
    forward = aggregate(activities, NOW)
    backward = aggregate(list(reversed(activities)), NOW)

    assert backward.weekly == pytest.approx(forward.weekly)
    assert backward.lastWeekly == pytest.approx(forward.lastWeekly)


def test_recycling_credit_offsets_but_total_never_negative():
    credit_only = [make_activity(datetime(2024, 7, 23, 9, 0), "waste", -1.0)]
    rollup = aggregate(credit_only, NOW)
    assert rollup.daily == 0
    assert rollup.weekly == 0

    mixed = credit_only + [make_activity(datetime(2024, 7, 23, 10, 0), "travel", 2.0)]
    assert aggregate(mixed, NOW).weekly == pytest.approx(1.0)


def test_chart_data_last_week_first(activities):
    points = chart_data(aggregate(activities, NOW))

    assert [p.name for p in points] == ["Last Wk", "This Wk"]
    assert points[1].transport == pytest.approx(9.6)


@pytest.mark.parametrize(
    "current, previous, expected",
    [(12, 10, 20.0), (5, 10, -50.0), (5, 0, 100.0), (0, 0, 0.0)],
)
def test_percent_change(current, previous, expected):
    assert percent_change(current, previous) == pytest.approx(expected)


def test_total_between_is_inclusive(activities):
    total = total_between(activities, datetime(2024, 7, 15), datetime(2024, 7, 21, 23, 59, 59, 999999))
    assert total == pytest.approx(6.5)
