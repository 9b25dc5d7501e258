import threading
from datetime import datetime, timedelta

import pytest

from ecotrack.models.goal_schema import GoalStatus, WeeklyGoal
from ecotrack.services.goals import (
    active_goal,
    close_elapsed_goals,
    evaluate_goal,
    set_weekly_goal,
)

from .conftest import NOW, USER, make_activity


def _goal(target, status=GoalStatus.active, actual=None):
    return WeeklyGoal(
        id="g1",
        userId=USER,
        goal=target,
        startDate=datetime(2024, 7, 22),
        endDate=datetime(2024, 7, 28, 23, 59, 59, 999999),
        status=status,
        actualEmission=actual,
        createdAt=NOW,
    )


class TestEvaluateGoal:
    def test_under_target(self):
        evaluation = evaluate_goal(_goal(20), 10)

        assert evaluation.progressPercent == pytest.approx(50)
        assert evaluation.onTrack is True
        assert evaluation.final is False

    def test_progress_clamped_but_raw_kept(self):
        evaluation = evaluate_goal(_goal(20), 30)

        assert evaluation.progressPercent == 100
        assert evaluation.rawPercent == pytest.approx(150)
        assert evaluation.onTrack is False

    def test_exactly_on_target_is_on_track(self):
        assert evaluate_goal(_goal(20), 20).onTrack is True

    def test_closed_goal_uses_actual_emission(self):
        evaluation = evaluate_goal(_goal(20, GoalStatus.completed, actual=12), 99)

        assert evaluation.rawPercent == pytest.approx(60)
        assert evaluation.onTrack is True
        assert evaluation.final is True


def test_succeeded_needs_actual_emission():
    assert _goal(20, GoalStatus.completed, actual=15).succeeded is True
    assert _goal(20, GoalStatus.failed, actual=25).succeeded is False
    assert _goal(20, GoalStatus.failed).succeeded is False


class TestSetWeeklyGoal:
    def test_goal_covers_current_week(self, store):
        goal = set_weekly_goal(store, USER, 25, NOW)

        assert goal.status == GoalStatus.active
        assert goal.startDate == datetime(2024, 7, 22)
        assert goal.endDate == datetime(2024, 7, 28, 23, 59, 59, 999999)

    def test_new_goal_supersedes_active_one(self, store):
        first = set_weekly_goal(store, USER, 25, NOW)
        second = set_weekly_goal(store, USER, 15, NOW + timedelta(hours=1))

        goals = store.list_goals(USER)
        active = [g for g in goals if g.status == GoalStatus.active]
        assert [g.id for g in active] == [second.id]

        previous = next(g for g in goals if g.id == first.id)
        # superseded goals are marked failed even when on track
        assert previous.status == GoalStatus.failed

    def test_goals_are_per_user(self, store):
        set_weekly_goal(store, USER, 25, NOW)
        set_weekly_goal(store, "someone-else", 10, NOW)

        assert store.get_active_goal(USER).goal == 25
        assert store.get_active_goal("someone-else").goal == 10

    def test_concurrent_goals_leave_one_active(self, store):
        set_weekly_goal(store, USER, 40, NOW)
        workers = 8
        barrier = threading.Barrier(workers)

        def submit(target):
            barrier.wait()
            set_weekly_goal(store, USER, target, NOW)

        threads = [threading.Thread(target=submit, args=(10 + i,)) for i in range(workers)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        goals = store.list_goals(USER)
        assert len(goals) == workers + 1
        assert sum(g.status == GoalStatus.active for g in goals) == 1
        assert sum(g.status == GoalStatus.failed for g in goals) == workers


class TestCloseElapsedGoals:
    def test_met_goal_completes(self, store):
        goal = set_weekly_goal(store, USER, 10, NOW - timedelta(days=7))
        activities = [
            make_activity(datetime(2024, 7, 16, 9, 0), "travel", 3.0),
            make_activity(datetime(2024, 7, 18, 9, 0), "food", 2.5),
            make_activity(datetime(2024, 7, 23, 9, 0), "travel", 50.0),
        ]

        closed = close_elapsed_goals(store, USER, activities, NOW)

        assert [g.id for g in closed] == [goal.id]
        assert closed[0].status == GoalStatus.completed
        assert closed[0].actualEmission == pytest.approx(5.5)
        assert store.get_active_goal(USER) is None

    def test_missed_goal_fails(self, store):
        set_weekly_goal(store, USER, 5, NOW - timedelta(days=7))
        activities = [make_activity(datetime(2024, 7, 16, 9, 0), "travel", 8.0)]

        closed = close_elapsed_goals(store, USER, activities, NOW)

        assert closed[0].status == GoalStatus.failed
        assert closed[0].actualEmission == pytest.approx(8.0)

    def test_current_week_goal_stays_active(self, store):
        goal = set_weekly_goal(store, USER, 5, NOW)

        assert close_elapsed_goals(store, USER, [], NOW) == []
        assert active_goal(store, USER, [], NOW).id == goal.id
