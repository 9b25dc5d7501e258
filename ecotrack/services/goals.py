import logging
import uuid
from datetime import datetime
from typing import Iterable, List, Optional

from ..models.activity_schema import Activity
from ..models.goal_schema import GoalEvaluation, GoalStatus, WeeklyGoal
from .store import InMemoryStore
from .time_windows import week_range
from .weekly_rollup import total_between

logger = logging.getLogger(__name__)


def evaluate_goal(goal: WeeklyGoal, weekly_total: float) -> GoalEvaluation:
    """Progress of ``weekly_total`` against the goal target.

    While the goal is active the verdict is a projection from the live total;
    once the week is closed ``actualEmission`` is used instead.
    """
    final = goal.status != GoalStatus.active
    total = goal.actualEmission if final and goal.actualEmission is not None else weekly_total

    raw = total / goal.goal * 100
    return GoalEvaluation(
        progressPercent=min(max(raw, 0.0), 100.0),
        rawPercent=raw,
        onTrack=total <= goal.goal,
        final=final,
    )


def set_weekly_goal(store: InMemoryStore, user_id: str, target: float, now: datetime) -> WeeklyGoal:
    """Create this week's goal, superseding any active one.

    A superseded goal is always marked failed, even when it was on track.
    """
    start, end = week_range(now)
    goal = WeeklyGoal(
        id=uuid.uuid4().hex,
        userId=user_id,
        goal=target,
        startDate=start,
        endDate=end,
        status=GoalStatus.active,
        createdAt=now,
    )
    for previous in store.replace_active_goal(goal):
        logger.info("Goal %s for user %s superseded, marked failed", previous.id, user_id)
    return goal


def close_elapsed_goals(
    store: InMemoryStore,
    user_id: str,
    activities: Iterable[Activity],
    now: datetime,
) -> List[WeeklyGoal]:
    """Close active goals whose week has ended, recording the actual emission."""
    activities = list(activities)
    closed = []

    for goal in store.list_goals(user_id):
        if goal.status != GoalStatus.active or goal.endDate >= now:
            continue

        actual = total_between(activities, goal.startDate, goal.endDate)
        status = GoalStatus.completed if actual <= goal.goal else GoalStatus.failed
        closed.append(
            store.update_goal(goal.model_copy(update={"status": status, "actualEmission": actual}))
        )
        logger.info(
            "Closed goal %s for user %s as %s (%.2f / %.2f kg)",
            goal.id, user_id, status.value, actual, goal.goal,
        )

    return closed


def active_goal(
    store: InMemoryStore,
    user_id: str,
    activities: Iterable[Activity],
    now: datetime,
) -> Optional[WeeklyGoal]:
    close_elapsed_goals(store, user_id, activities, now)
    return store.get_active_goal(user_id)
