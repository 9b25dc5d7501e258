from datetime import datetime

from fastapi import APIRouter, Depends

from ..dependencies import get_now, get_store, get_user_id
from ..models.goal_schema import (
    GoalStatus,
    GoalsResponse,
    GoalWithEvaluation,
    SetGoalRequest,
    WeeklyGoal,
)
from ..services.goals import close_elapsed_goals, evaluate_goal, set_weekly_goal
from ..services.store import InMemoryStore
from ..services.weekly_rollup import aggregate

router = APIRouter(prefix="/goals", tags=["goals"])


@router.get("", response_model=GoalsResponse)
def list_goals(
    user_id: str = Depends(get_user_id),
    store: InMemoryStore = Depends(get_store),
    now: datetime = Depends(get_now),
) -> GoalsResponse:
    activities = store.list_activities(user_id)
    close_elapsed_goals(store, user_id, activities, now)

    goals = store.list_goals(user_id)
    active = next((g for g in goals if g.status == GoalStatus.active), None)

    current = None
    if active is not None:
        weekly = aggregate(activities, now).weekly
        current = GoalWithEvaluation(goal=active, evaluation=evaluate_goal(active, weekly))

    return GoalsResponse(
        active=current,
        past=[g for g in goals if g.status != GoalStatus.active],
    )


@router.post("", response_model=WeeklyGoal, status_code=201)
def set_goal(
    payload: SetGoalRequest,
    user_id: str = Depends(get_user_id),
    store: InMemoryStore = Depends(get_store),
    now: datetime = Depends(get_now),
) -> WeeklyGoal:
    close_elapsed_goals(store, user_id, store.list_activities(user_id), now)
    return set_weekly_goal(store, user_id, payload.goal, now)
