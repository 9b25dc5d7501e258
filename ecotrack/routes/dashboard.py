from datetime import datetime

from fastapi import APIRouter, Depends

from ..dependencies import get_now, get_store, get_user_id
from ..models.goal_schema import GoalWithEvaluation
from ..models.report_schema import DashboardResponse, GamificationResponse
from ..services.gamification import evaluate_gamification
from ..services.goals import active_goal, evaluate_goal
from ..services.store import InMemoryStore
from ..services.weekly_rollup import aggregate, chart_data, percent_change

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard", response_model=DashboardResponse)
def dashboard(
    user_id: str = Depends(get_user_id),
    store: InMemoryStore = Depends(get_store),
    now: datetime = Depends(get_now),
) -> DashboardResponse:
    activities = store.list_activities(user_id)
    rollup = aggregate(activities, now)
    goal = active_goal(store, user_id, activities, now)

    weekly_goal = None
    if goal is not None:
        weekly_goal = GoalWithEvaluation(goal=goal, evaluation=evaluate_goal(goal, rollup.weekly))

    return DashboardResponse(
        stats=rollup,
        dailyChangePercent=percent_change(rollup.daily, rollup.previousDaily),
        weeklyChangePercent=percent_change(rollup.weekly, rollup.lastWeekly),
        chartData=chart_data(rollup),
        weeklyGoal=weekly_goal,
    )


@router.get("/gamification", response_model=GamificationResponse)
def gamification(
    user_id: str = Depends(get_user_id),
    store: InMemoryStore = Depends(get_store),
    now: datetime = Depends(get_now),
) -> GamificationResponse:
    return evaluate_gamification(store.list_activities(user_id), now)
