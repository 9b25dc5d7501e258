from typing import List, Optional

from pydantic import BaseModel

from .goal_schema import GoalWithEvaluation


class CategoryBreakdown(BaseModel):
    transport: float = 0.0
    energy: float = 0.0
    food: float = 0.0


class CategoryTotals(BaseModel):
    thisWeek: CategoryBreakdown
    lastWeek: CategoryBreakdown


class WeeklyRollup(BaseModel):
    daily: float = 0.0
    previousDaily: float = 0.0
    weekly: float = 0.0
    lastWeekly: float = 0.0
    categoryTotals: CategoryTotals


class ChartPoint(CategoryBreakdown):
    name: str


class DashboardResponse(BaseModel):
    stats: WeeklyRollup
    dailyChangePercent: float
    weeklyChangePercent: float
    chartData: List[ChartPoint]
    weeklyGoal: Optional[GoalWithEvaluation] = None


class Badge(BaseModel):
    id: str
    name: str
    description: str
    unlocked: bool


class GamificationResponse(BaseModel):
    streak: int
    badges: List[Badge]
