from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class GoalStatus(str, Enum):
    active = "active"
    completed = "completed"
    failed = "failed"


class SetGoalRequest(BaseModel):
    goal: float = Field(..., ge=1, allow_inf_nan=False, description="Weekly target in kg CO2e")


class WeeklyGoal(BaseModel):
    id: str
    userId: str
    goal: float = Field(..., gt=0)
    startDate: datetime
    endDate: datetime
    status: GoalStatus = GoalStatus.active
    actualEmission: Optional[float] = None
    createdAt: datetime

    @property
    def succeeded(self) -> bool:
        return self.actualEmission is not None and self.actualEmission <= self.goal


class GoalEvaluation(BaseModel):
    progressPercent: float = Field(..., description="Progress clamped to 0-100 for display")
    rawPercent: float = Field(..., description="Unclamped weekly total / goal * 100")
    onTrack: bool
    final: bool = Field(..., description="True once the goal week has elapsed")


class GoalWithEvaluation(BaseModel):
    goal: WeeklyGoal
    evaluation: GoalEvaluation


class GoalsResponse(BaseModel):
    active: Optional[GoalWithEvaluation] = None
    past: List[WeeklyGoal]
