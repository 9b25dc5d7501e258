from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends

from ..dependencies import get_now, get_store, get_user_id
from ..models.assistant_schema import (
    ChatRequest,
    ChatResponse,
    FaqResponse,
    SuggestionOverrides,
    SuggestionRequest,
    SuggestionResponse,
)
from ..services.assistant import FAQS, answer_question, suggest_actions
from ..services.store import InMemoryStore
from ..services.weekly_rollup import aggregate

router = APIRouter(prefix="/ai", tags=["ai"])

RECENT_ACTIVITY_LIMIT = 10


@router.get("/faqs", response_model=FaqResponse)
async def faqs() -> FaqResponse:
    return FaqResponse(faqs=FAQS)


@router.post("/chat", response_model=ChatResponse)
async def chat(payload: ChatRequest) -> ChatResponse:
    return await answer_question(payload)


@router.post("/suggestions", response_model=SuggestionResponse)
async def suggestions(
    overrides: Optional[SuggestionOverrides] = None,
    user_id: str = Depends(get_user_id),
    store: InMemoryStore = Depends(get_store),
    now: datetime = Depends(get_now),
) -> SuggestionResponse:
    overrides = overrides or SuggestionOverrides()
    activities = store.list_activities(user_id)
    this_week = aggregate(activities, now).categoryTotals.thisWeek

    recent = "; ".join(
        f"{a.description} ({a.co2e:.2f} kg)" for a in activities[:RECENT_ACTIVITY_LIMIT]
    ) or "No activities logged yet."

    request = SuggestionRequest(
        transportEmissions=_pick(overrides.transportEmissions, this_week.transport),
        energyEmissions=_pick(overrides.energyEmissions, this_week.energy),
        foodEmissions=_pick(overrides.foodEmissions, this_week.food),
        recentActivities=overrides.recentActivities or recent,
    )
    return await suggest_actions(request)


def _pick(value: Optional[float], fallback: float) -> float:
    return fallback if value is None else value
