from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Body, Depends, HTTPException, Response

from ..dependencies import get_now, get_store, get_user_id
from ..models.activity_schema import (
    Activity,
    ActivityEstimate,
    ActivityInputUnion,
    ActivityListResponse,
)
from ..services.activity_log import build_activity
from ..services.co2 import estimate_activity_co2
from ..services.export import activities_to_csv
from ..services.store import InMemoryStore

router = APIRouter(prefix="/activities", tags=["activities"])

ActivityPayload = Annotated[ActivityInputUnion, Body(discriminator="category")]


@router.post("/estimate", response_model=ActivityEstimate)
def estimate(payload: ActivityPayload) -> ActivityEstimate:
    return estimate_activity_co2(payload)


@router.post("", response_model=Activity, status_code=201)
def log_activity(
    payload: ActivityPayload,
    user_id: str = Depends(get_user_id),
    store: InMemoryStore = Depends(get_store),
    now: datetime = Depends(get_now),
) -> Activity:
    return store.add_activity(user_id, build_activity(payload, now))


@router.get("", response_model=ActivityListResponse)
def list_activities(
    user_id: str = Depends(get_user_id),
    store: InMemoryStore = Depends(get_store),
) -> ActivityListResponse:
    activities = store.list_activities(user_id)
    return ActivityListResponse(
        activities=activities,
        totalCo2e=sum(a.co2e for a in activities),
    )


@router.get("/export")
def export_csv(
    user_id: str = Depends(get_user_id),
    store: InMemoryStore = Depends(get_store),
    now: datetime = Depends(get_now),
) -> Response:
    return Response(
        content=activities_to_csv(store.list_activities(user_id), now),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="ecotrack-activities.csv"'},
    )


@router.delete("/{activity_id}", status_code=204)
def delete_activity(
    activity_id: str,
    user_id: str = Depends(get_user_id),
    store: InMemoryStore = Depends(get_store),
) -> Response:
    if not store.delete_activity(user_id, activity_id):
        raise HTTPException(status_code=404, detail="Activity not found")
    return Response(status_code=204)


@router.delete("", status_code=204)
def clear_history(
    user_id: str = Depends(get_user_id),
    store: InMemoryStore = Depends(get_store),
) -> Response:
    store.clear_activities(user_id)
    return Response(status_code=204)
