from fastapi import APIRouter

from ..models.distance_schema import DistanceRequest, DistanceResponse
from ..services.distance import lookup_distance

router = APIRouter(prefix="/tools", tags=["tools"])


@router.post("/distance", response_model=DistanceResponse)
async def distance(payload: DistanceRequest) -> DistanceResponse:
    return await lookup_distance(payload)
