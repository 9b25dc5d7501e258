import logging

import httpx
from fastapi import HTTPException

from ..models.distance_schema import DistanceRequest, DistanceResponse
from ..settings import settings

logger = logging.getLogger(__name__)


async def lookup_distance(payload: DistanceRequest) -> DistanceResponse:
    """Driving distance between two points via the Google Distance Matrix API."""
    if not settings.google_maps_api_key:
        raise HTTPException(status_code=500, detail="API key is missing")

    params = {
        "origins": f"{payload.start.latitude},{payload.start.longitude}",
        "destinations": f"{payload.end.latitude},{payload.end.longitude}",
        "key": settings.google_maps_api_key,
    }

    try:
        async with httpx.AsyncClient(timeout=settings.http_timeout_seconds) as client:
            response = await client.get(settings.google_maps_distance_url, params=params)
        data = response.json()
    except Exception as exc:
        logger.exception("Distance lookup failed: %s", exc)
        raise HTTPException(status_code=500, detail="Failed to fetch distance data")

    rows = data.get("rows") if isinstance(data, dict) else None
    elements = rows[0].get("elements") if rows else None
    if not elements:
        logger.error("Unexpected Distance Matrix payload: %s", data)
        raise HTTPException(status_code=500, detail="Invalid response from Google Maps API")

    element = elements[0]
    if element.get("status") != "OK":
        raise HTTPException(status_code=400, detail="Could not calculate the distance")

    try:
        meters = float(element["distance"]["value"])
    except (KeyError, TypeError, ValueError):
        logger.exception("Distance Matrix element missing distance: %s", element)
        raise HTTPException(status_code=500, detail="Invalid response from Google Maps API")

    return DistanceResponse(distance=meters / 1000)
