from pydantic import BaseModel, Field


class Coordinates(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class DistanceRequest(BaseModel):
    start: Coordinates
    end: Coordinates


class DistanceResponse(BaseModel):
    distance: float = Field(..., description="Driving distance in kilometers")
