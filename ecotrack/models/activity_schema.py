from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter


class ActivityCategory(str, Enum):
    travel = "travel"
    food = "food"
    household = "household"
    waste = "waste"


class TravelActivityInput(BaseModel):
    category: Literal["travel"]
    date: Optional[datetime] = None
    fuelType: Optional[str] = Field(default=None, description="petrol, diesel, ev, train or flight")
    vehicleType: Optional[str] = Field(
        default=None, description="car, bike, bus, scooter, auto or truck; ignored for train/flight"
    )
    distance: Optional[float] = Field(
        default=None, ge=0, allow_inf_nan=False, description="Distance in kilometers"
    )


class FoodActivityInput(BaseModel):
    category: Literal["food"]
    date: Optional[datetime] = None
    cookingFuel: Optional[str] = Field(default=None, description="lpg or electricity")
    cookingDuration: Optional[float] = Field(
        default=None, ge=0, allow_inf_nan=False, description="Cooking time in hours"
    )


class HouseholdActivityInput(BaseModel):
    category: Literal["household"]
    date: Optional[datetime] = None
    appliance: Optional[str] = Field(
        default=None, description="electricity, ac, washing-machine, cooler or heater"
    )
    hoursUsed: Optional[float] = Field(
        default=None, ge=0, allow_inf_nan=False, description="Hours of use, or kWh for general electricity"
    )


class WasteActivityInput(BaseModel):
    category: Literal["waste"]
    date: Optional[datetime] = None
    wasteGenerated: Optional[float] = Field(
        default=None, ge=0, allow_inf_nan=False, description="Waste generated in kg"
    )
    wasteRecycled: Optional[float] = Field(
        default=None, ge=0, allow_inf_nan=False, description="Waste recycled in kg"
    )


ActivityInputUnion = Union[
    TravelActivityInput, FoodActivityInput, HouseholdActivityInput, WasteActivityInput
]

ActivityInput = Annotated[ActivityInputUnion, Field(discriminator="category")]

activity_input_adapter = TypeAdapter(ActivityInput)


class ActivityEstimate(BaseModel):
    description: str
    co2e: float = Field(..., description="Estimated emission in kilograms (kgCO2e)")


class Activity(BaseModel):
    id: str = Field(..., description="Unique activity identifier")
    date: datetime
    category: ActivityCategory
    description: str
    co2e: float = Field(..., description="Emission in kilograms (kgCO2e)")
    attributes: Dict[str, Any] = Field(
        default_factory=dict, description="Category-specific input fields as submitted"
    )


class ActivityListResponse(BaseModel):
    activities: List[Activity]
    totalCo2e: float
