from typing import Callable, Dict, Optional

from ..models.activity_schema import (
    ActivityCategory,
    ActivityEstimate,
    ActivityInputUnion,
    FoodActivityInput,
    HouseholdActivityInput,
    TravelActivityInput,
    WasteActivityInput,
)
from . import emission_factors as factors


def _amount(value: Optional[float]) -> float:
    return float(value or 0)


def format_quantity(value: float) -> str:
    """Render 50.0 as "50" and 2.5 as "2.5"."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def estimate_travel_co2(activity: TravelActivityInput) -> ActivityEstimate:
    """Distance times the fuel/vehicle factor; train and flight use a mode-level factor."""
    distance = _amount(activity.distance)
    fuel = (activity.fuelType or "").strip().lower()

    if fuel in factors.FIXED_MODE_FUELS:
        label = fuel
    else:
        label = activity.vehicleType or "vehicle"

    co2 = distance * factors.travel_factor(activity.fuelType, activity.vehicleType)
    return ActivityEstimate(
        description=f"Travel by {label} for {format_quantity(distance)} km",
        co2e=co2,
    )


def estimate_food_co2(activity: FoodActivityInput) -> ActivityEstimate:
    """Flat per-meal emission plus cooking energy."""
    hours = _amount(activity.cookingDuration)
    co2 = factors.AVERAGE_MEAL_EMISSION
    description = "Logged a food activity"

    if activity.cookingFuel and hours > 0:
        description = f"Cooked for {format_quantity(hours)}h using {activity.cookingFuel}"
        co2 += hours * factors.cooking_factor(activity.cookingFuel)

    return ActivityEstimate(description=description, co2e=co2)


def estimate_household_co2(activity: HouseholdActivityInput) -> ActivityEstimate:
    """General electricity is metered in kWh; appliances in hours of use."""
    amount = _amount(activity.hoursUsed)
    appliance = (activity.appliance or "").strip().lower()

    if appliance == factors.GENERAL_ELECTRICITY:
        description = f"Used electricity for {format_quantity(amount)} kWh"
    else:
        label = (activity.appliance or "appliance").replace("-", " ")
        description = f"Used {label} for {format_quantity(amount)} hours"

    return ActivityEstimate(
        description=description,
        co2e=amount * factors.household_factor(activity.appliance),
    )


def estimate_waste_co2(activity: WasteActivityInput) -> ActivityEstimate:
    """Recycling is a credit, so the result can go below zero."""
    generated = _amount(activity.wasteGenerated)
    recycled = _amount(activity.wasteRecycled)
    co2 = generated * factors.WASTE_GENERATED_FACTOR + recycled * factors.WASTE_RECYCLED_FACTOR

    return ActivityEstimate(
        description=(
            f"Generated {format_quantity(generated)}kg of waste, "
            f"recycled {format_quantity(recycled)}kg"
        ),
        co2e=co2,
    )


_ESTIMATORS: Dict[ActivityCategory, Callable[..., ActivityEstimate]] = {
    ActivityCategory.travel: estimate_travel_co2,
    ActivityCategory.food: estimate_food_co2,
    ActivityCategory.household: estimate_household_co2,
    ActivityCategory.waste: estimate_waste_co2,
}


def estimate_activity_co2(activity: ActivityInputUnion) -> ActivityEstimate:
    return _ESTIMATORS[ActivityCategory(activity.category)](activity)
