"""Static emission factors in kg CO2e per unit (km, hour, kWh or kg)."""

from types import MappingProxyType
from typing import Mapping, Optional

FIXED_MODE_FUELS = frozenset({"train", "flight"})

TRAVEL_FACTORS: Mapping[str, Mapping[str, float]] = MappingProxyType(
    {
        "petrol": MappingProxyType({"car": 0.192, "bike": 0.113, "scooter": 0.08, "auto": 0.1, "truck": 0.3}),
        "diesel": MappingProxyType({"car": 0.171, "bus": 0.027, "truck": 0.25}),
        "ev": MappingProxyType(
            {"car": 0.05, "bike": 0.01, "bus": 0.015, "scooter": 0.008, "auto": 0.012, "truck": 0.08}
        ),
    }
)

# per km, vehicle type does not apply
TRAVEL_MODE_FACTORS: Mapping[str, float] = MappingProxyType({"train": 0.041, "flight": 0.255})

AVERAGE_MEAL_EMISSION = 2.5

# per hour, one hour on an electric cooker counted as 1 kWh
COOKING_FACTORS: Mapping[str, float] = MappingProxyType({"lpg": 0.22, "electricity": 0.82})

# per hour of use
APPLIANCE_FACTORS: Mapping[str, float] = MappingProxyType(
    {"ac": 1.5, "washing-machine": 0.6, "cooler": 0.2, "heater": 2.0}
)

GENERAL_ELECTRICITY = "electricity"
ELECTRICITY_FACTOR = 0.82  # per kWh

WASTE_GENERATED_FACTOR = 0.5
WASTE_RECYCLED_FACTOR = -0.3


def _key(value: Optional[str]) -> str:
    return (value or "").strip().lower()


def travel_factor(fuel_type: Optional[str], vehicle_type: Optional[str] = None) -> float:
    fuel = _key(fuel_type)
    if fuel in TRAVEL_MODE_FACTORS:
        return TRAVEL_MODE_FACTORS[fuel]
    return TRAVEL_FACTORS.get(fuel, {}).get(_key(vehicle_type), 0.0)


def cooking_factor(cooking_fuel: Optional[str]) -> float:
    return COOKING_FACTORS.get(_key(cooking_fuel), 0.0)


def household_factor(appliance: Optional[str]) -> float:
    name = _key(appliance)
    if name == GENERAL_ELECTRICITY:
        return ELECTRICITY_FACTOR
    return APPLIANCE_FACTORS.get(name, 0.0)
