"""Distance conversion helpers.

Plan distances are stored in the unit the plan was generated with
(``TrainingPlan.distance_unit``); these helpers convert and format them.
"""

import math

from runova.core.constants import KM_PER_MILE


def miles_to_km(miles: float) -> float:
    return miles * KM_PER_MILE


def km_to_miles(km: float) -> float:
    return km / KM_PER_MILE


def round_to_half(value: float) -> float:
    """Round to the nearest 0.5 to avoid odd decimals in the UI."""
    return math.floor(value * 2 + 0.5) / 2


def format_distance(distance: float | None, unit: str) -> str:
    """Format a distance already expressed in `unit`, e.g. '6.5 km'."""
    if distance is None:
        return "-"
    rounded = round_to_half(float(distance))
    return f"{rounded:g} {unit}"


def convert_distance(distance_mi: float, to_unit: str) -> float:
    """Convert a distance in miles to `to_unit`."""
    if to_unit == "km":
        return miles_to_km(distance_mi)
    return distance_mi


def convert_between(distance: float, from_unit: str, to_unit: str) -> float:
    """Convert between any two supported units."""
    if from_unit == to_unit:
        return distance
    distance_mi = km_to_miles(distance) if from_unit == "km" else distance
    return convert_distance(distance_mi, to_unit)
