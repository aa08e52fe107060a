"""Rough calorie-burn estimates for workout logs."""

from fitsync.domain.diary import DistanceUnit, Intensity, WorkoutEstimate
from fitsync.services.balance import validate_amount
from fitsync.units import km_to_miles, round_half_up

CALORIES_PER_MINUTE = {
    Intensity.LOW: 5,
    Intensity.MODERATE: 8,
    Intensity.HIGH: 12,
}

# (keywords, per-mile burn by intensity), first keyword match wins
_PER_MILE_BY_ACTIVITY: list[tuple[tuple[str, ...], dict[Intensity, int]]] = [
    (
        ("run", "jog"),
        {Intensity.LOW: 80, Intensity.MODERATE: 100, Intensity.HIGH: 120},
    ),
    (
        ("cycl", "bik"),
        {Intensity.LOW: 40, Intensity.MODERATE: 60, Intensity.HIGH: 80},
    ),
    (
        ("walk",),
        {Intensity.LOW: 60, Intensity.MODERATE: 70, Intensity.HIGH: 80},
    ),
]
_DEFAULT_PER_MILE = {Intensity.LOW: 70, Intensity.MODERATE: 90, Intensity.HIGH: 110}

# Assumed pace when only a distance is logged
_MINUTES_PER_UNIT = {DistanceUnit.MILES: 10, DistanceUnit.KM: 6}


def estimate_by_duration(minutes: float, intensity: Intensity) -> WorkoutEstimate:
    """Estimate burn from workout length."""
    minutes = validate_amount(minutes, "duration_minutes")
    return WorkoutEstimate(
        calories_burned=round_half_up(minutes * CALORIES_PER_MINUTE[intensity]),
        duration_minutes=round_half_up(minutes),
    )


def estimate_by_distance(
    exercise_type: str,
    distance: float,
    unit: DistanceUnit,
    intensity: Intensity,
) -> WorkoutEstimate:
    """Estimate burn from distance covered for the given kind of exercise."""
    distance = validate_amount(distance, "distance")
    miles = km_to_miles(distance) if unit is DistanceUnit.KM else distance
    per_mile = per_mile_calories(exercise_type, intensity)
    return WorkoutEstimate(
        calories_burned=round_half_up(miles * per_mile),
        duration_minutes=round_half_up(distance * _MINUTES_PER_UNIT[unit]),
    )


def per_mile_calories(exercise_type: str, intensity: Intensity) -> int:
    """Return the per-mile burn for an exercise description."""
    lowered = exercise_type.lower()
    for keywords, table in _PER_MILE_BY_ACTIVITY:
        if any(keyword in lowered for keyword in keywords):
            return table[intensity]
    return _DEFAULT_PER_MILE[intensity]
