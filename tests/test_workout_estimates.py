"""Tests for workout calorie estimates."""

import pytest

from fitsync.domain.diary import DistanceUnit, Intensity, WorkoutEstimate
from fitsync.domain.errors import InvalidAmountError
from fitsync.services.workouts import (
    estimate_by_distance,
    estimate_by_duration,
    per_mile_calories,
)


@pytest.mark.parametrize(
    ("intensity", "expected"),
    [(Intensity.LOW, 150), (Intensity.MODERATE, 240), (Intensity.HIGH, 360)],
)
def test_estimate_by_duration(intensity: Intensity, expected: int) -> None:
    assert estimate_by_duration(30, intensity) == WorkoutEstimate(
        calories_burned=expected, duration_minutes=30
    )


@pytest.mark.parametrize(
    ("exercise_type", "expected"),
    [
        ("Morning run", 100),
        ("Jogging", 100),
        ("Cycling", 60),
        ("Mountain biking", 60),
        ("Dog walk", 70),
        ("Rowing", 90),
    ],
)
def test_per_mile_calories_by_activity(exercise_type: str, expected: int) -> None:
    assert per_mile_calories(exercise_type, Intensity.MODERATE) == expected


def test_estimate_by_distance_in_miles() -> None:
    estimate = estimate_by_distance(
        "Running", 3, DistanceUnit.MILES, Intensity.HIGH
    )

    assert estimate == WorkoutEstimate(calories_burned=360, duration_minutes=30)


def test_estimate_by_distance_in_km() -> None:
    estimate = estimate_by_distance("Cycling", 10, DistanceUnit.KM, Intensity.LOW)

    assert estimate.calories_burned == 249
    assert estimate.duration_minutes == 60


def test_estimates_reject_negative_values() -> None:
    with pytest.raises(InvalidAmountError):
        estimate_by_duration(-10, Intensity.LOW)
    with pytest.raises(InvalidAmountError):
        estimate_by_distance("Walk", -1, DistanceUnit.MILES, Intensity.LOW)
