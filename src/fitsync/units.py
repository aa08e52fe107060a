"""Metric/imperial conversions for body measurements and distances."""

import math
from dataclasses import dataclass

from fitsync.domain.profile import UnitSystem

LB_PER_KG = 2.20462
CM_PER_INCH = 2.54
MILES_PER_KM = 0.621371
INCHES_PER_FOOT = 12


@dataclass(frozen=True)
class FeetInches:
    """Height split into whole feet and inches."""

    feet: int
    inches: int


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return math.floor(value + 0.5)


def kg_to_lb(kg: float) -> float:
    return kg * LB_PER_KG


def lb_to_kg(lb: float) -> float:
    return lb / LB_PER_KG


def cm_to_in(cm: float) -> float:
    return cm / CM_PER_INCH


def in_to_cm(inches: float) -> float:
    return inches * CM_PER_INCH


def km_to_miles(km: float) -> float:
    return km * MILES_PER_KM


def feet_inches_to_cm(feet: int, inches: int) -> int:
    """Convert feet and inches to whole centimetres."""
    total_inches = feet * INCHES_PER_FOOT + inches
    return round_half_up(total_inches * CM_PER_INCH)


def cm_to_feet_inches(cm: float) -> FeetInches:
    """Convert centimetres to feet and rounded inches."""
    total_inches = cm / CM_PER_INCH
    feet = math.floor(total_inches / INCHES_PER_FOOT)
    inches = round_half_up(total_inches % INCHES_PER_FOOT)
    if inches == INCHES_PER_FOOT:
        feet += 1
        inches = 0
    return FeetInches(feet=feet, inches=inches)


def parse_height(raw: str | None, unit_system: UnitSystem) -> float | None:
    """Parse a height form value.

    Metric values are centimetres. Imperial values are inches, either plain
    (``70``) or written as feet and inches (``5'10"``). Returns None for
    blank or unparseable input.
    """
    if raw is None:
        return None
    cleaned = raw.strip()
    if not cleaned:
        return None
    if unit_system is UnitSystem.IMPERIAL and "'" in cleaned:
        feet_raw, _, inches_raw = cleaned.partition("'")
        inches_raw = inches_raw.replace('"', "").strip()
        try:
            feet = int(feet_raw.strip() or 0)
            inches = int(inches_raw or 0)
        except ValueError:
            return None
        return float(feet * INCHES_PER_FOOT + inches)
    try:
        value = float(cleaned)
    except ValueError:
        return None
    if math.isnan(value) or value < 0:
        return None
    return value
