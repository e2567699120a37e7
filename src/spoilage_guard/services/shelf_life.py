"""Remaining safe time estimates."""

from datetime import datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal

from spoilage_guard.domain.food import FoodInputData
from spoilage_guard.domain.models import FoodAnalysisResult, SpoilageStatus

FRIDGE_MAX_C = 5.0
COOL_MAX_C = 15.0
ROOM_MAX_C = 30.0

FRIDGE_WINDOW_HOURS = 72.0
COOL_WINDOW_HOURS = 12.0
ROOM_WINDOW_HOURS = 4.0
HOT_WINDOW_HOURS = 2.0

FALLBACK_PICKUP_HOURS = 2.0


def max_safe_window(temp: float) -> float:
    """Return the maximum safe holding time for a storage temperature."""
    if temp < FRIDGE_MAX_C:
        return FRIDGE_WINDOW_HOURS
    if temp < COOL_MAX_C:
        return COOL_WINDOW_HOURS
    if temp <= ROOM_MAX_C:
        return ROOM_WINDOW_HOURS
    return HOT_WINDOW_HOURS


def remaining_safe_hours(food: FoodInputData, status: SpoilageStatus) -> float:
    """Estimate hours left before the food becomes unsafe."""
    if status is SpoilageStatus.REJECT:
        return 0.0
    remaining = max(0.0, max_safe_window(food.storage_temp) - food.hours_since_prep)
    return float(Decimal(remaining).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def donation_expires_at(result: FoodAnalysisResult, now: datetime) -> datetime:
    """Return the pickup deadline for a donation listed at ``now``.

    Items with no safe time left still get a short fallback window.
    """
    hours = result.remaining_safe_hours
    if hours <= 0:
        hours = FALLBACK_PICKUP_HOURS
    return now + timedelta(hours=hours)
