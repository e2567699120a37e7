"""Human-readable explanations and handling advice."""

from spoilage_guard.domain.food import FoodInputData
from spoilage_guard.domain.models import SpoilageStatus
from spoilage_guard.services.guardrails import in_danger_zone

HIGH_RISK_THRESHOLD = 80
REFRIGERATE_ABOVE_C = 10.0


def build_reason(food: FoodInputData, status: SpoilageStatus, risk: float) -> str:
    """Explain the final status in terms of exposure time and temperature."""
    time_msg = f"{_format_number(food.hours_since_prep)}h exposure"
    temp_msg = f"at {_format_number(food.storage_temp)}°C"

    if status is SpoilageStatus.REJECT:
        if in_danger_zone(food):
            return f"High bacterial risk due to {time_msg} {temp_msg} (Danger Zone)."
        if risk > HIGH_RISK_THRESHOLD:
            return (
                "Predicted spoilage risk is critically high based on "
                "historical safety data."
            )
    if status is SpoilageStatus.CAUTION:
        return f"Approaching safety limits ({time_msg}). Quality may be compromised."
    return f"Conditions ({time_msg}, {temp_msg}) are within safe donation limits."


def build_handling_instruction(status: SpoilageStatus, temp: float) -> str:
    """Return handling advice for the final status."""
    if status is SpoilageStatus.SAFE:
        if temp > REFRIGERATE_ABOVE_C:
            return "Refrigerate immediately to maintain freshness."
        return "Keep chilled."
    if status is SpoilageStatus.CAUTION:
        return (
            "Check for smell/texture changes. Consume immediately or freeze. "
            "Do not re-store."
        )
    return "Do not consume or donate. Dispose of safely to prevent contamination."


def _format_number(value: float) -> str:
    """Render a number without a redundant trailing '.0'."""
    if value.is_integer():
        return str(int(value))
    return repr(value)
