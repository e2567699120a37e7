"""Tests for reason and handling text."""

from spoilage_guard.domain.models import SpoilageStatus
from spoilage_guard.services.advice import build_handling_instruction, build_reason
from tests.conftest import make_food


def test_reject_reason_in_danger_zone() -> None:
    food = make_food(is_cooked=True, hours=4.5, temp=25.0)

    reason = build_reason(food, SpoilageStatus.REJECT, 86)

    assert reason == "High bacterial risk due to 4.5h exposure at 25°C (Danger Zone)."


def test_reject_reason_for_high_predicted_risk() -> None:
    food = make_food(is_cooked=False, hours=5.0, temp=20.0)

    reason = build_reason(food, SpoilageStatus.REJECT, 86)

    assert reason == (
        "Predicted spoilage risk is critically high based on historical safety data."
    )


def test_reject_reason_for_moderate_risk_reports_conditions() -> None:
    food = make_food(is_cooked=False, hours=2.0, temp=18.0)

    reason = build_reason(food, SpoilageStatus.REJECT, 70)

    assert reason == (
        "Conditions (2h exposure, at 18°C) are within safe donation limits."
    )


def test_caution_reason_mentions_exposure() -> None:
    food = make_food(is_cooked=False, hours=1.0, temp=30.0)

    reason = build_reason(food, SpoilageStatus.CAUTION, 53)

    assert reason == (
        "Approaching safety limits (1h exposure). Quality may be compromised."
    )


def test_safe_reason_mentions_conditions() -> None:
    food = make_food(is_cooked=True, hours=0.5, temp=-5.0)

    reason = build_reason(food, SpoilageStatus.SAFE, 0)

    assert reason == (
        "Conditions (0.5h exposure, at -5°C) are within safe donation limits."
    )


def test_handling_for_safe_depends_on_temperature() -> None:
    assert (
        build_handling_instruction(SpoilageStatus.SAFE, 25.0)
        == "Refrigerate immediately to maintain freshness."
    )
    assert build_handling_instruction(SpoilageStatus.SAFE, 10.0) == "Keep chilled."


def test_handling_for_caution_and_reject() -> None:
    caution = build_handling_instruction(SpoilageStatus.CAUTION, 4.0)
    reject = build_handling_instruction(SpoilageStatus.REJECT, 4.0)

    assert caution.startswith("Check for smell/texture changes.")
    assert "freeze" in caution
    assert reject == (
        "Do not consume or donate. Dispose of safely to prevent contamination."
    )


def test_reason_keeps_full_precision_of_inputs() -> None:
    food = make_food(is_cooked=False, hours=1234567.0, temp=4.123456789)

    reason = build_reason(food, SpoilageStatus.SAFE, 10)

    assert reason == (
        "Conditions (1234567h exposure, at 4.123456789°C) "
        "are within safe donation limits."
    )


def test_reason_drops_only_trailing_zero() -> None:
    food = make_food(is_cooked=True, hours=12.25, temp=-3.0)

    reason = build_reason(food, SpoilageStatus.CAUTION, 55)

    assert reason == (
        "Approaching safety limits (12.25h exposure). Quality may be compromised."
    )
