"""Escalation-only safety rules applied after prediction."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from spoilage_guard.domain.food import FoodInputData
from spoilage_guard.domain.models import SpoilageStatus

DANGER_ZONE_TEMP_C = 20.0
DANGER_ZONE_HOURS = 4.0

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Escalation:
    """Minimum status and risk demanded by a guardrail."""

    label: SpoilageStatus
    min_risk: float


class Guardrail(Protocol):
    """Interface for a post-prediction safety rule."""

    name: str

    def check(self, food: FoodInputData) -> Escalation | None:
        """Return an escalation when the rule fires."""


def in_danger_zone(food: FoodInputData) -> bool:
    """Return True when time and temperature are in the bacterial danger zone."""
    return (
        food.storage_temp > DANGER_ZONE_TEMP_C
        and food.hours_since_prep > DANGER_ZONE_HOURS
    )


@dataclass(frozen=True)
class DangerZoneGuardrail:
    """Reject cooked food left warm for too long."""

    name: str = "danger_zone"
    min_risk: float = 85.0

    def check(self, food: FoodInputData) -> Escalation | None:
        if food.is_cooked and in_danger_zone(food):
            return Escalation(label=SpoilageStatus.REJECT, min_risk=self.min_risk)
        return None


DEFAULT_GUARDRAILS: tuple[Guardrail, ...] = (DangerZoneGuardrail(),)


def apply_guardrails(
    food: FoodInputData,
    label: SpoilageStatus,
    risk: float,
    guardrails: Sequence[Guardrail] = DEFAULT_GUARDRAILS,
) -> tuple[SpoilageStatus, float]:
    """Escalate a prediction through each guardrail in order.

    A guardrail can raise the status severity and the risk floor but never
    lower either of them.
    """
    for guardrail in guardrails:
        escalation = guardrail.check(food)
        if escalation is None:
            continue
        if escalation.label.severity > label.severity:
            label = escalation.label
        risk = max(risk, escalation.min_risk)
        _logger.debug(
            "Guardrail %s fired: status=%s risk=%s",
            guardrail.name,
            label.value,
            risk,
        )
    return label, risk
