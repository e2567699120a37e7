"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from spoilage_guard.config import Settings
from spoilage_guard.domain.food import FoodInputData
from spoilage_guard.domain.models import SpoilageStatus
from spoilage_guard.services.dataset import DATASET
from spoilage_guard.services.guardrails import Escalation, Guardrail
from spoilage_guard.services.model import SpoilageModel
from spoilage_guard.services.spoilage import SpoilageService


def make_food(
    *, is_cooked: bool, hours: float, temp: float, name: str = "Rice"
) -> FoodInputData:
    return FoodInputData(
        name=name,
        is_cooked=is_cooked,
        hours_since_prep=hours,
        storage_temp=temp,
    )


@dataclass
class FixedGuardrail(Guardrail):
    """Guardrail that always proposes the same escalation and records calls."""

    escalation: Escalation | None
    name: str = "fixed"
    calls: list[str] = field(default_factory=list)

    def check(self, food: FoodInputData) -> Escalation | None:
        self.calls.append(food.name)
        return self.escalation


@pytest.fixture
def settings() -> Settings:
    return Settings(
        tree_max_depth=5,
        tree_min_samples_split=2,
        analysis_delay_seconds=0.0,
        debug=False,
    )


@pytest.fixture(scope="session")
def model() -> SpoilageModel:
    return SpoilageModel.train(DATASET)


@pytest.fixture
def service(model: SpoilageModel) -> SpoilageService:
    return SpoilageService(model=model)


@pytest.fixture
def reject_guardrail() -> FixedGuardrail:
    return FixedGuardrail(
        escalation=Escalation(label=SpoilageStatus.REJECT, min_risk=99.0)
    )
