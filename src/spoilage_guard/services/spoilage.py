"""Spoilage analysis service combining the tree with safety rules."""

import asyncio
import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from spoilage_guard.domain.food import FoodInputData
from spoilage_guard.domain.models import FoodAnalysisResult
from spoilage_guard.domain.tree import FeatureVector
from spoilage_guard.services.advice import build_handling_instruction, build_reason
from spoilage_guard.services.guardrails import (
    DEFAULT_GUARDRAILS,
    Guardrail,
    apply_guardrails,
)
from spoilage_guard.services.model import SpoilageModel
from spoilage_guard.services.shelf_life import remaining_safe_hours

_logger = logging.getLogger(__name__)


@dataclass
class SpoilageService:
    """Service that scores food items for donation safety."""

    model: SpoilageModel
    guardrails: Sequence[Guardrail] = DEFAULT_GUARDRAILS
    analysis_delay_seconds: float = 0.0
    debug: bool = False

    async def analyze(self, food: FoodInputData) -> FoodAnalysisResult:
        """Predict spoilage risk and build the full analysis for a food item."""
        if self.analysis_delay_seconds > 0:
            await asyncio.sleep(self.analysis_delay_seconds)

        vector = to_feature_vector(food)
        prediction = self.model.predict(vector)
        status, risk = apply_guardrails(
            food, prediction.label, _round_half_up(prediction.risk), self.guardrails
        )
        risk_score = min(100, max(0, _round_half_up(risk)))
        if self.debug:
            _logger.info(
                "Spoilage analysis: name=%s predicted=%s final=%s risk=%s",
                food.name,
                prediction.label.value,
                status.value,
                risk_score,
            )
        return FoodAnalysisResult(
            risk_score=risk_score,
            status=status,
            reason=build_reason(food, status, risk_score),
            handling_instruction=build_handling_instruction(
                status, food.storage_temp
            ),
            remaining_safe_hours=remaining_safe_hours(food, status),
        )


def to_feature_vector(food: FoodInputData) -> FeatureVector:
    """Convert caller input into the tree's numeric features."""
    return FeatureVector(
        is_cooked=1 if food.is_cooked else 0,
        hours=food.hours_since_prep,
        temp=food.storage_temp,
    )


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
