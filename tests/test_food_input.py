"""Tests for caller input validation."""

import pytest
from pydantic import ValidationError

from spoilage_guard.domain.food import FoodInputData


def test_accepts_camel_case_payload() -> None:
    food = FoodInputData.model_validate(
        {
            "name": "Chicken Curry",
            "isCooked": True,
            "hoursSincePrep": 2,
            "storageTemp": 22,
            "quantity": "5 kg",
        }
    )

    assert food.is_cooked is True
    assert food.hours_since_prep == 2.0
    assert food.storage_temp == 22.0
    assert food.quantity == "5 kg"


def test_rejects_negative_hours() -> None:
    with pytest.raises(ValidationError):
        FoodInputData(
            name="Rice", is_cooked=True, hours_since_prep=-1.0, storage_temp=20.0
        )


def test_rejects_non_numeric_temperature() -> None:
    with pytest.raises(ValidationError):
        FoodInputData.model_validate(
            {
                "name": "Rice",
                "isCooked": True,
                "hoursSincePrep": 1,
                "storageTemp": "warm",
            }
        )
