"""Models for caller-supplied food details."""

from pydantic import BaseModel, ConfigDict, Field


class FoodInputData(BaseModel):
    """Food item submitted for a spoilage check."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    is_cooked: bool = Field(alias="isCooked")
    hours_since_prep: float = Field(alias="hoursSincePrep", ge=0.0)
    storage_temp: float = Field(alias="storageTemp")
    quantity: str | None = None
