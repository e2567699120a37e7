"""Domain models for spoilage analysis."""

from dataclasses import dataclass
from enum import Enum


class SpoilageStatus(str, Enum):
    """Safety classification of a food item."""

    SAFE = "SAFE"
    CAUTION = "CAUTION"
    REJECT = "REJECT"

    @property
    def severity(self) -> int:
        """Return the rank of the status, higher meaning riskier."""
        return _SEVERITY[self]


_SEVERITY = {
    SpoilageStatus.SAFE: 0,
    SpoilageStatus.CAUTION: 1,
    SpoilageStatus.REJECT: 2,
}


@dataclass(frozen=True)
class TrainingSample:
    """Labeled example used to fit the spoilage tree."""

    is_cooked: int
    hours: float
    temp: float
    label: SpoilageStatus
    risk_score: int


@dataclass(frozen=True)
class FoodAnalysisResult:
    """Outcome of a spoilage analysis."""

    risk_score: int
    status: SpoilageStatus
    reason: str
    handling_instruction: str
    remaining_safe_hours: float

    def to_dict(self) -> dict[str, object]:
        """Return the result using its external field names."""
        return {
            "risk_score": self.risk_score,
            "status": self.status.value,
            "reason": self.reason,
            "handling_instruction": self.handling_instruction,
            "remaining_safe_hours": self.remaining_safe_hours,
        }
