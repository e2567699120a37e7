"""Decision tree node types."""

from dataclasses import dataclass

from spoilage_guard.domain.models import SpoilageStatus

FEATURE_NAMES = ("is_cooked", "hours", "temp")


@dataclass(frozen=True)
class FeatureVector:
    """Numeric features fed to the tree."""

    is_cooked: int
    hours: float
    temp: float

    def value(self, feature_index: int) -> float:
        """Return the feature at the given index."""
        return getattr(self, FEATURE_NAMES[feature_index])


@dataclass(frozen=True)
class Leaf:
    """Terminal node holding a prediction."""

    prediction: SpoilageStatus
    avg_risk: float


@dataclass(frozen=True)
class Internal:
    """Branching node testing one feature against a threshold."""

    feature_index: int
    threshold: float
    left: "Node"
    right: "Node"


Node = Leaf | Internal


@dataclass(frozen=True)
class Prediction:
    """Label and risk resolved by walking the tree."""

    label: SpoilageStatus
    risk: float
