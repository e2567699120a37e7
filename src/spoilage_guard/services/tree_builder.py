"""CART-style decision tree induction by Gini impurity."""

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from spoilage_guard.domain.models import SpoilageStatus, TrainingSample
from spoilage_guard.domain.tree import FEATURE_NAMES, Internal, Leaf, Node

MAX_DEPTH = 5
MIN_SAMPLES_SPLIT = 2


@dataclass(frozen=True)
class Split:
    """Best partition found for a set of samples."""

    feature_index: int
    threshold: float
    impurity: float
    left: list[TrainingSample]
    right: list[TrainingSample]


def gini(labels: Sequence[SpoilageStatus]) -> float:
    """Return the Gini impurity of a set of labels."""
    total = len(labels)
    impurity = 1.0
    for count in Counter(labels).values():
        probability = count / total
        impurity -= probability * probability
    return impurity


def majority_label(data: Sequence[TrainingSample]) -> SpoilageStatus:
    """Return the most frequent label, ties going to the lexically first name."""
    counts = Counter(sample.label for sample in data)
    return min(counts, key=lambda label: (-counts[label], label.value))


def find_best_split(data: Sequence[TrainingSample]) -> Split | None:
    """Return the split with the lowest weighted Gini, or None if none is valid.

    Candidate thresholds are the distinct feature values in order of first
    appearance. The first split found keeps exact ties.
    """
    best: Split | None = None
    for feature_index in range(len(FEATURE_NAMES)):
        values = [_feature_value(sample, feature_index) for sample in data]
        for threshold in dict.fromkeys(values):
            left = [s for s, v in zip(data, values, strict=True) if v <= threshold]
            right = [s for s, v in zip(data, values, strict=True) if v > threshold]
            if not left or not right:
                continue
            impurity = (
                len(left) * gini([s.label for s in left])
                + len(right) * gini([s.label for s in right])
            ) / len(data)
            if best is None or impurity < best.impurity:
                best = Split(feature_index, threshold, impurity, left, right)
    return best


def build_tree(
    data: Sequence[TrainingSample],
    depth: int = 0,
    *,
    max_depth: int = MAX_DEPTH,
    min_samples_split: int = MIN_SAMPLES_SPLIT,
) -> Node:
    """Recursively partition samples into a binary decision tree."""
    if not data:
        raise ValueError("Cannot build a tree from an empty dataset")

    labels = {sample.label for sample in data}
    if len(labels) == 1 or depth >= max_depth or len(data) < min_samples_split:
        return _leaf(data)

    split = find_best_split(data)
    if split is None:
        return _leaf(data)

    return Internal(
        feature_index=split.feature_index,
        threshold=split.threshold,
        left=build_tree(
            split.left,
            depth + 1,
            max_depth=max_depth,
            min_samples_split=min_samples_split,
        ),
        right=build_tree(
            split.right,
            depth + 1,
            max_depth=max_depth,
            min_samples_split=min_samples_split,
        ),
    )


def _leaf(data: Sequence[TrainingSample]) -> Leaf:
    avg_risk = sum(sample.risk_score for sample in data) / len(data)
    return Leaf(prediction=majority_label(data), avg_risk=avg_risk)


def _feature_value(sample: TrainingSample, feature_index: int) -> float:
    return getattr(sample, FEATURE_NAMES[feature_index])
