"""Trained spoilage tree and prediction walk."""

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from spoilage_guard.domain.models import SpoilageStatus, TrainingSample
from spoilage_guard.domain.tree import FeatureVector, Internal, Leaf, Node, Prediction
from spoilage_guard.services.tree_builder import (
    MAX_DEPTH,
    MIN_SAMPLES_SPLIT,
    build_tree,
)

FALLBACK_PREDICTION = Prediction(label=SpoilageStatus.CAUTION, risk=50.0)

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpoilageModel:
    """Read-only decision tree used for spoilage predictions."""

    root: Node | None

    @classmethod
    def train(
        cls,
        data: Sequence[TrainingSample],
        *,
        max_depth: int = MAX_DEPTH,
        min_samples_split: int = MIN_SAMPLES_SPLIT,
    ) -> "SpoilageModel":
        """Fit a tree on the given samples."""
        _logger.info("Training decision tree on %s samples", len(data))
        model = cls(
            build_tree(
                data, max_depth=max_depth, min_samples_split=min_samples_split
            )
        )
        _logger.info(
            "Training complete: depth=%s leaves=%s",
            model.depth(),
            sum(1 for _ in model.leaves()),
        )
        return model

    def predict(self, vector: FeatureVector) -> Prediction:
        """Walk the tree and return the resolved leaf's label and risk."""
        node = self.root
        while isinstance(node, Internal):
            if vector.value(node.feature_index) <= node.threshold:
                node = node.left
            else:
                node = node.right
        if node is None:
            return FALLBACK_PREDICTION
        return Prediction(label=node.prediction, risk=node.avg_risk)

    def depth(self) -> int:
        """Return the number of edges on the longest root-to-leaf path."""
        if self.root is None:
            return 0
        return _depth(self.root)

    def leaves(self) -> Iterator[Leaf]:
        """Yield leaves from left to right."""
        if self.root is None:
            return
        stack: list[Node] = [self.root]
        while stack:
            node = stack.pop()
            if isinstance(node, Leaf):
                yield node
            else:
                stack.append(node.right)
                stack.append(node.left)


def _depth(node: Node) -> int:
    if isinstance(node, Leaf):
        return 0
    return 1 + max(_depth(node.left), _depth(node.right))
