"""Topic weighting strategies - theme importance (0-100) to statement weights."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from helpers import formulas


class TopicWeightStrategy(ABC):
    """Turns the importance percentages of one scoring pass into weights."""

    name: str = ""
    # Whether weights are restricted to 1, 2 or 3
    integral: bool = False

    @abstractmethod
    def weight(self, percentage: float) -> float:
        """Raw weight for a single importance percentage."""

    def weights(self, percentages: Sequence[float]) -> list[float]:
        """Weights for all answered statements, in order."""
        return [self.weight(p) for p in percentages]


class LinearTopicWeights(TopicWeightStrategy):
    """v1: integer multiplier round(pct / 33.33) clamped to 1..3."""

    name = "linear"
    integral = True

    def weight(self, percentage: float) -> int:
        return formulas.topic_weight_linear(percentage)


class SigmoidTopicWeights(TopicWeightStrategy):
    """v2: sigmoid around 70% importance, normalized to mean 1 across the pass."""

    name = "sigmoid"

    def weight(self, percentage: float) -> float:
        return formulas.topic_weight_sigmoid(percentage)

    def weights(self, percentages: Sequence[float]) -> list[float]:
        return formulas.normalize_weights(super().weights(percentages))


STRATEGIES: dict[str, type[TopicWeightStrategy]] = {
    LinearTopicWeights.name: LinearTopicWeights,
    SigmoidTopicWeights.name: SigmoidTopicWeights,
}


def get_weight_strategy(name: str) -> TopicWeightStrategy:
    """Strategy by configured name."""
    try:
        return STRATEGIES[name.lower()]()
    except KeyError:
        raise ValueError(f"Unknown topic weight strategy {name!r}, expected one of {sorted(STRATEGIES)}") from None
