"""Tests for topic weight strategies."""

import pytest

from app.services.scoring import LinearTopicWeights, SigmoidTopicWeights, get_weight_strategy


class TestStrategies:
    def test_linear_is_integral(self):
        strategy = LinearTopicWeights()
        assert strategy.integral
        assert strategy.weights([0, 50, 100]) == [1, 2, 3]

    def test_sigmoid_normalized(self):
        weights = SigmoidTopicWeights().weights([10, 70, 100])
        assert abs(sum(weights) / 3 - 1) < 1e-9
        assert weights[0] < weights[1] < weights[2]

    def test_sigmoid_equal_importance(self):
        assert SigmoidTopicWeights().weights([40, 40]) == pytest.approx([1.0, 1.0])


class TestLookup:
    def test_by_name(self):
        assert isinstance(get_weight_strategy("linear"), LinearTopicWeights)
        assert isinstance(get_weight_strategy("SIGMOID"), SigmoidTopicWeights)

    def test_unknown(self):
        with pytest.raises(ValueError):
            get_weight_strategy("cubic")
