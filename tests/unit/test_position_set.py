"""Tests for the position-set scorer."""

from app.models import AiSignal, PenaltyForm, ScoringParams, StancePoint, UserAnswer
from app.services.scoring import score_position_set


def stances(*positions):
    return [StancePoint(str(i), p) for i, p in enumerate(positions, 1)]


def answers(*positions, weight=1, importance=1.0):
    return [UserAnswer(str(i), p, weight, importance) for i, p in enumerate(positions, 1)]


class TestScenarios:
    def test_single_match(self):
        result = score_position_set(answers(1), stances(1))
        assert (result.raw_score, result.coverage, result.penalty, result.score) == (100, 1.0, 0, 100)
        assert (result.matches, result.conflicts, result.neutral_align, result.partial_align) == (1, 0, 0, 0)

    def test_user_neutral_party_agrees(self):
        result = score_position_set(answers(0), stances(1))
        assert (result.raw_score, result.coverage, result.penalty, result.score) == (30, 1.0, 0, 30)
        assert result.partial_align == 1

    def test_both_neutral(self):
        result = score_position_set(answers(0), stances(0))
        assert result.raw_score == 60
        assert result.coverage == 0.0
        assert result.penalty == 12
        assert result.score == 48
        assert result.neutral_align == 1


class TestEdgeCases:
    def test_no_answers(self):
        result = score_position_set([], stances(1, -1))
        assert (result.score, result.coverage, result.answered) == (0, 0.0, 0)

    def test_no_stances(self):
        result = score_position_set(answers(1, -1), [])
        assert (result.score, result.coverage, result.answered) == (0, 0.0, 0)

    def test_missing_stance_is_skipped(self):
        result = score_position_set(answers(1, -1), stances(1))
        assert result.answered == 1
        assert result.score == 100

    def test_deterministic(self):
        args = (answers(1, 0, -1, 1), stances(1, 1, 0, -1))
        assert score_position_set(*args) == score_position_set(*args)


class TestProperties:
    def test_full_agreement(self):
        result = score_position_set(answers(1, -1, 1, -1), stances(1, -1, 1, -1))
        assert result.penalty == 0
        assert result.score == 100

    def test_full_conflict(self):
        result = score_position_set(answers(1, -1, 1), stances(-1, 1, -1))
        assert result.raw_score == 0
        assert result.score == 0
        assert result.conflicts == 3

    def test_bounds(self):
        for user in ((1, 0, -1), (0, 0, 0), (-1, -1, 1)):
            for party in ((0, 0, 0), (1, -1, 0), (-1, -1, -1)):
                result = score_position_set(answers(*user), stances(*party))
                assert 0 <= result.score <= 100
                assert 0 <= result.raw_score <= 100
                assert 0 <= result.coverage <= 1
                assert 0 <= result.penalty <= 100

    def test_raw_score_grows_with_a(self):
        pairs = (answers(0, 1, 0), stances(1, 0, -1))
        low = score_position_set(*pairs, ScoringParams(a=0.2))
        high = score_position_set(*pairs, ScoringParams(a=0.4))
        assert low.raw_score <= high.raw_score


class TestWeighting:
    def test_weighted_mean(self):
        user = [UserAnswer("1", 1, 3), UserAnswer("2", -1, 1)]
        result = score_position_set(user, stances(1, 1))
        assert result.raw_score == 75
        assert result.score == 75

    def test_linear_penalty(self):
        result = score_position_set(answers(0, 1), stances(0, 1))
        assert result.coverage == 0.5
        assert result.raw_score == 80
        assert result.penalty == 6
        assert result.score == 74

    def test_quadratic_penalty(self):
        params = ScoringParams().with_penalty(PenaltyForm.QUADRATIC)
        result = score_position_set(answers(0, 1), stances(0, 1), params)
        assert result.penalty == 3
        assert result.score == 77

    def test_soft_conflict(self):
        params = ScoringParams(soft_conflict=True)
        assert score_position_set(answers(1, importance=0.5), stances(-1), params).raw_score == 12
        assert score_position_set(answers(1, importance=0.9), stances(-1), params).raw_score == 0


class TestAiFusion:
    def test_fusion_disabled_by_default(self):
        party = [StancePoint("1", 0, ai=AiSignal(1, 0.95))]
        result = score_position_set(answers(1), party)
        assert result.partial_align == 1
        assert result.fused == 0

    def test_confident_signal_fused(self):
        party = [StancePoint("1", 0, ai=AiSignal(1, 0.95))]
        result = score_position_set(answers(1), party, ScoringParams(ai_fuse=True))
        assert result.matches == 1
        assert result.fused == 1

    def test_unconfident_signal_ignored(self):
        party = [StancePoint("1", 0, ai=AiSignal(1, 0.6))]
        result = score_position_set(answers(1), party, ScoringParams(ai_fuse=True))
        assert result.partial_align == 1
        assert result.fused == 0


class TestDetails:
    def test_one_row_per_compared_statement(self):
        details = []
        score_position_set(answers(1, 0, -1), stances(1, -1), details=details)
        assert [(d.statement_id, d.result) for d in details] == [("1", "perfect_match"), ("2", "partial_match")]
