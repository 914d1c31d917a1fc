"""Tests for dual and program-only scoring."""

import pytest

from app.models import DualPartyResult, PartyData, PartyResult, ScoreBreakdown, StancePoint, UserAnswer
from app.services.scoring import (
    InvalidAnswerError,
    InvalidStanceError,
    calculate_all_dual_scores,
    calculate_party_dual_score,
    calculate_party_program_score,
    calculate_program_results,
    has_voting_data,
    rank_dual_results,
)
from app.services.scoring.program import rank_program_results


def party(name, program=(), votes=()):
    return PartyData(
        id=name.lower(),
        name=name,
        color="#000000",
        description="",
        program=[StancePoint(str(i), p) for i, p in enumerate(program, 1)],
        votes=[StancePoint(str(i), p) for i, p in enumerate(votes, 1)],
    )


def answers(*positions):
    return [UserAnswer(str(i), p) for i, p in enumerate(positions, 1)]


def dual(name, combined, program_score):
    return DualPartyResult(party(name), ScoreBreakdown(score=program_score), ScoreBreakdown(), combined, True)


class TestDualScore:
    def test_combined_blend(self):
        result = calculate_party_dual_score(party("A", program=(1,), votes=(-1,)), answers(1))
        assert result.program.score == 100
        assert result.votes.score == 0
        assert result.combined == 70

    def test_no_votes_is_limited(self):
        result = calculate_party_dual_score(party("A", program=(1,)), answers(1))
        assert result.votes.answered == 0
        assert result.has_limited_voting_data

    def test_full_voting_record(self):
        record = (1, -1) * 5
        result = calculate_party_dual_score(party("A", program=record, votes=record), answers(*record))
        assert not result.has_limited_voting_data
        assert result.combined == 100

    def test_neutral_voting_record_is_limited(self):
        record = (0,) * 10
        result = calculate_party_dual_score(party("A", votes=record), answers(*(1,) * 10))
        assert result.votes.coverage == 0.0
        assert result.has_limited_voting_data

    def test_combined_matches_formula(self):
        parties = [party("A", (1, 0, -1), (1, 1)), party("B", (0, 0, 1), (-1,)), party("C", (-1, -1, -1))]
        for r in calculate_all_dual_scores(parties, answers(1, 0, -1)):
            assert abs(r.combined - (0.7 * r.program.score + 0.3 * r.votes.score)) <= 1


class TestDualRanking:
    def test_tie_broken_by_program(self):
        ranked = rank_dual_results([dual("A", 70, 70), dual("B", 70, 100), dual("C", 80, 50)])
        assert [r.party.name for r in ranked] == ["C", "B", "A"]

    def test_all_sorted(self):
        parties = [party("A", (1, 1, 1)), party("B", (-1, -1, -1), (1, 1, 1)), party("C", (1, 0, -1), (1,))]
        results = calculate_all_dual_scores(parties, answers(1, 1, 1))
        keys = [(-r.combined, -r.program.score) for r in results]
        assert keys == sorted(keys)
        assert results[0].party.name == "A"

    def test_empty_answers(self):
        results = calculate_all_dual_scores([party("A", (1,), (1,))], [])
        assert results[0].combined == 0
        assert results[0].program == ScoreBreakdown()

    def test_has_voting_data(self):
        with_votes = calculate_all_dual_scores([party("A", (1,), (1,))], answers(1))
        without = calculate_all_dual_scores([party("A", (1,))], answers(1))
        assert has_voting_data(with_votes)
        assert not has_voting_data(without)


class TestDualValidation:
    def test_rejects_bad_answer(self):
        with pytest.raises(InvalidAnswerError):
            calculate_all_dual_scores([party("A", (1,))], [UserAnswer("1", 4)])

    def test_rejects_bad_stance(self):
        bad = PartyData("a", "A", "#000000", "", program=[StancePoint("1", 1), StancePoint("1", 0)])
        with pytest.raises(InvalidStanceError):
            calculate_all_dual_scores([bad], answers(1))

    def test_weight_outside_range_rejected_by_default(self):
        with pytest.raises(InvalidAnswerError):
            calculate_all_dual_scores([party("A", (1,))], [UserAnswer("1", 1, 7)])
        with pytest.raises(InvalidAnswerError):
            calculate_program_results([party("A", (1,))], [UserAnswer("1", 1, 7)])

    def test_fractional_weights_when_not_integral(self):
        results = calculate_all_dual_scores([party("A", (1,))], [UserAnswer("1", 1, 1.2)], integer_weights=False)
        assert results[0].program.score == 100


class TestProgramOnly:
    def test_quadratic_penalty(self):
        result = calculate_party_program_score(party("A", (0, 1)), answers(0, 1))
        assert result.scores.penalty == 3
        assert result.percentage == 77

    def test_question_breakdown(self):
        result = calculate_party_program_score(party("A", (1, -1)), answers(1, 1))
        assert [(q.statement_id, q.result) for q in result.questions] == [("1", "perfect_match"), ("2", "conflict")]

    def test_reliability(self):
        few = calculate_party_program_score(party("A", (1,) * 11), answers(*(1,) * 11), total_questions=25)
        enough = calculate_party_program_score(party("A", (1,) * 12), answers(*(1,) * 12), total_questions=25)
        assert not few.reliability.is_reliable
        assert enough.reliability.is_reliable
        assert (enough.reliability.answered, enough.reliability.total) == (12, 25)

    def test_ranking_balance_tiebreak(self):
        low = PartyResult(party("A"), 50, ScoreBreakdown(matches=1, conflicts=1))
        high = PartyResult(party("B"), 50, ScoreBreakdown(matches=3, conflicts=0))
        top = PartyResult(party("C"), 60, ScoreBreakdown())
        assert [r.party.name for r in rank_program_results([low, high, top])] == ["C", "B", "A"]

    def test_all_parties(self):
        results = calculate_program_results([party("A", (-1,)), party("B", (1,)), party("C")], answers(1))
        assert [r.party.name for r in results] == ["B", "C", "A"]
        assert results[-1].percentage == 0
