"""Dual-score combiner - program stances and voting record, blended 70/30."""

from collections.abc import Sequence

from app.models import DualPartyResult, PartyData, ScoringParams, UserAnswer
from app.services.scoring.position_set import DEFAULT_PARAMS, score_position_set
from app.services.scoring.validation import validate_stances, validate_user_answers
from helpers import formulas

# A voting record this thin (or this neutral) is flagged in the results
MIN_VOTES = 10
MIN_VOTES_COVERAGE = 0.3

SCORING_EXPLANATION = (
    "Each party gets two scores. The program score compares your answers with what the party "
    "wrote in its election program. The practice score looks at how the party actually voted in "
    "parliament on motions that match the statements.\n\n"
    "Neutral answers and missing positions count, but less than clear agreement or disagreement. "
    "When little information is available (low coverage) the score is lowered slightly.\n\n"
    "The combined score weighs the program for 70% and the voting record for 30%."
)


def calculate_party_dual_score(
    party: PartyData, answers: Sequence[UserAnswer], params: ScoringParams = DEFAULT_PARAMS
) -> DualPartyResult:
    """Score one party against its program and its voting record."""
    program = score_position_set(answers, party.program, params)
    votes = score_position_set(answers, party.votes, params)

    return DualPartyResult(
        party=party,
        program=program,
        votes=votes,
        combined=formulas.combined_score(program.score, votes.score),
        has_limited_voting_data=len(party.votes) < MIN_VOTES or votes.coverage < MIN_VOTES_COVERAGE,
    )


def rank_dual_results(results: Sequence[DualPartyResult]) -> list[DualPartyResult]:
    """Combined score descending, program score breaks ties."""
    return sorted(results, key=lambda r: (-r.combined, -r.program.score))


def calculate_all_dual_scores(
    parties: Sequence[PartyData],
    answers: Sequence[UserAnswer],
    params: ScoringParams = DEFAULT_PARAMS,
    integer_weights: bool = True,
) -> list[DualPartyResult]:
    """Dual scores for every party, best match first.

    Answers and stance-sets are validated up front; malformed input raises
    before any party is scored.
    """
    answers = validate_user_answers(answers, integer_weights=integer_weights)
    for party in parties:
        validate_stances(party.program, f"{party.name} program")
        validate_stances(party.votes, f"{party.name} votes")

    return rank_dual_results([calculate_party_dual_score(p, answers, params) for p in parties])


def has_voting_data(results: Sequence[DualPartyResult]) -> bool:
    """Whether any party's voting record overlapped with the answers."""
    return any(r.votes.answered > 0 for r in results)
