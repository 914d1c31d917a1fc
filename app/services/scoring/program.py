"""Program-only scoring - for parties without any voting-record data."""

from collections.abc import Sequence

import settings
from app.models import (
    PartyData,
    PartyResult,
    PenaltyForm,
    QuestionBreakdown,
    Reliability,
    ScoringParams,
    UserAnswer,
)
from app.services.scoring.position_set import DEFAULT_PARAMS, score_position_set
from app.services.scoring.validation import validate_stances, validate_user_answers


def calculate_party_program_score(
    party: PartyData,
    answers: Sequence[UserAnswer],
    params: ScoringParams = DEFAULT_PARAMS,
    total_questions: int | None = None,
) -> PartyResult:
    """Score one party's program with the quadratic coverage penalty."""
    details: list[QuestionBreakdown] = []
    scores = score_position_set(answers, party.program, params.with_penalty(PenaltyForm.QUADRATIC), details)

    total = total_questions if total_questions is not None else len(answers)
    reliability = Reliability(
        answered=scores.answered,
        total=total,
        is_reliable=scores.answered >= settings.MIN_RELIABLE_ANSWERS,
    )

    return PartyResult(
        party=party,
        percentage=scores.score,
        scores=scores,
        questions=details,
        reliability=reliability,
    )


def rank_program_results(results: Sequence[PartyResult]) -> list[PartyResult]:
    """Percentage descending, then matches minus conflicts."""
    return sorted(results, key=lambda r: (-r.percentage, -r.balance))


def calculate_program_results(
    parties: Sequence[PartyData],
    answers: Sequence[UserAnswer],
    params: ScoringParams = DEFAULT_PARAMS,
    total_questions: int | None = None,
    integer_weights: bool = True,
) -> list[PartyResult]:
    """Program-only results for every party, best match first."""
    answers = validate_user_answers(answers, integer_weights=integer_weights)
    for party in parties:
        validate_stances(party.program, f"{party.name} program")

    return rank_program_results(
        [calculate_party_program_score(p, answers, params, total_questions) for p in parties]
    )
