"""Position-set scorer - one party against one stance-set."""

from collections.abc import Iterable

from app.models import PenaltyForm, QuestionBreakdown, ScoreBreakdown, ScoringParams, StancePoint, UserAnswer
from helpers import formulas

DEFAULT_PARAMS = ScoringParams()


def resolve_position(stance: StancePoint, params: ScoringParams) -> tuple[int, bool]:
    """Party position to score with, fused with its AI signal when enabled."""
    if params.ai_fuse and stance.ai is not None:
        return formulas.fuse_stance(stance.position, stance.ai.stance, stance.ai.confidence, params.ai_min_confidence)
    return stance.position, False


def score_position_set(
    answers: Iterable[UserAnswer],
    stances: Iterable[StancePoint],
    params: ScoringParams = DEFAULT_PARAMS,
    details: list[QuestionBreakdown] | None = None,
) -> ScoreBreakdown:
    """Weighted compatibility of the answers with one stance-set.

    Answers whose statement the party never took a stance on are skipped entirely.
    Coverage is the weighted share of compared statements where the party is not neutral;
    low coverage lowers the score by ``lambda * (1 - coverage)`` (or its square).
    When ``details`` is given, one QuestionBreakdown per compared statement is appended.
    """
    by_statement = {s.statement_id: s for s in stances}

    numerator = denominator = covered = 0.0
    counts = dict.fromkeys(
        (formulas.PERFECT_MATCH, formulas.CONFLICT, formulas.NEUTRAL_ALIGNMENT, formulas.PARTIAL_MATCH), 0
    )
    answered = fused = 0

    for answer in answers:
        stance = by_statement.get(answer.statement_id)
        if stance is None:
            continue

        party_pos, was_fused = resolve_position(stance, params)
        g = formulas.compatibility(
            answer.position,
            party_pos,
            answer.importance,
            params.a,
            params.b,
            params.soft_conflict,
            params.soft_floor,
        )

        numerator += answer.weight * g
        denominator += answer.weight
        if party_pos != 0:
            covered += answer.weight

        result = formulas.alignment(answer.position, party_pos)
        counts[result] += 1
        answered += 1
        fused += was_fused

        if details is not None:
            details.append(QuestionBreakdown(answer.statement_id, answer.position, party_pos, result))

    if denominator <= 0:
        return ScoreBreakdown()

    raw = numerator / denominator
    coverage = covered / denominator
    penalty = formulas.coverage_penalty(
        params.penalty_lambda, coverage, quadratic=params.penalty == PenaltyForm.QUADRATIC
    )
    final = formulas.clamp(raw - penalty)

    return ScoreBreakdown(
        score=formulas.round_half_up(final * 100),
        raw_score=formulas.round_half_up(raw * 100),
        coverage=coverage,
        penalty=formulas.round_half_up(penalty * 100),
        matches=counts[formulas.PERFECT_MATCH],
        conflicts=counts[formulas.CONFLICT],
        neutral_align=counts[formulas.NEUTRAL_ALIGNMENT],
        partial_align=counts[formulas.PARTIAL_MATCH],
        answered=answered,
        fused=fused,
    )
