"""Quiz API views - thin layer over services."""

from app.container import container
from app.models import ScoreBreakdown
from app.services.scoring import ScoringError
from web.api.errors import NotFoundError, as_validation_error, validate_answers, validate_theme_weights

from .schemas import (
    BreakdownItem,
    DualResultItem,
    ProgramResponse,
    ProgramResultItem,
    QuestionItem,
    QuestionResultItem,
    QuestionsResponse,
    QuizRequest,
    QuizResponse,
)


def _breakdown(b: ScoreBreakdown) -> BreakdownItem:
    return BreakdownItem(
        score=b.score,
        raw_score=b.raw_score,
        coverage=b.coverage,
        penalty=b.penalty,
        matches=b.matches,
        conflicts=b.conflicts,
        answered=b.answered,
    )


def get_questions() -> QuestionsResponse:
    """Get active quiz questions."""
    questions = container.quiz.questions()
    if not questions:
        raise NotFoundError("No active questions")
    items = [
        QuestionItem(id=q.id, statement=q.statement, category=q.category, description=q.description)
        for q in questions
    ]
    return QuestionsResponse(items=items)


def score_quiz(request: QuizRequest) -> QuizResponse:
    """Score answers against party programs and voting records."""
    validate_answers(request.answers)
    validate_theme_weights(request.theme_weights)
    try:
        data = container.quiz.score(request.answers, request.theme_weights)
    except ScoringError as e:
        raise as_validation_error(e) from e

    items = [
        DualResultItem(
            party=r.party.name,
            color=r.party.color,
            program=_breakdown(r.program),
            votes=_breakdown(r.votes),
            combined=r.combined,
            has_limited_voting_data=r.has_limited_voting_data,
        )
        for r in data["results"]
    ]

    return QuizResponse(items=items, has_voting_data=data["has_voting_data"], explanation=data["explanation"])


def score_program(request: QuizRequest) -> ProgramResponse:
    """Score answers against party programs only."""
    validate_answers(request.answers)
    validate_theme_weights(request.theme_weights)
    try:
        results = container.quiz.score_program_only(request.answers, request.theme_weights)
    except ScoringError as e:
        raise as_validation_error(e) from e

    items = [
        ProgramResultItem(
            party=r.party.name,
            color=r.party.color,
            percentage=r.percentage,
            matches=r.scores.matches,
            conflicts=r.scores.conflicts,
            is_reliable=r.reliability.is_reliable if r.reliability else False,
            questions=[
                QuestionResultItem(
                    statement_id=q.statement_id,
                    user_position=q.user_position,
                    party_position=q.party_position,
                    result=q.result,
                )
                for q in r.questions
            ],
        )
        for r in results
    ]

    return ProgramResponse(items=items)
