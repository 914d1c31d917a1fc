"""Coalition API views - thin layer over services."""

from app.container import container
from app.services.scoring import ScoringError
from web.api.errors import as_validation_error, validate_answers, validate_theme_weights
from web.api.quiz.schemas import QuizRequest

from .schemas import CoalitionChanceItem, CoalitionOptionItem, CoalitionsResponse


def get_coalition_chances(request: QuizRequest) -> CoalitionsResponse:
    """Score the answers, then estimate each party's coalition chances."""
    validate_answers(request.answers)
    validate_theme_weights(request.theme_weights)
    try:
        results = container.quiz.score(request.answers, request.theme_weights)["results"]
        chances = container.coalitions.chances(results)
    except ScoringError as e:
        raise as_validation_error(e) from e

    items = [
        CoalitionChanceItem(
            party=c.party_name,
            chance=c.chance_percentage,
            coalitions=[
                CoalitionOptionItem(partners=o.partners, seats=o.seats, probability=o.probability)
                for o in c.most_likely_coalitions
            ],
            explanation=c.explanation,
        )
        for c in chances
    ]

    return CoalitionsResponse(estimator=container.coalitions.estimator.name, items=items)
