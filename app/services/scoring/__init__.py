"""Scoring engine - compatibility, weighting, position-set and dual scoring."""

from app.services.scoring.dual import (
    SCORING_EXPLANATION,
    calculate_all_dual_scores,
    calculate_party_dual_score,
    has_voting_data,
    rank_dual_results,
)
from app.services.scoring.errors import InvalidAnswerError, InvalidStanceError, ScoringError, TooManyPartiesError
from app.services.scoring.position_set import score_position_set
from app.services.scoring.program import calculate_party_program_score, calculate_program_results
from app.services.scoring.validation import (
    filter_user_answers,
    parse_answer,
    validate_stances,
    validate_user_answers,
)
from app.services.scoring.weights import (
    STRATEGIES,
    LinearTopicWeights,
    SigmoidTopicWeights,
    TopicWeightStrategy,
    get_weight_strategy,
)

__all__ = [
    "SCORING_EXPLANATION",
    "calculate_all_dual_scores",
    "calculate_party_dual_score",
    "calculate_party_program_score",
    "calculate_program_results",
    "has_voting_data",
    "rank_dual_results",
    "score_position_set",
    # Validation
    "filter_user_answers",
    "parse_answer",
    "validate_stances",
    "validate_user_answers",
    # Weights
    "STRATEGIES",
    "LinearTopicWeights",
    "SigmoidTopicWeights",
    "TopicWeightStrategy",
    "get_weight_strategy",
    # Errors
    "InvalidAnswerError",
    "InvalidStanceError",
    "ScoringError",
    "TooManyPartiesError",
]
