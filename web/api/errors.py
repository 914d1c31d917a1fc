"""API errors and validation helpers."""

from collections.abc import Mapping

from app.services.scoring import ScoringError
from app.services.scoring.validation import ANSWER_POSITIONS


class NotFoundError(Exception):
    """Resource not found."""

    def __init__(self, message: str = "Resource not found"):
        self.message = message
        super().__init__(self.message)


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


# Theme importance slider range
MIN_IMPORTANCE = 0
MAX_IMPORTANCE = 100


def validate_theme_weights(theme_weights: Mapping[str, float]) -> None:
    """Validate every theme importance is in slider range."""
    for theme, value in theme_weights.items():
        if not MIN_IMPORTANCE <= value <= MAX_IMPORTANCE:
            raise ValidationError(
                f"Invalid importance for {theme!r}: {value}. Must be between {MIN_IMPORTANCE} and {MAX_IMPORTANCE}"
            )


def validate_answers(answers: Mapping[str, str]) -> None:
    """Validate answer strings before any scoring."""
    for qid, value in answers.items():
        if not isinstance(value, str) or value.strip().lower() not in ANSWER_POSITIONS:
            raise ValidationError(f"Invalid answer for question {qid}: {value!r}. Must be one of {sorted(ANSWER_POSITIONS)}")


def validate_question(question: str) -> str:
    """Validate a free-text question is not blank."""
    question = question.strip()
    if not question:
        raise ValidationError("Question must not be empty")
    return question


def as_validation_error(e: ScoringError) -> ValidationError:
    return ValidationError(e.message)
