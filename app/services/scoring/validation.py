"""Boundary validation for answers and stance-sets."""

from collections.abc import Iterable
from dataclasses import dataclass
from math import isfinite

from loguru import logger

from app.models import StancePoint, UserAnswer
from app.services.scoring.errors import InvalidAnswerError, InvalidStanceError
from helpers.formulas import POSITIONS

ANSWER_POSITIONS = {"agree": 1, "neutral": 0, "disagree": -1}
INTEGER_WEIGHTS = (1, 2, 3)


@dataclass
class RejectedAnswer:
    """Answer dropped by lenient filtering, with the reason."""

    answer: object
    reason: str


def parse_answer(value: str) -> int:
    """Map a UI answer string to a position."""
    try:
        return ANSWER_POSITIONS[value.strip().lower()]
    except (AttributeError, KeyError):
        raise InvalidAnswerError(f"Unknown answer {value!r}, expected one of {sorted(ANSWER_POSITIONS)}") from None


def answer_problem(answer: object, integer_weights: bool = True) -> str | None:
    """Describe what is wrong with an answer, or None if it is valid."""
    if not isinstance(answer, UserAnswer):
        return f"not a UserAnswer: {type(answer).__name__}"
    if not isinstance(answer.statement_id, str) or not answer.statement_id:
        return "empty statement_id"
    if isinstance(answer.position, bool) or answer.position not in POSITIONS:
        return f"position {answer.position!r} not in {POSITIONS}"

    weight = answer.weight
    if isinstance(weight, bool) or not isinstance(weight, int | float) or not isfinite(weight) or weight <= 0:
        return f"weight {weight!r} must be a positive number"
    if integer_weights and weight not in INTEGER_WEIGHTS:
        return f"weight {weight!r} not in {INTEGER_WEIGHTS}"

    importance = answer.importance
    if not isinstance(importance, int | float) or not isfinite(importance) or not 0 <= importance <= 1:
        return f"importance {importance!r} not in [0, 1]"
    return None


def validate_user_answers(answers: Iterable[UserAnswer], integer_weights: bool = True) -> list[UserAnswer]:
    """Fail fast on the first malformed or duplicate answer."""
    result: list[UserAnswer] = []
    seen: set[str] = set()

    for answer in answers:
        problem = answer_problem(answer, integer_weights)
        if problem is None and answer.statement_id in seen:
            problem = "duplicate statement_id"
        if problem:
            raise InvalidAnswerError(f"Invalid answer {answer!r}: {problem}")
        seen.add(answer.statement_id)
        result.append(answer)

    return result


def filter_user_answers(
    answers: Iterable[object], integer_weights: bool = True
) -> tuple[list[UserAnswer], list[RejectedAnswer]]:
    """Lenient variant: keep valid answers, report the rest."""
    valid: list[UserAnswer] = []
    rejected: list[RejectedAnswer] = []
    seen: set[str] = set()

    for answer in answers:
        problem = answer_problem(answer, integer_weights)
        if problem is None and answer.statement_id in seen:
            problem = "duplicate statement_id"
        if problem:
            rejected.append(RejectedAnswer(answer, problem))
            continue
        seen.add(answer.statement_id)
        valid.append(answer)

    if rejected:
        logger.warning("Dropped {} of {} answers", len(rejected), len(valid) + len(rejected))
    return valid, rejected


def validate_stances(stances: Iterable[StancePoint], label: str = "stances") -> list[StancePoint]:
    """Check positions, confidences and statement_id uniqueness of one stance-set."""
    result: list[StancePoint] = []
    seen: set[str] = set()

    for stance in stances:
        if isinstance(stance.position, bool) or stance.position not in POSITIONS:
            raise InvalidStanceError(f"{label}: position {stance.position!r} not in {POSITIONS}")
        if stance.confidence is not None and not 0 <= stance.confidence <= 1:
            raise InvalidStanceError(f"{label}: confidence {stance.confidence!r} not in [0, 1]")
        if stance.statement_id in seen:
            raise InvalidStanceError(f"{label}: duplicate statement_id {stance.statement_id!r}")
        seen.add(stance.statement_id)
        result.append(stance)

    return result
