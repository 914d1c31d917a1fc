"""Quiz service - raw quiz submissions to ranked party results."""

import hashlib
from collections.abc import Mapping

import duckdb
from loguru import logger

from app.models import DualPartyResult, PartyResult, Question, ScoringParams, Submission, UserAnswer
from app.repositories import QuestionRepository, SubmissionRepository
from app.services.party import PartyCatalog
from app.services.scoring import (
    SCORING_EXPLANATION,
    TopicWeightStrategy,
    calculate_all_dual_scores,
    calculate_program_results,
    has_voting_data,
    parse_answer,
    validate_user_answers,
)
from app.services.scoring.errors import InvalidAnswerError

DEFAULT_IMPORTANCE = 50


def hash_ip(ip: str | None) -> str | None:
    """SHA-256 of an IP address; raw addresses are never stored."""
    return hashlib.sha256(ip.encode()).hexdigest() if ip else None


class QuizService:
    """Converts quiz answers and theme weights, then runs the scoring engine."""

    def __init__(
        self,
        catalog: PartyCatalog,
        question_repo: QuestionRepository,
        submission_repo: SubmissionRepository | None,
        strategy: TopicWeightStrategy,
        params: ScoringParams,
    ):
        self._catalog = catalog
        self._questions = question_repo
        self._submissions = submission_repo
        self.strategy = strategy
        self.params = params
        logger.debug("QuizService initialized (weights={})", strategy.name)

    def questions(self) -> list[Question]:
        return self._questions.get_active()

    def build_answers(
        self, raw_answers: Mapping[int | str, str], theme_weights: Mapping[str, float]
    ) -> list[UserAnswer]:
        """UI answers keyed by question id plus theme importance (0-100) to weighted answers.

        Themes missing from ``theme_weights`` count as 50%. Unknown question ids are rejected.
        """
        by_id = {str(q.id): q for q in self.questions()}

        answered: list[tuple[str, int, float]] = []
        for qid, value in raw_answers.items():
            question = by_id.get(str(qid))
            if question is None:
                raise InvalidAnswerError(f"Unknown question id {qid!r}")
            importance = float(theme_weights.get(question.category, DEFAULT_IMPORTANCE))
            if not 0 <= importance <= 100:
                raise InvalidAnswerError(f"Importance for {question.category!r} must be 0-100, got {importance}")
            answered.append((str(qid), parse_answer(value), importance))

        weights = self.strategy.weights([pct for _, _, pct in answered])
        answers = [
            UserAnswer(statement_id=sid, position=pos, weight=w, importance=pct / 100)
            for (sid, pos, pct), w in zip(answered, weights)
        ]
        return validate_user_answers(answers, integer_weights=self.strategy.integral)

    def score(self, raw_answers: Mapping[int | str, str], theme_weights: Mapping[str, float]) -> dict:
        """Dual (program + voting record) results, best match first."""
        answers = self.build_answers(raw_answers, theme_weights)
        results: list[DualPartyResult] = calculate_all_dual_scores(
            self._catalog.parties(), answers, self.params, integer_weights=self.strategy.integral
        )
        logger.info("Scored {} answers against {} parties", len(answers), len(results))
        return {
            "results": results,
            "has_voting_data": has_voting_data(results),
            "explanation": SCORING_EXPLANATION,
        }

    def score_program_only(
        self, raw_answers: Mapping[int | str, str], theme_weights: Mapping[str, float]
    ) -> list[PartyResult]:
        """Program-only results, for deployments without voting-record data."""
        answers = self.build_answers(raw_answers, theme_weights)
        results = calculate_program_results(
            self._catalog.parties(),
            answers,
            self.params,
            total_questions=len(self.questions()),
            integer_weights=self.strategy.integral,
        )
        logger.info("Scored {} answers (program only) against {} parties", len(answers), len(results))
        return results

    def log_submission(
        self,
        question: str,
        theme_weights: Mapping[str, float],
        ip: str | None = None,
        user_id: str | None = None,
    ) -> bool:
        """Append to the analytics log. Never raises; returns whether it was written."""
        if self._submissions is None:
            return False
        submission = Submission(
            question=question,
            themes=list(theme_weights),
            weights=dict(theme_weights),
            ip_hash=None if user_id else hash_ip(ip),
            user_id=user_id,
        )
        try:
            self._submissions.append(submission)
        except (duckdb.Error, RuntimeError) as e:
            logger.warning("Submission not logged: {}", e)
            return False
        return True
