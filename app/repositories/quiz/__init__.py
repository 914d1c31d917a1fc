"""Quiz repositories."""

from app.repositories.quiz.question import QuestionRepository
from app.repositories.quiz.submission import SubmissionRepository

__all__ = ["QuestionRepository", "SubmissionRepository"]
