"""Quiz domain models - questions, answers, submissions."""

from app.models.quiz.entities import Question, Submission, UserAnswer
from app.models.quiz.question import QUESTION_DDL
from app.models.quiz.submission import SUBMISSION_DDL

__all__ = [
    "QUESTION_DDL",
    "SUBMISSION_DDL",
    "Question",
    "Submission",
    "UserAnswer",
]
