"""Quiz API."""

from web.api.quiz.views import get_questions, score_program, score_quiz

__all__ = [
    "get_questions",
    "score_quiz",
    "score_program",
]
