"""Quiz services."""

from app.services.quiz.service import QuizService, hash_ip

__all__ = ["QuizService", "hash_ip"]
