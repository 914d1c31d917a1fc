"""Services package - service class exports."""

from app.services.advice import AdviceService
from app.services.coalition import CoalitionService
from app.services.party import PartyCatalog
from app.services.quiz import QuizService

__all__ = [
    "AdviceService",
    "CoalitionService",
    "PartyCatalog",
    "QuizService",
]
