"""Models package - DDL and entities for all domains."""

from app.models.coalition import Coalition, CoalitionChance, CoalitionOption, CoalitionTables
from app.models.common import BaseEntity, Pos
from app.models.party import (
    DOCUMENT_DDL,
    AiSignal,
    PartyData,
    PartyDocument,
    StancePoint,
)
from app.models.quiz import QUESTION_DDL, SUBMISSION_DDL, Question, Submission, UserAnswer
from app.models.scoring import (
    DualPartyResult,
    PartyResult,
    PenaltyForm,
    QuestionBreakdown,
    Reliability,
    ScoreBreakdown,
    ScoringParams,
)

ALL_DDL = [
    DOCUMENT_DDL,
    QUESTION_DDL,
    SUBMISSION_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    "Pos",
    # Party
    "DOCUMENT_DDL",
    "AiSignal",
    "PartyData",
    "PartyDocument",
    "StancePoint",
    # Quiz
    "QUESTION_DDL",
    "SUBMISSION_DDL",
    "Question",
    "Submission",
    "UserAnswer",
    # Scoring
    "DualPartyResult",
    "PartyResult",
    "PenaltyForm",
    "QuestionBreakdown",
    "Reliability",
    "ScoreBreakdown",
    "ScoringParams",
    # Coalition
    "Coalition",
    "CoalitionChance",
    "CoalitionOption",
    "CoalitionTables",
    # All DDL
    "ALL_DDL",
]
