"""Scoring domain models."""

from app.models.scoring.entities import (
    DualPartyResult,
    PartyResult,
    PenaltyForm,
    QuestionBreakdown,
    Reliability,
    ScoreBreakdown,
    ScoringParams,
)

__all__ = [
    "DualPartyResult",
    "PartyResult",
    "PenaltyForm",
    "QuestionBreakdown",
    "Reliability",
    "ScoreBreakdown",
    "ScoringParams",
]
