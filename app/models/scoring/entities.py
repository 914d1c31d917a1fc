"""Scoring domain entities - parameters and computed breakdowns."""

from dataclasses import dataclass, field, replace
from enum import StrEnum

import settings
from app.models.common import BaseEntity, Pos
from app.models.party import PartyData


class PenaltyForm(StrEnum):
    """Shape of the coverage penalty."""

    LINEAR = "linear"
    QUADRATIC = "quadratic"


@dataclass(frozen=True)
class ScoringParams(BaseEntity):
    """Compatibility constants and feature switches for one scoring pass."""

    a: float = 0.30
    b: float = 0.60
    penalty_lambda: float = 0.12
    penalty: PenaltyForm = PenaltyForm.LINEAR
    soft_conflict: bool = False
    soft_floor: float = 0.12
    ai_fuse: bool = False
    ai_min_confidence: float = 0.85

    @classmethod
    def from_settings(cls) -> "ScoringParams":
        """Canonical defaults, overridable through the environment."""
        return cls(
            a=settings.COMPAT_A,
            b=settings.COMPAT_B,
            penalty_lambda=settings.COVERAGE_LAMBDA,
            soft_conflict=settings.SOFT_CONFLICT,
            soft_floor=settings.SOFT_CONFLICT_FLOOR,
            ai_fuse=settings.AI_FUSE,
            ai_min_confidence=settings.AI_MIN_CONFIDENCE,
        )

    def with_penalty(self, form: PenaltyForm) -> "ScoringParams":
        return replace(self, penalty=form)


@dataclass
class ScoreBreakdown(BaseEntity):
    """Score of one party against one stance-set.

    ``score``, ``raw_score`` and ``penalty`` are 0-100 integers, ``coverage`` is 0-1.
    ``score == round(clamp(raw - penalty) * 100)`` using unrounded raw and penalty.
    """

    score: int = 0
    raw_score: int = 0
    coverage: float = 0.0
    penalty: int = 0
    matches: int = 0
    conflicts: int = 0
    neutral_align: int = 0
    partial_align: int = 0
    answered: int = 0
    fused: int = 0


@dataclass
class DualPartyResult(BaseEntity):
    """Program and voting-record scores for one party, blended 70/30."""

    party: PartyData
    program: ScoreBreakdown
    votes: ScoreBreakdown
    combined: int
    has_limited_voting_data: bool


@dataclass
class QuestionBreakdown(BaseEntity):
    """How one statement was scored."""

    statement_id: str
    user_position: Pos
    party_position: Pos
    result: str


@dataclass
class Reliability(BaseEntity):
    """Whether enough statements were compared to trust a score."""

    answered: int
    total: int
    is_reliable: bool


@dataclass
class PartyResult(BaseEntity):
    """Program-only result, used when no voting-record data exists."""

    party: PartyData
    percentage: int
    scores: ScoreBreakdown
    questions: list[QuestionBreakdown] = field(default_factory=list)
    reliability: Reliability | None = None

    @property
    def balance(self) -> int:
        """Matches minus conflicts (ranking tie-break)."""
        return self.scores.matches - self.scores.conflicts
