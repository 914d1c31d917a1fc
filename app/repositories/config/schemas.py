"""Schemas for the static JSON tables."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from app.models import CoalitionTables, PartyData, Question, StancePoint
from helpers import party_slug

DEFAULT_COLOR = "#6B7280"
PROGRAM_CONFIDENCE = 0.8

Answer = Literal["agree", "neutral", "disagree"]
POSITION_OF: dict[str, int] = {"agree": 1, "neutral": 0, "disagree": -1}


class VoteSchema(BaseModel):
    """Recorded vote mapped to a statement."""

    statement_id: str = Field(alias="statementId")
    position: Literal[-1, 0, 1]
    evidence_refs: list[str] = Field(alias="evidenceRefs", default=[])

    class Config:
        populate_by_name = True


class PartySchema(BaseModel):
    """Party profile: presentation data plus program and voting-record stances."""

    name: str
    color: str = DEFAULT_COLOR
    description: str | None = None
    cpb_analysis_url: str | None = Field(alias="cpbAnalysisUrl", default=None)
    program: dict[str, Answer] = {}
    votes: list[VoteSchema] = []

    class Config:
        populate_by_name = True

    @field_validator("votes")
    @classmethod
    def unique_votes(cls, votes: list[VoteSchema]) -> list[VoteSchema]:
        ids = [v.statement_id for v in votes]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"duplicate vote statementIds: {duplicates}")
        return votes

    def to_party(self) -> PartyData:
        pid = party_slug(self.name)
        return PartyData(
            id=pid,
            name=self.name,
            color=self.color,
            description=self.description or default_description(self.name),
            program=[
                StancePoint(
                    statement_id=sid,
                    position=POSITION_OF[answer],
                    confidence=PROGRAM_CONFIDENCE,
                    evidence_refs=(f"program_{pid}_{sid}",),
                )
                for sid, answer in self.program.items()
            ],
            votes=[StancePoint(v.statement_id, v.position, evidence_refs=tuple(v.evidence_refs)) for v in self.votes],
            cpb_analysis_url=self.cpb_analysis_url,
        )


class PartiesFile(BaseModel):
    parties: list[PartySchema]


class CoalitionTablesSchema(BaseModel):
    """Seat projection, incompatibilities and left-right positions (0-10)."""

    total_seats: int = Field(alias="totalSeats", default=150, gt=0)
    seats: dict[str, int] = {}
    incompatibilities: dict[str, list[str]] = {}
    ideology: dict[str, float] = {}

    class Config:
        populate_by_name = True

    @field_validator("seats")
    @classmethod
    def non_negative_seats(cls, seats: dict[str, int]) -> dict[str, int]:
        negative = [p for p, s in seats.items() if s < 0]
        if negative:
            raise ValueError(f"negative seat projection for {negative}")
        return seats

    @field_validator("ideology")
    @classmethod
    def on_scale(cls, ideology: dict[str, float]) -> dict[str, float]:
        outside = [p for p, v in ideology.items() if not 0 <= v <= 10]
        if outside:
            raise ValueError(f"ideological position outside 0-10 for {outside}")
        return ideology

    def to_tables(self) -> CoalitionTables:
        return CoalitionTables(
            total_seats=self.total_seats,
            seats=dict(self.seats),
            incompatibilities={p: list(v) for p, v in self.incompatibilities.items()},
            ideology=dict(self.ideology),
        )


class QuestionSchema(BaseModel):
    id: int
    statement: str
    category: str
    description: str = ""
    order_index: int = Field(alias="orderIndex", default=0)
    active: bool = True

    class Config:
        populate_by_name = True

    def to_question(self) -> Question:
        return Question(self.id, self.statement, self.category, self.description, self.order_index, self.active)


class QuestionsFile(BaseModel):
    questions: list[QuestionSchema]


def default_description(name: str) -> str:
    return f"{name} - Dutch political party"
