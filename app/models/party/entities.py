"""Party domain entities - declared stances and program documents."""

from dataclasses import dataclass, field
from datetime import datetime

from app.models.common import BaseEntity, Pos


@dataclass(frozen=True)
class AiSignal(BaseEntity):
    """Stance suggested by a classifier over program text."""

    stance: Pos
    confidence: float
    source_doc: str | None = None
    page: int | None = None


@dataclass(frozen=True)
class StancePoint(BaseEntity):
    """One declared party position, from the program or from a recorded vote."""

    statement_id: str
    position: Pos
    confidence: float | None = None
    evidence_refs: tuple[str, ...] = ()
    ai: AiSignal | None = None


@dataclass
class PartyData(BaseEntity):
    """Party with its two stance-sets. Read-only during scoring."""

    id: str
    name: str
    color: str
    description: str
    program: list[StancePoint] = field(default_factory=list)
    votes: list[StancePoint] = field(default_factory=list)
    cpb_analysis_url: str | None = None


@dataclass
class PartyDocument(BaseEntity):
    """Program document as stored by the ingestion layer."""

    id: str
    party: str
    title: str
    url: str
    year: int | None = None
    version: str | None = None
    inserted_at: datetime | None = None
