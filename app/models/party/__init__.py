"""Party domain models - stances, parties, documents."""

from app.models.party.document import DOCUMENT_DDL
from app.models.party.entities import AiSignal, PartyData, PartyDocument, StancePoint

__all__ = [
    "DOCUMENT_DDL",
    "AiSignal",
    "PartyData",
    "PartyDocument",
    "StancePoint",
]
