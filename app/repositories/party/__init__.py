"""Party repositories."""

from app.repositories.party.document import DocumentRepository

__all__ = ["DocumentRepository"]
