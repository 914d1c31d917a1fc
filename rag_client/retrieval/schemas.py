"""Vector retrieval schemas."""

from pydantic import BaseModel


class RetrievedChunk(BaseModel):
    """One program-text chunk returned by rag_topk."""

    content: str
    page: int | None = None
    party: str | None = None
    title: str | None = None
    url: str | None = None
    quality: float = 1.0
