"""Vector retrieval client."""

from rag_client.retrieval.client import RetrievalClient
from rag_client.retrieval.schemas import RetrievedChunk

__all__ = ["RetrievalClient", "RetrievedChunk"]
