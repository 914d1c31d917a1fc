"""Clients for the retrieval and answer-generation collaborators."""

from rag_client.base import BaseClient
from rag_client.openai import OpenAIClient
from rag_client.retrieval import RetrievalClient, RetrievedChunk

__all__ = [
    # Base
    "BaseClient",
    # Clients
    "OpenAIClient",
    "RetrievalClient",
    "RetrievedChunk",
]
