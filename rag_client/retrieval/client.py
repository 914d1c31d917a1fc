"""Vector retrieval client - hosted rag_topk nearest-neighbour function."""

from rag_client.base import BaseClient
from rag_client.retrieval.schemas import RetrievedChunk


class RetrievalClient(BaseClient):
    """Client for the rag_topk RPC."""

    async def retrieve_top_k(self, embedding: list[float], k: int) -> list[RetrievedChunk]:
        """POST /rest/v1/rpc/rag_topk - k nearest chunks to an embedding."""
        rows = await self._post("rest/v1/rpc/rag_topk", {"query_embedding": embedding, "match_count": k})
        return [RetrievedChunk(**row) for row in rows]
