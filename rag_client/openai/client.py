"""OpenAI-compatible client - embeddings and answer generation."""

from rag_client.base import BaseClient
from rag_client.openai.schemas import ChatResponse, EmbeddingResponse

SYSTEM_PROMPT = "Answer using only the party program excerpts provided. Name the party for every claim."


class OpenAIClient(BaseClient):
    """Client for /embeddings and /chat/completions."""

    def __init__(self, *args, embedding_model: str, chat_model: str, **kwargs):
        super().__init__(*args, **kwargs)
        self.embedding_model = embedding_model
        self.chat_model = chat_model

    async def embed(self, text: str) -> list[float]:
        """POST /embeddings - embedding of one text."""
        data = await self._post("embeddings", {"model": self.embedding_model, "input": text})
        return EmbeddingResponse(**data).data[0].embedding

    async def generate_answer(self, context: str, question: str) -> str:
        """POST /chat/completions - answer a question from retrieved context."""
        data = await self._post(
            "chat/completions",
            {
                "model": self.chat_model,
                "messages": [
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": f"Context:\n{context}\n\nQuestion: {question}"},
                ],
                "temperature": 0.2,
            },
        )
        return ChatResponse(**data).choices[0].message.content
