"""Advice service - answers free-text questions from party program excerpts."""

from collections.abc import Mapping
from typing import Protocol

import httpx
from loguru import logger
from pydantic import ValidationError

from app.services.advice.retrieval import deduplicate, infer_theme, rerank
from app.services.quiz import QuizService
from helpers import normalize_party_name
from rag_client import RetrievedChunk

FALLBACK_ANSWER = "Something went wrong while fetching advice. Please try again."
NO_CONTEXT_ANSWER = "No relevant program text was found for this question."


class Embedder(Protocol):
    async def embed(self, text: str) -> list[float]: ...


class Retriever(Protocol):
    async def retrieve_top_k(self, embedding: list[float], k: int) -> list[RetrievedChunk]: ...


class AnswerGenerator(Protocol):
    async def generate_answer(self, context: str, question: str) -> str: ...


def format_context(chunks: list[RetrievedChunk]) -> str:
    """Numbered excerpts with party and page, one block per chunk."""
    return "\n\n".join(
        f"[{i}] {c.party or 'Onbekend'} (p. {c.page if c.page is not None else '?'}): {c.content}"
        for i, c in enumerate(chunks, 1)
    )


class AdviceService:
    """RAG orchestration over the retrieval and answer-generation collaborators.

    Collaborator failures never propagate: the caller always gets an answer dict.
    """

    def __init__(
        self,
        embedder: Embedder,
        retriever: Retriever,
        generator: AnswerGenerator,
        quiz: QuizService | None = None,
        top_k: int = 8,
    ):
        self._embedder = embedder
        self._retriever = retriever
        self._generator = generator
        self._quiz = quiz
        self.top_k = top_k
        logger.debug("AdviceService initialized (top_k={})", top_k)

    async def retrieve(self, question: str) -> list[RetrievedChunk]:
        """Relevant chunks with canonical party labels, best first."""
        embedding = await self._embedder.embed(question)
        chunks = await self._retriever.retrieve_top_k(embedding, self.top_k)

        relabelled = [
            c.model_copy(update={"party": normalize_party_name(f"{c.party or ''} {c.title or ''} {c.url or ''}", c.party)})
            for c in chunks
        ]
        return rerank(deduplicate(relabelled), question)

    async def ask(
        self,
        question: str,
        theme_weights: Mapping[str, float] | None = None,
        ip: str | None = None,
        user_id: str | None = None,
    ) -> dict:
        """Answer with sources: {answer, theme, sources: [{party, page, url}]}."""
        theme_weights = theme_weights or {}
        if self._quiz is not None:
            self._quiz.log_submission(question, theme_weights, ip=ip, user_id=user_id)

        theme = infer_theme(question)
        try:
            chunks = await self.retrieve(question)
            if not chunks:
                return {"answer": NO_CONTEXT_ANSWER, "theme": theme, "sources": []}
            answer = await self._generator.generate_answer(format_context(chunks), question)
        except (httpx.HTTPError, ValidationError, RuntimeError) as e:
            logger.warning("Advice failed for theme {}: {}", theme, e)
            return {"answer": FALLBACK_ANSWER, "theme": theme, "sources": []}

        sources = [{"party": c.party, "page": c.page, "url": c.url} for c in chunks]
        logger.info("Advice answered ({} sources, theme={})", len(sources), theme)
        return {"answer": answer, "theme": theme, "sources": sources}
