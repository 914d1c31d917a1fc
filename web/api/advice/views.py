"""Advice API views - thin layer over services."""

from app.container import container
from app.services.advice import AdviceService
from rag_client import OpenAIClient, RetrievalClient
from web.api.errors import validate_question, validate_theme_weights
import settings

from .schemas import AdviceRequest, AdviceResponse, SourceItem


async def ask(request: AdviceRequest, ip: str | None = None) -> AdviceResponse:
    """Answer a question from party program excerpts."""
    question = validate_question(request.question)
    validate_theme_weights(request.theme_weights)

    async with (
        RetrievalClient(settings.RAG_BASE_URL, settings.RAG_API_KEY, settings.API_TIMEOUT, settings.MAX_CONCURRENT) as retriever,
        OpenAIClient(
            settings.OPENAI_BASE_URL,
            settings.OPENAI_API_KEY,
            settings.API_TIMEOUT,
            settings.MAX_CONCURRENT,
            embedding_model=settings.EMBEDDING_MODEL,
            chat_model=settings.CHAT_MODEL,
        ) as llm,
    ):
        service = AdviceService(llm, retriever, llm, quiz=container.quiz, top_k=settings.RAG_TOP_K)
        data = await service.ask(question, request.theme_weights, ip=ip, user_id=request.user_id)

    return AdviceResponse(
        answer=data["answer"],
        theme=data["theme"],
        sources=[SourceItem(**s) for s in data["sources"]],
    )
