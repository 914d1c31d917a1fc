"""Advice (RAG) services."""

from app.services.advice.retrieval import deduplicate, infer_theme, rerank
from app.services.advice.service import AdviceService

__all__ = ["AdviceService", "deduplicate", "infer_theme", "rerank"]
