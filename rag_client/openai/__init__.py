"""OpenAI-compatible client."""

from rag_client.openai.client import OpenAIClient

__all__ = ["OpenAIClient"]
