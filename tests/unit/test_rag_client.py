"""Tests for the retrieval and answer-generation clients."""

import asyncio

import httpx
import pytest

from rag_client import OpenAIClient, RetrievalClient
from rag_client.base import _is_retryable_error


def status_error(code):
    request = httpx.Request("POST", "http://test/x")
    return httpx.HTTPStatusError("error", request=request, response=httpx.Response(code, request=request))


def mock_client(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestRetryPolicy:
    def test_retryable(self):
        assert _is_retryable_error(httpx.ConnectError("down"))
        assert _is_retryable_error(status_error(429))
        assert _is_retryable_error(status_error(503))

    def test_not_retryable(self):
        assert not _is_retryable_error(status_error(404))
        assert not _is_retryable_error(ValueError("bad"))


class TestRetrievalClient:
    def test_retrieve_top_k(self):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["body"] = request.content
            return httpx.Response(200, json=[{"content": "tekst", "page": 2, "party": "VVD", "title": "t", "url": "u"}])

        async def run():
            client = RetrievalClient("http://rag/")
            client._client = mock_client(handler)
            try:
                return await client.retrieve_top_k([0.5], 3)
            finally:
                await client._client.aclose()

        [chunk] = asyncio.run(run())
        assert chunk.party == "VVD"
        assert chunk.quality == 1.0
        assert seen["url"] == "http://rag/rest/v1/rpc/rag_topk"
        assert b'"match_count":3' in seen["body"].replace(b" ", b"")

    def test_outside_context(self):
        with pytest.raises(RuntimeError):
            asyncio.run(RetrievalClient("http://rag").retrieve_top_k([0.5], 3))


class TestOpenAIClient:
    def test_embed_and_answer(self):
        def handler(request):
            if request.url.path.endswith("/embeddings"):
                return httpx.Response(200, json={"data": [{"embedding": [0.1, 0.2]}]})
            return httpx.Response(200, json={"choices": [{"message": {"role": "assistant", "content": "Antwoord"}}]})

        async def run():
            client = OpenAIClient("http://llm/v1", embedding_model="e", chat_model="c")
            client._client = mock_client(handler)
            try:
                return await client.embed("vraag"), await client.generate_answer("context", "vraag")
            finally:
                await client._client.aclose()

        assert asyncio.run(run()) == ([0.1, 0.2], "Antwoord")

    def test_client_error_not_retried(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(401, json={"error": "unauthorized"})

        async def run():
            client = OpenAIClient("http://llm/v1", embedding_model="e", chat_model="c")
            client._client = mock_client(handler)
            try:
                await client.embed("vraag")
            finally:
                await client._client.aclose()

        with pytest.raises(httpx.HTTPStatusError):
            asyncio.run(run())
        assert len(calls) == 1
