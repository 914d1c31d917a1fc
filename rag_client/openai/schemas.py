"""OpenAI response schemas (only the fields we read)."""

from pydantic import BaseModel, Field


class EmbeddingItem(BaseModel):
    embedding: list[float]


class EmbeddingResponse(BaseModel):
    data: list[EmbeddingItem] = Field(min_length=1)


class ChatMessage(BaseModel):
    role: str
    content: str


class ChatChoice(BaseModel):
    message: ChatMessage


class ChatResponse(BaseModel):
    choices: list[ChatChoice] = Field(min_length=1)
