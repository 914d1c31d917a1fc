"""Advice API request/response schemas."""

from pydantic import BaseModel, Field


class AdviceRequest(BaseModel):
    """Free-text question with the asker's theme importance."""

    question: str
    theme_weights: dict[str, float] = Field(default_factory=dict)
    user_id: str | None = None


class SourceItem(BaseModel):
    """Program excerpt an answer was based on."""

    party: str | None
    page: int | None
    url: str | None


class AdviceResponse(BaseModel):
    """Generated answer with sources."""

    answer: str
    theme: str
    sources: list[SourceItem]
