"""Quiz domain entities - questions and user answers."""

from dataclasses import dataclass, field
from datetime import datetime

from app.models.common import BaseEntity, Pos


@dataclass(frozen=True)
class UserAnswer(BaseEntity):
    """One answered statement, weighted by its theme's importance."""

    statement_id: str
    position: Pos
    weight: float = 1
    importance: float = 1.0


@dataclass
class Question(BaseEntity):
    """Quiz statement."""

    id: int
    statement: str
    category: str
    description: str = ""
    order_index: int = 0
    active: bool = True


@dataclass
class Submission(BaseEntity):
    """Analytics record of a quiz or advice request."""

    question: str
    themes: list[str]
    weights: dict[str, float]
    ip_hash: str | None = None
    user_id: str | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)
