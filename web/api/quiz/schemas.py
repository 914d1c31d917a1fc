"""Quiz API request/response schemas."""

from pydantic import BaseModel, Field


class QuizRequest(BaseModel):
    """Quiz answers keyed by question id, theme importance 0-100."""

    answers: dict[str, str] = Field(default_factory=dict)
    theme_weights: dict[str, float] = Field(default_factory=dict)


class QuestionItem(BaseModel):
    """Quiz statement."""

    id: int
    statement: str
    category: str
    description: str


class QuestionsResponse(BaseModel):
    """Active questions."""

    items: list[QuestionItem]


class BreakdownItem(BaseModel):
    """Score against one stance-set."""

    score: int
    raw_score: int
    coverage: float
    penalty: int
    matches: int
    conflicts: int
    answered: int


class DualResultItem(BaseModel):
    """Dual score for a party."""

    party: str
    color: str
    program: BreakdownItem
    votes: BreakdownItem
    combined: int
    has_limited_voting_data: bool


class QuizResponse(BaseModel):
    """Dual scoring response."""

    items: list[DualResultItem]
    has_voting_data: bool
    explanation: str


class QuestionResultItem(BaseModel):
    """How one statement was scored."""

    statement_id: str
    user_position: int
    party_position: int
    result: str


class ProgramResultItem(BaseModel):
    """Program-only score for a party."""

    party: str
    color: str
    percentage: int
    matches: int
    conflicts: int
    is_reliable: bool
    questions: list[QuestionResultItem]


class ProgramResponse(BaseModel):
    """Program-only scoring response."""

    items: list[ProgramResultItem]
