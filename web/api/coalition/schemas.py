"""Coalition API response schemas."""

from pydantic import BaseModel


class CoalitionOptionItem(BaseModel):
    """Likely coalition including the party."""

    partners: list[str]
    seats: int
    probability: int


class CoalitionChanceItem(BaseModel):
    """Coalition chance for a party."""

    party: str
    chance: int
    coalitions: list[CoalitionOptionItem]
    explanation: str


class CoalitionsResponse(BaseModel):
    """Coalition chances response."""

    estimator: str
    items: list[CoalitionChanceItem]
