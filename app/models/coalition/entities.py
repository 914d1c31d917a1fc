"""Coalition domain entities - static tables and derived chances."""

from dataclasses import dataclass, field

from app.models.common import BaseEntity
from helpers import formulas

DEFAULT_IDEOLOGY = 5.0


@dataclass
class CoalitionTables(BaseEntity):
    """Seat projection, incompatibilities and left-right positions."""

    total_seats: int = 150
    seats: dict[str, int] = field(default_factory=dict)
    incompatibilities: dict[str, list[str]] = field(default_factory=dict)
    ideology: dict[str, float] = field(default_factory=dict)

    @property
    def majority(self) -> int:
        return formulas.majority_quota(self.total_seats)

    def seats_of(self, party: str) -> int:
        return self.seats.get(party, 0)

    def position_of(self, party: str) -> float:
        return self.ideology.get(party, DEFAULT_IDEOLOGY)

    def compatible(self, a: str, b: str) -> bool:
        """Mutual: either side ruling the other out is enough."""
        return b not in self.incompatibilities.get(a, []) and a not in self.incompatibilities.get(b, [])


@dataclass
class Coalition(BaseEntity):
    """Feasible majority coalition."""

    parties: tuple[str, ...]
    seats: int
    stability: float


@dataclass
class CoalitionOption(BaseEntity):
    """A coalition seen from one member."""

    partners: list[str]
    seats: int
    probability: int


@dataclass
class CoalitionChance(BaseEntity):
    """Derived chance that a party ends up governing."""

    party_name: str
    chance_percentage: int
    most_likely_coalitions: list[CoalitionOption]
    explanation: str
