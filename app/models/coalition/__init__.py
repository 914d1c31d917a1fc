"""Coalition domain models."""

from app.models.coalition.entities import Coalition, CoalitionChance, CoalitionOption, CoalitionTables

__all__ = [
    "Coalition",
    "CoalitionChance",
    "CoalitionOption",
    "CoalitionTables",
]
