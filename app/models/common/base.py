"""Base entity mixin for all domain entities."""

from dataclasses import asdict, fields
from typing import Any, Literal

# Disagree / neutral / agree
Pos = Literal[-1, 0, 1]


class BaseEntity:
    """Mixin for dataclass entities (frozen or not)."""

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to dictionary."""
        return asdict(self)

    @classmethod
    def field_names(cls) -> list[str]:
        """Declared field names, in order (used for row mapping)."""
        return [f.name for f in fields(cls)]
