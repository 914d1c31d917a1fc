"""Common models - shared base entity and position type."""

from app.models.common.base import BaseEntity, Pos

__all__ = ["BaseEntity", "Pos"]
