"""Static configuration tables."""

from app.repositories.config.tables import ConfigError, ConfigRepository

__all__ = ["ConfigError", "ConfigRepository"]
