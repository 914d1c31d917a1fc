"""Repositories package - data access layer."""

from app.repositories.base import BaseRepository
from app.repositories.config import ConfigError, ConfigRepository
from app.repositories.db import close_db, connect, get_db, init_tables
from app.repositories.party import DocumentRepository
from app.repositories.quiz import QuestionRepository, SubmissionRepository

__all__ = [
    # DB
    "get_db",
    "close_db",
    "connect",
    "init_tables",
    # Base
    "BaseRepository",
    # Config
    "ConfigError",
    "ConfigRepository",
    # Party
    "DocumentRepository",
    # Quiz
    "QuestionRepository",
    "SubmissionRepository",
]
