"""Config repository - static JSON tables under DATA_DIR."""

import json
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from app.models import CoalitionTables, PartyData, Question
from app.repositories.config.schemas import CoalitionTablesSchema, PartiesFile, QuestionsFile
import settings

PARTIES_FILE = "parties.json"
COALITIONS_FILE = "coalitions.json"
QUESTIONS_FILE = "questions.json"


class ConfigError(Exception):
    """Static table missing or malformed."""

    def __init__(self, message: str = "Configuration error"):
        self.message = message
        super().__init__(self.message)


class ConfigRepository:
    """Loads and validates the static tables, cached per instance."""

    def __init__(self, data_dir: Path | None = None):
        self._dir = Path(data_dir) if data_dir is not None else settings.DATA_DIR
        self._cache: dict[str, object] = {}
        logger.debug("ConfigRepository initialized: {}", self._dir)

    def _read(self, name: str) -> dict | None:
        path = self._dir / name
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigError(f"{path}: invalid JSON ({e})") from e

    def _load(self, name: str, parse):
        if name not in self._cache:
            raw = self._read(name)
            try:
                self._cache[name] = parse(raw) if raw is not None else None
            except ValidationError as e:
                raise ConfigError(f"{self._dir / name}: {e}") from e
            logger.debug("Loaded {}", name)
        return self._cache[name]

    def parties(self) -> list[PartyData]:
        """Party profiles; empty when the file is absent."""
        result = self._load(PARTIES_FILE, lambda raw: [p.to_party() for p in PartiesFile(**raw).parties])
        if result is None:
            logger.warning("{} not found in {}", PARTIES_FILE, self._dir)
        return result or []

    def coalition_tables(self) -> CoalitionTables | None:
        """Seat/incompatibility/ideology tables, or None when unavailable."""
        result = self._load(COALITIONS_FILE, lambda raw: CoalitionTablesSchema(**raw).to_tables())
        if result is None:
            logger.warning("{} not found in {}", COALITIONS_FILE, self._dir)
        return result

    def questions(self) -> list[Question]:
        """Seed questions; empty when the file is absent."""
        result = self._load(QUESTIONS_FILE, lambda raw: [q.to_question() for q in QuestionsFile(**raw).questions])
        return result or []
