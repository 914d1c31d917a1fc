"""Party catalogue - parties from stored documents merged with configured profiles."""

import duckdb
from loguru import logger

from app.models import PartyData
from app.repositories import ConfigRepository, DocumentRepository
from app.repositories.config.schemas import DEFAULT_COLOR, default_description
from helpers import normalize_party_name, party_slug


class PartyCatalog:
    """Builds the PartyData list a scoring pass runs over."""

    def __init__(self, config_repo: ConfigRepository, document_repo: DocumentRepository | None = None):
        self._config = config_repo
        self._documents = document_repo
        logger.debug("PartyCatalog initialized")

    def document_parties(self) -> set[str]:
        """Canonical names of parties with a stored program document."""
        if self._documents is None:
            return set()
        try:
            labels = self._documents.latest_by_party().keys()
        except duckdb.Error as e:
            logger.warning("Could not read documents, using configured parties only: {}", e)
            return set()
        return {normalize_party_name(label, fallback=label) for label in labels}

    def parties(self) -> list[PartyData]:
        """All known parties, sorted by name.

        Parties only known from documents get empty stance-sets (zero coverage).
        """
        profiles = {p.name: p for p in self._config.parties()}
        names = sorted(set(profiles) | self.document_parties(), key=str.casefold)

        result = [
            profiles.get(name)
            or PartyData(id=party_slug(name), name=name, color=DEFAULT_COLOR, description=default_description(name))
            for name in names
        ]
        logger.info("Catalogue: {} parties ({} with profiles)", len(result), len(profiles))
        return result
