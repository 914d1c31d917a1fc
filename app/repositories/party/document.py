"""Document repository - party program documents from the ingestion layer."""

from datetime import datetime

from loguru import logger

from app.models import PartyDocument
from app.repositories.base import BaseRepository

COLUMNS = "id, party, title, url, year, version, inserted_at"


class DocumentRepository(BaseRepository):
    """Read access to program documents, plus inserts for seeding."""

    def latest_by_party(self) -> dict[str, PartyDocument]:
        """Most recent document per party label: {party: document}."""

        def fetch():
            rows = self.fetchall(
                f"""
                SELECT {COLUMNS} FROM document
                QUALIFY ROW_NUMBER() OVER (PARTITION BY party ORDER BY inserted_at DESC, id) = 1
                ORDER BY party
                """
            )
            result = {r[1]: PartyDocument(*r) for r in rows}
            logger.debug("latest_by_party: {} parties", len(result))
            return result

        return self._cached("latest_by_party", fetch)

    def count(self) -> int:
        return self.scalar("SELECT COUNT(*) FROM document")

    def add(self, doc: PartyDocument) -> None:
        """Insert or replace one document."""
        self._require_writable()
        self.execute(
            f"INSERT OR REPLACE INTO document ({COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?)",
            [doc.id, doc.party, doc.title, doc.url, doc.year, doc.version, doc.inserted_at or datetime.utcnow()],
        )
        self.clear_cache()
