"""Question repository - quiz statements."""

from loguru import logger

from app.models import Question
from app.repositories.base import BaseRepository

COLUMNS = "id, statement, category, description, order_index, active"


class QuestionRepository(BaseRepository):
    """Access to quiz statements."""

    def get_active(self) -> list[Question]:
        """Active questions ordered by order_index."""

        def fetch():
            rows = self.fetchall(f"SELECT {COLUMNS} FROM question WHERE active ORDER BY order_index, id")
            logger.debug("get_active: {} questions", len(rows))
            return [Question(*r) for r in rows]

        return self._cached("active", fetch)

    def upsert_many(self, questions: list[Question]) -> int:
        """Insert or replace questions; returns how many were written."""
        self._require_writable()
        for q in questions:
            self.execute(
                f"INSERT OR REPLACE INTO question ({COLUMNS}) VALUES (?, ?, ?, ?, ?, ?)",
                [q.id, q.statement, q.category, q.description, q.order_index, q.active],
            )
        self.clear_cache()
        logger.info("Upserted {} questions", len(questions))
        return len(questions)
