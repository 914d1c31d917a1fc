"""Submission repository - append-only analytics log."""

import json

from app.models import Submission
from app.repositories.base import BaseRepository


class SubmissionRepository(BaseRepository):
    """Write-only log of quiz and advice requests."""

    def __init__(self, read_only: bool = False, conn=None):
        super().__init__(read_only=read_only, conn=conn)

    def append(self, submission: Submission) -> None:
        self._require_writable()
        self.execute(
            """
            INSERT INTO submission (question, themes, weights, ip_hash, user_id, created_at)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            [
                submission.question,
                json.dumps(submission.themes),
                json.dumps(submission.weights),
                submission.ip_hash,
                submission.user_id,
                submission.created_at,
            ],
        )

    def count(self) -> int:
        return self.scalar("SELECT COUNT(*) FROM submission")
