"""Tests for DuckDB repositories (in-memory database)."""

from datetime import datetime

import duckdb
import pytest

from app.models import PartyDocument, Question, Submission
from app.repositories import DocumentRepository, QuestionRepository, SubmissionRepository, close_db, get_db, init_tables
from app.repositories.db import connect, db_exists
import settings


@pytest.fixture
def conn():
    conn = duckdb.connect(":memory:")
    init_tables(conn)
    yield conn
    conn.close()


class TestInitTables:
    def test_idempotent(self, conn):
        init_tables(conn)
        tables = {r[0] for r in conn.execute("SELECT table_name FROM information_schema.tables").fetchall()}
        assert {"document", "question", "submission"} <= tables


class TestQuestionRepository:
    def test_active_ordered(self, conn):
        repo = QuestionRepository(read_only=False, conn=conn)
        repo.upsert_many(
            [
                Question(1, "Eerste", "Zorg", order_index=2),
                Question(2, "Tweede", "Wonen", order_index=1),
                Question(3, "Oud", "Wonen", order_index=0, active=False),
            ]
        )
        assert [q.id for q in repo.get_active()] == [2, 1]

    def test_upsert_replaces(self, conn):
        repo = QuestionRepository(read_only=False, conn=conn)
        repo.upsert_many([Question(1, "Oud", "Zorg")])
        repo.upsert_many([Question(1, "Nieuw", "Zorg")])
        assert [q.statement for q in repo.get_active()] == ["Nieuw"]

    def test_read_only(self, conn):
        with pytest.raises(RuntimeError):
            QuestionRepository(conn=conn).upsert_many([Question(1, "x", "y")])


class TestDocumentRepository:
    def test_latest_per_party(self, conn):
        repo = DocumentRepository(read_only=False, conn=conn)
        repo.add(PartyDocument("1", "VVD", "Programma 2023", "#", 2023, "v1", datetime(2023, 1, 1)))
        repo.add(PartyDocument("2", "VVD", "Programma 2025", "#", 2025, "v2", datetime(2025, 1, 1)))
        repo.add(PartyDocument("3", "D66", "Programma", "#", None, None, datetime(2024, 6, 1)))

        latest = repo.latest_by_party()
        assert set(latest) == {"VVD", "D66"}
        assert latest["VVD"].id == "2"
        assert repo.count() == 3


class TestSubmissionRepository:
    def test_append(self, conn):
        repo = SubmissionRepository(conn=conn)
        repo.append(Submission("Wat vindt de VVD van wonen?", ["Wonen"], {"Wonen": 80}, ip_hash="abc"))
        assert repo.count() == 1

        themes, weights = conn.execute("SELECT themes, weights FROM submission").fetchone()
        assert themes == '["Wonen"]'
        assert weights == '{"Wonen": 80}'


class TestConnection:
    def test_creates_database(self, tmp_path, monkeypatch):
        monkeypatch.setattr(settings, "DB_PATH", str(tmp_path / "votematch.duckdb"))
        close_db()
        try:
            conn = get_db(read_only=False)
            QuestionRepository(read_only=False, conn=conn).upsert_many([Question(1, "x", "y")])
            assert db_exists()
            assert QuestionRepository(conn=conn).get_active()[0].statement == "x"
        finally:
            close_db()

    def test_read_only_open_of_missing_file(self, tmp_path):
        path = str(tmp_path / "fresh.duckdb")
        assert not db_exists(path)
        conn = connect(path, read_only=True)
        try:
            assert db_exists(path)
            assert QuestionRepository(conn=conn).get_active() == []
        finally:
            conn.close()

    def test_memory(self):
        conn = connect(":memory:", read_only=True)
        try:
            assert SubmissionRepository(conn=conn).count() == 0
        finally:
            conn.close()
