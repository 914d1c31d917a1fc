"""Dependency Injection container - initialized at app startup."""

from loguru import logger

from app.models import ScoringParams
from app.repositories import (
    ConfigRepository,
    DocumentRepository,
    QuestionRepository,
    SubmissionRepository,
    get_db,
)
from app.services.coalition import CoalitionService
from app.services.party import PartyCatalog
from app.services.quiz import QuizService
from app.services.scoring import get_weight_strategy
import settings


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # One writable connection shared by all repositories
        conn = get_db(read_only=False)

        # Repositories (singletons)
        self._config_repo = ConfigRepository()
        self._document_repo = DocumentRepository(conn=conn)
        self._question_repo = QuestionRepository(read_only=False, conn=conn)
        self._submission_repo = SubmissionRepository(conn=conn)

        if not self._question_repo.get_active():
            self.seed_questions()

        # Services (with injected repos)
        self.catalog = PartyCatalog(
            config_repo=self._config_repo,
            document_repo=self._document_repo,
        )

        self.quiz = QuizService(
            catalog=self.catalog,
            question_repo=self._question_repo,
            submission_repo=self._submission_repo,
            strategy=get_weight_strategy(settings.TOPIC_WEIGHT_STRATEGY),
            params=ScoringParams.from_settings(),
        )

        self.coalitions = CoalitionService(
            config_repo=self._config_repo,
            estimator=settings.COALITION_ESTIMATOR,
            max_parties=settings.MAX_EXACT_PARTIES,
        )

        self._initialized = True

    def seed_questions(self) -> int:
        """Copy questions.json into the question table."""
        questions = self._config_repo.questions()
        if not questions:
            logger.warning("No seed questions available")
            return 0
        return self._question_repo.upsert_many(questions)


# Global container instance
container = Container()
