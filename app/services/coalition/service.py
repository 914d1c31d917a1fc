"""Coalition service - picks the deployment's estimator and runs it."""

from collections.abc import Sequence

from loguru import logger

from app.models import CoalitionChance, DualPartyResult, PartyResult
from app.repositories import ConfigRepository
from app.services.coalition.estimators import (
    CoalitionEstimator,
    ExactCoalitionEstimator,
    SeatShareCoalitionEstimator,
    get_estimator,
)


class CoalitionService:
    """Coalition chances for scored parties."""

    def __init__(self, config_repo: ConfigRepository, estimator: str = "exact", max_parties: int = 20):
        tables = config_repo.coalition_tables()
        if estimator == ExactCoalitionEstimator.name and tables is None:
            logger.warning("Coalition tables unavailable, using {} estimator", SeatShareCoalitionEstimator.name)
            estimator = SeatShareCoalitionEstimator.name

        self.estimator: CoalitionEstimator = get_estimator(estimator, tables, max_parties)
        logger.debug("CoalitionService initialized (estimator={})", self.estimator.name)

    def chances(self, results: Sequence[DualPartyResult | PartyResult]) -> list[CoalitionChance]:
        """Per-party chances, highest first."""
        chances = self.estimator.estimate(results)
        logger.info("Coalition chances for {} parties ({})", len(chances), self.estimator.name)
        return chances
