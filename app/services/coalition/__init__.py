"""Coalition services."""

from app.services.coalition.estimators import (
    CoalitionEstimator,
    ExactCoalitionEstimator,
    SeatShareCoalitionEstimator,
    explain,
    get_estimator,
)
from app.services.coalition.service import CoalitionService

__all__ = [
    "CoalitionEstimator",
    "CoalitionService",
    "ExactCoalitionEstimator",
    "SeatShareCoalitionEstimator",
    "explain",
    "get_estimator",
]
