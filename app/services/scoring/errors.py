"""Scoring engine errors."""


class ScoringError(Exception):
    """Base class for scoring engine errors."""

    def __init__(self, message: str = "Scoring error"):
        self.message = message
        super().__init__(self.message)


class InvalidAnswerError(ScoringError):
    """User answer outside the accepted domain."""


class InvalidStanceError(ScoringError):
    """Party stance-set is malformed."""


class TooManyPartiesError(ScoringError):
    """Party count exceeds what exact coalition enumeration can handle."""

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(
            f"Too many parties for exact enumeration: {count} > {limit}. Use the seat_share estimator instead."
        )
