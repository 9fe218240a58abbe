"""
Domain exceptions for rankings app.

Exception Hierarchy:
    RankingsServiceError (base)
    └── InvalidPeriodError

Usage:
    from apps.rankings.exceptions import InvalidPeriodError

    if period not in RANKING_PERIODS:
        raise InvalidPeriodError(f"Invalid period: {period}")
"""


class RankingsServiceError(Exception):
    """Base exception for all rankings service errors."""

    pass


class InvalidPeriodError(RankingsServiceError):
    """
    Raised when a period name is not one of day, week, month, all
    (or, for the hall of fame, week, month).
    """

    pass
