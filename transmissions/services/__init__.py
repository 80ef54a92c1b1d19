from .handles import HandleResolver
from .reporting import ReportingService
from .leaderboard import LeaderboardService, Leaderboards, LeaderRow, ReportRow, aggregate
from .feed import FeedService
from .moderation import ModerationService

__all__ = [
    "HandleResolver",
    "ReportingService",
    "LeaderboardService",
    "Leaderboards",
    "LeaderRow",
    "ReportRow",
    "aggregate",
    "FeedService",
    "ModerationService",
]
