import logging
from django.conf import settings
from django.contrib import messages
from django.shortcuts import render
from transmissions.exceptions import StoreError
from transmissions.services import FeedService, LeaderboardService, Leaderboards
from transmissions.services.feed import FeedPage

logger = logging.getLogger(__name__)

__all__ = ["home"]


def home(request):
    """Public feed of the latest transmissions with the watchlist widgets."""
    feed = _load_feed(request)
    boards = _load_leaderboards(request)
    return render(request, 'content/feed.html', {
        'reports': feed.reports,
        'flagged_ids': feed.flagged_ids,
        'boards': boards,
        'nicest_empty_text': f"Needs at least {settings.SURFACELOG_NICEST_MIN_REPORTS} reports per handle.",
    })


def _load_feed(request):
    try:
        return FeedService().latest(request.user)
    except StoreError as e:
        logger.error("Feed query failed: %s", e)
        messages.error(request, f"Feed error: {e.message}")
        return FeedPage(reports=[])


def _load_leaderboards(request):
    try:
        return LeaderboardService().build(top=settings.SURFACELOG_LEADERBOARD_SIZE)
    except StoreError as e:
        logger.error("Leaderboard query failed: %s", e)
        messages.error(request, f"Watchlist error: {e.message}")
        return Leaderboards()
