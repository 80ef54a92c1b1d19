"""Feed, search and per-handle history used by the board views."""

from collections import Counter
from dataclasses import dataclass, field
from typing import List, Optional, Set

from django.conf import settings

from transmissions.models import Report
from transmissions.repos import HandleRepo, ReportRepo
from transmissions.utils import normalize_handle
from .moderation import ModerationService


@dataclass
class FeedPage:
    reports: List[Report]
    flagged_ids: Set[str] = field(default_factory=set)


@dataclass
class SearchResult:
    query: str
    reports: List[Report] = field(default_factory=list)
    status: str = ""


@dataclass
class HandleHistory:
    raw_handle: str
    signature: str
    display_name: str
    platform_label: Optional[str] = None
    reports: List[Report] = field(default_factory=list)
    status: str = ""


class FeedService:
    """Encapsulate the public read paths of the board."""

    def __init__(self, *, reports: ReportRepo | None = None, handles: HandleRepo | None = None) -> None:
        self.reports = reports or ReportRepo()
        self.handles = handles or HandleRepo()

    # --- feed -----------------------------------------------------------
    def latest(self, actor=None, limit: int | None = None) -> FeedPage:
        """Newest visible reports plus the ids the actor already flagged."""
        reports = self.reports.latest(limit or settings.SURFACELOG_FEED_LIMIT)
        flagged = ModerationService(actor).flagged_ids([r.id for r in reports])
        return FeedPage(reports=reports, flagged_ids=flagged)

    # --- search ---------------------------------------------------------
    def search(self, query: str | None) -> SearchResult:
        """Reports for handles matching the query by canonical key or display substring."""
        query = (query or "").strip()
        if not query:
            return SearchResult(query="", status="Type a handle to search.")

        handles = self.handles.search(
            query,
            normalize_handle(query),
            limit=settings.SURFACELOG_SEARCH_HANDLE_LIMIT,
        )
        handle_ids = list(dict.fromkeys(h.id for h in handles))
        if not handle_ids:
            return SearchResult(query=query, status="no matches")

        reports = self.reports.for_handles(handle_ids, limit=settings.SURFACELOG_SEARCH_REPORT_LIMIT)
        return SearchResult(query=query, reports=reports)

    # --- handle history -------------------------------------------------
    def handle_history(self, raw_handle: str | None) -> HandleHistory:
        """All visible reports for one canonical handle, newest first."""
        raw_handle = (raw_handle or "").strip()
        signature = normalize_handle(raw_handle)
        if not signature:
            return HandleHistory(
                raw_handle=raw_handle,
                signature="",
                display_name=raw_handle or "unknown",
                status="No handle provided.",
            )

        reports = self.reports.for_canonical_key(signature)
        return HandleHistory(
            raw_handle=raw_handle,
            signature=signature,
            display_name=self.display_name(reports, raw_handle),
            platform_label=self.platform_label(reports),
            reports=reports,
        )

    def display_name(self, reports: List[Report], fallback: str) -> str:
        """Most common handle spelling among the reports, else the fallback."""
        if not reports:
            return fallback or "unknown"
        counts = Counter(r.handle.display for r in reports)
        best, _ = counts.most_common(1)[0]
        return best or fallback or "unknown"

    def platform_label(self, reports: List[Report]) -> Optional[str]:
        """None, the single platform seen, or "multiple"."""
        platforms = list(dict.fromkeys(r.handle.platform for r in reports if r.handle.platform))
        if not platforms:
            return None
        if len(platforms) == 1:
            return platforms[0]
        return "multiple"
