"""Leaderboard aggregation over a bounded window of recent reports."""

from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from django.conf import settings
from django.utils import timezone

from transmissions.repos import ReportRepo

WINDOW_7D = timedelta(days=7)
WINDOW_24H = timedelta(hours=24)


@dataclass(frozen=True)
class ReportRow:
    """The columns of a report that leaderboards need."""

    handle_id: Any
    handle: str
    platform: Optional[str]
    sentiment: str
    created_at: datetime

    @classmethod
    def from_values(cls, row: Mapping[str, Any]) -> "ReportRow":
        """Build from a ``ReportRepo.window()`` value row."""
        return cls(
            handle_id=row["handle_id"],
            handle=row["handle__display"],
            platform=row["handle__platform"],
            sentiment=row["sentiment"],
            created_at=row["created_at"],
        )


@dataclass(frozen=True)
class LeaderRow:
    """One ranked handle; ``value`` is a count, or a percentage for ``nicest``."""

    handle_id: Any
    handle: str
    platform: Optional[str]
    value: int


@dataclass
class Leaderboards:
    """Ranked lists shown in the watchlist widgets."""

    most_reported_all_time: List[LeaderRow] = field(default_factory=list)
    most_7d: List[LeaderRow] = field(default_factory=list)
    most_24h: List[LeaderRow] = field(default_factory=list)
    nicest: List[LeaderRow] = field(default_factory=list)

    def top(self, size: int) -> "Leaderboards":
        """Return a copy keeping only the first ``size`` rows of each list."""
        return replace(
            self,
            most_reported_all_time=self.most_reported_all_time[:size],
            most_7d=self.most_7d[:size],
            most_24h=self.most_24h[:size],
            nicest=self.nicest[:size],
        )


def aggregate(
    reports: Iterable[ReportRow],
    now: datetime,
    *,
    min_reports_for_nicest: int = 5,
) -> Leaderboards:
    """
    Rank handles by report volume and share of "good" reports.

    Rows are grouped by handle id. A handle appears in the 7-day and 24-hour
    lists only when it has at least one report inside that window, and in
    ``nicest`` only once it has ``min_reports_for_nicest`` reports in total.
    Ties are ordered by handle id so the output is stable.
    """
    identity: Dict[Any, Tuple[str, Optional[str]]] = {}
    totals: Dict[Any, int] = {}
    last_7d: Dict[Any, int] = {}
    last_24h: Dict[Any, int] = {}
    good: Dict[Any, int] = {}

    for row in reports:
        key = row.handle_id
        if key is None:
            continue
        identity.setdefault(key, (row.handle, row.platform))
        totals[key] = totals.get(key, 0) + 1

        age = now - row.created_at
        if age <= WINDOW_7D:
            last_7d[key] = last_7d.get(key, 0) + 1
        if age <= WINDOW_24H:
            last_24h[key] = last_24h.get(key, 0) + 1
        if row.sentiment == "good":
            good[key] = good.get(key, 0) + 1

    good_pct = {
        key: _percent(good.get(key, 0), total)
        for key, total in totals.items()
        if total >= min_reports_for_nicest
    }

    return Leaderboards(
        most_reported_all_time=_ranked(totals, identity),
        most_7d=_ranked(last_7d, identity),
        most_24h=_ranked(last_24h, identity),
        nicest=_ranked(good_pct, identity),
    )


def _percent(part: int, total: int) -> int:
    # round half up, in integers
    return (200 * part + total) // (2 * total)


def _ranked(values: Dict[Any, int], identity: Dict[Any, Tuple[str, Optional[str]]]) -> List[LeaderRow]:
    rows = [
        LeaderRow(handle_id=key, handle=identity[key][0], platform=identity[key][1], value=value)
        for key, value in values.items()
    ]
    rows.sort(key=lambda r: (-r.value, str(r.handle_id)))
    return rows


class LeaderboardService:
    """Fetch the aggregation window from the store and rank it."""

    def __init__(
        self,
        *,
        reports: ReportRepo | None = None,
        window_size: int | None = None,
        min_reports_for_nicest: int | None = None,
    ) -> None:
        self.reports = reports or ReportRepo()
        if window_size is None:
            window_size = settings.SURFACELOG_AGGREGATION_WINDOW
        self.window_size = window_size
        if min_reports_for_nicest is None:
            min_reports_for_nicest = settings.SURFACELOG_NICEST_MIN_REPORTS
        self.min_reports_for_nicest = min_reports_for_nicest

    def build(self, now: datetime | None = None, top: int | None = None) -> Leaderboards:
        """Aggregate the most recent window of visible reports."""
        rows = [ReportRow.from_values(values) for values in self.reports.window(self.window_size)]
        boards = aggregate(
            rows,
            now or timezone.now(),
            min_reports_for_nicest=self.min_reports_for_nicest,
        )
        return boards if top is None else boards.top(top)
