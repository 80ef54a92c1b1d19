"""Repository helpers for fetching and inserting reports."""

from typing import Any, Dict, Iterable, List, Optional, Sequence

from django.db.models import QuerySet

from transmissions.db_accessor import DB_Accessor
from transmissions.models import Report


class ReportRepo(DB_Accessor):
    """Repository for Report queries (feed, search, handle history, windows)."""

    WINDOW_FIELDS = ("handle_id", "handle__display", "handle__platform", "sentiment", "created_at")

    def __init__(self) -> None:
        """Initialise with the Report model."""
        super().__init__(Report)

    def visible(self) -> QuerySet:
        """Base queryset of non-hidden reports with their handle, newest first."""
        return (
            self.model.objects.filter(hidden=False)
            .select_related("handle")
            .order_by("-created_at", "-id")
        )

    def latest(self, limit: int = 25) -> List[Report]:
        """Return the most recent visible reports."""
        return self.fetch(self.visible()[:limit])

    def for_handles(self, handle_ids: Sequence, limit: Optional[int] = None) -> List[Report]:
        """Return visible reports whose handle id is in ``handle_ids``."""
        if not handle_ids:
            return []
        qs = self.visible().filter(handle_id__in=list(handle_ids))
        if limit is not None:
            qs = qs[:limit]
        return self.fetch(qs)

    def for_canonical_key(self, canonical_key: str) -> List[Report]:
        """Return visible reports for the handle with the given canonical key."""
        return self.fetch(self.visible().filter(handle__canonical_key=canonical_key))

    def window(self, size: int = 5000) -> List[Dict[str, Any]]:
        """Return the ``size`` most recent visible reports as narrow value rows."""
        qs = (
            self.model.objects.filter(hidden=False)
            .order_by("-created_at")
            .values(*self.WINDOW_FIELDS)[:size]
        )
        with self.store_errors():
            return list(qs)

    def create_report(self, **data: Any) -> Report:
        """Insert a report row."""
        return self.create(**data)

    def exists(self, report_id) -> bool:
        """Return True when a report with this id exists."""
        with self.store_errors():
            return self.model.objects.filter(id=report_id).exists()

    def hide(self, report_ids: Iterable) -> int:
        """Mark the given reports hidden; return count updated."""
        return self.update({"id__in": list(report_ids)}, hidden=True)
