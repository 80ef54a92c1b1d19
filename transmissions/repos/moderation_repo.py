"""Repository helpers for flags and disputes."""

from typing import Iterable, Set

from transmissions.db_accessor import DB_Accessor
from transmissions.models import Dispute, Flag


class FlagRepo(DB_Accessor):
    """Repository for Flag rows (unique per report/user)."""

    def __init__(self) -> None:
        """Initialise with the Flag model."""
        super().__init__(Flag)

    def add(self, report_id, user) -> Flag:
        """Insert a flag; raises ConflictError if the user already flagged the report."""
        return self.create(report_id=report_id, user=user)

    def flagged_report_ids(self, user, report_ids: Iterable) -> Set[str]:
        """Return the subset of ``report_ids`` (as strings) flagged by ``user``."""
        ids = list(report_ids)
        if not ids:
            return set()
        with self.store_errors():
            rows = self.model.objects.filter(user=user, report_id__in=ids).values_list(
                "report_id", flat=True
            )
            return {str(report_id) for report_id in rows}

    def count_for_report(self, report_id) -> int:
        """Return how many users flagged the report."""
        with self.store_errors():
            return self.model.objects.filter(report_id=report_id).count()


class DisputeRepo(DB_Accessor):
    """Repository for append-only Dispute rows."""

    def __init__(self) -> None:
        """Initialise with the Dispute model."""
        super().__init__(Dispute)

    def add(self, report_id, user, message: str) -> Dispute:
        """Insert a dispute."""
        return self.create(report_id=report_id, user=user, message=message)
