"""Flagging, disputes and flag-driven hiding of reports."""

import logging
from typing import Iterable, Set
from uuid import UUID

from django.conf import settings

from transmissions.exceptions import ConflictError, NotFoundError, ValidationError
from transmissions.models import Dispute, Flag
from transmissions.repos import DisputeRepo, FlagRepo, ReportRepo

logger = logging.getLogger(__name__)


class ModerationService:
    """Flag and dispute actions taken by one acting user."""

    def __init__(self, actor, *, flags=None, disputes=None, reports=None):
        """Bind the acting user; repositories default to the real ones."""
        self.actor = actor
        self.flags = flags or FlagRepo()
        self.disputes = disputes or DisputeRepo()
        self.reports = reports or ReportRepo()

    def _signed_in(self) -> bool:
        return bool(self.actor and getattr(self.actor, "is_authenticated", False))

    def _require_report(self, report_id) -> UUID:
        try:
            report_id = report_id if isinstance(report_id, UUID) else UUID(str(report_id))
        except ValueError as exc:
            raise NotFoundError("Report not found.") from exc
        if not self.reports.exists(report_id):
            raise NotFoundError("Report not found.")
        return report_id

    def flag(self, report_id) -> Flag:
        """Record the actor's flag on a report, once per user."""
        if not self._signed_in():
            raise ValidationError("Sign in to flag posts.")
        report_id = self._require_report(report_id)
        try:
            flag = self.flags.add(report_id, self.actor)
        except ConflictError as exc:
            raise ConflictError("You already flagged this post.") from exc
        logger.info("User %s flagged report %s", self.actor.pk, report_id)
        return flag

    def flagged_ids(self, report_ids: Iterable) -> Set[str]:
        """Ids (as strings) among ``report_ids`` that the actor already flagged."""
        if not self._signed_in():
            return set()
        return self.flags.flagged_report_ids(self.actor, report_ids)

    def dispute(self, report_id, message: str) -> Dispute:
        """Append the actor's correction request to a report."""
        if not self._signed_in():
            raise ValidationError("Sign in to dispute/correct a post.")
        message = (message or "").strip()
        if not message:
            raise ValidationError("Describe what is wrong and what should be corrected.")
        report_id = self._require_report(report_id)
        dispute = self.disputes.add(report_id, self.actor, message)
        logger.info("User %s disputed report %s", self.actor.pk, report_id)
        return dispute


def apply_flag_threshold(report_id, threshold: int | None = None, *, flags=None, reports=None) -> bool:
    """Hide the report once its flag count reaches ``threshold``; return True if hidden now."""
    if threshold is None:
        threshold = settings.SURFACELOG_FLAG_HIDE_THRESHOLD
    if not threshold or threshold <= 0:
        return False
    flags = flags or FlagRepo()
    reports = reports or ReportRepo()

    count = flags.count_for_report(report_id)
    if count < threshold:
        return False
    updated = reports.update({"id": report_id, "hidden": False}, hidden=True)
    if updated:
        logger.info("Report %s hidden after %s flags", report_id, count)
    return bool(updated)
