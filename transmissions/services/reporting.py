"""Service helpers for submitting reports against handles."""

import logging
from typing import Dict, Optional, Sequence, Tuple
from uuid import UUID

from transmissions.exceptions import ConflictError, StoreError, ValidationError
from transmissions.models import Report
from transmissions.repos import ReportRepo
from .handles import HandleResolver

logger = logging.getLogger(__name__)


class ReportingService:
    """Encapsulate report validation, handle resolution and persistence."""

    def __init__(
        self,
        *,
        reports: ReportRepo | None = None,
        resolver: HandleResolver | None = None,
    ) -> None:
        self.reports = reports or ReportRepo()
        self.resolver = resolver or HandleResolver()

    def submit(
        self,
        handle_id,
        sentiment: str,
        severity: str,
        encounter: str,
        category: str,
        description: str,
        *,
        reporter=None,
    ) -> UUID:
        """Insert one report for an already-resolved handle and return its id."""
        handle_id = self._handle_uuid(handle_id)
        fields = self.clean_fields(sentiment, severity, encounter, category, description)
        return self._insert(handle_id, fields, reporter).id

    def submit_transmission(
        self,
        actor,
        *,
        handle: str,
        platform: str | None = None,
        sentiment: str = "neutral",
        severity: str = "info",
        encounter: str = "other",
        category: str = Report.DEFAULT_CATEGORY,
        description: str = "",
    ) -> Report:
        """Validate, resolve the handle, then insert the report on behalf of ``actor``."""
        if not (actor and getattr(actor, "is_authenticated", False)):
            raise ValidationError("Sign in to submit report.")
        if not (handle or "").strip():
            raise ValidationError("Handle is required.")
        fields = self.clean_fields(sentiment, severity, encounter, category, description)

        handle_id = self.resolver.resolve(handle, platform)
        report = self._insert(handle_id, fields, actor)
        logger.info("Report %s submitted by user %s for handle %s", report.id, actor.pk, handle_id)
        return report

    def clean_fields(
        self, sentiment, severity, encounter, category, description
    ) -> Dict[str, str]:
        """Return normalised report fields or raise ValidationError."""
        description = (description or "").strip()
        if not description:
            raise ValidationError("Description is required.")
        return {
            "sentiment": self._choice("sentiment", sentiment, Report.SENTIMENT_CHOICES),
            "severity": self._choice("severity", severity, Report.SEVERITY_CHOICES),
            "encounter": self._choice("encounter", encounter, Report.ENCOUNTER_CHOICES),
            "category": (category or "").strip() or Report.DEFAULT_CATEGORY,
            "description": description,
        }

    def _handle_uuid(self, handle_id) -> UUID:
        if isinstance(handle_id, UUID):
            return handle_id
        try:
            return UUID(str(handle_id or ""))
        except ValueError as exc:
            raise ValidationError("Handle is required.") from exc

    def _choice(self, name: str, value: Optional[str], choices: Sequence[Tuple[str, str]]) -> str:
        allowed = [key for key, _ in choices]
        if value not in allowed:
            raise ValidationError(f"Unknown {name} {value!r}; expected one of {', '.join(allowed)}.")
        return value

    def _insert(self, handle_id, fields: Dict[str, str], reporter) -> Report:
        try:
            return self.reports.create_report(handle_id=handle_id, reporter=reporter, **fields)
        except (ConflictError, StoreError) as exc:
            raise StoreError(f"Submit error: {exc.message}") from exc
