"""Model recording that a user flagged a report."""

from django.conf import settings
from django.db import models
from .report import Report


class Flag(models.Model):
    """A user's assertion that a report is wrong or abusive."""

    report = models.ForeignKey(
        Report,
        on_delete=models.CASCADE,
        db_column='report_id',
        related_name='flags'
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        db_column='user_id',
        related_name='flags'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Enforce one flag per user/report pair."""
        db_table = "report_flag"
        constraints = [
            models.UniqueConstraint(fields=["report", "user"], name="uniq_flag_report_user"),
        ]

    def __str__(self):
        """Readable representation for admin/debugging."""
        return f"{self.user_id} flagged {self.report_id}"
