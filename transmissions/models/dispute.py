"""Model for free-text correction requests against a report."""

from django.conf import settings
from django.db import models
from .report import Report


class Dispute(models.Model):
    """User-authored request to correct a report."""

    report = models.ForeignKey(
        Report,
        on_delete=models.CASCADE,
        db_column='report_id',
        related_name='disputes'
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        db_column='user_id',
        related_name='disputes'
    )
    message = models.TextField(max_length=2000)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Table name and newest-first ordering for disputes."""
        db_table = "report_dispute"
        ordering = ['-created_at']

    def __str__(self):
        """Readable identifier for admin/debugging."""
        return f"Dispute by {self.user_id} on {self.report_id}"
