"""Model for a community-submitted interaction report ("transmission")."""

import uuid
from django.conf import settings
from django.db import models
from .handle import Handle


class Report(models.Model):
    """One community submission about an interaction with a handle."""

    SENTIMENT_CHOICES = [
        ('good', 'good'),
        ('neutral', 'neutral'),
        ('bad', 'bad'),
        ('rat', 'rat'),
    ]
    SEVERITY_CHOICES = [
        ('info', 'FYI'),
        ('warning', 'Caution'),
        ('critical', 'High Risk'),
    ]
    ENCOUNTER_CHOICES = [
        ('spawn_in', 'spawn in'),
        ('objective', 'objective'),
        ('extraction', 'extraction'),
        ('third_party', 'third party'),
        ('comms', 'comms'),
        ('other', 'other'),
    ]
    DEFAULT_CATEGORY = "general"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    handle = models.ForeignKey(
        Handle,
        on_delete=models.PROTECT,
        db_column='handle_id',
        related_name='reports'
    )

    sentiment = models.CharField(max_length=16, choices=SENTIMENT_CHOICES, default='neutral')
    severity = models.CharField(max_length=16, choices=SEVERITY_CHOICES, default='info')
    encounter = models.CharField(max_length=16, choices=ENCOUNTER_CHOICES, default='other')
    category = models.CharField(max_length=64, default=DEFAULT_CATEGORY, blank=True)
    description = models.TextField(max_length=4000)

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    reporter = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='submitted_reports'
    )

    hidden = models.BooleanField(default=False, help_text="Hidden by moderation or repeated flags")

    class Meta:
        """Ordering and table name for reports."""
        db_table = 'report'
        ordering = ['-created_at']

    def __str__(self):
        """Readable summary of the report target and sentiment."""
        return f"[{self.sentiment}] report on {self.handle.display}"
