"""Canonical identity record for a reported player handle."""

import uuid
from django.db import models


class Handle(models.Model):
    """A reported player, deduplicated by its canonical key."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # spelling as first submitted, trimmed
    display = models.CharField(max_length=100)

    canonical_key = models.CharField(max_length=100, unique=True)
    platform = models.CharField(max_length=50, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Table name and lookup ordering for handles."""
        db_table = "handle"
        ordering = ['display']

    def __str__(self):
        """Readable representation with platform when known."""
        if self.platform:
            return f"{self.display} ({self.platform})"
        return self.display
