"""Repository helpers for handle lookups and creation."""

from typing import List, Optional

from django.db.models import Q

from transmissions.db_accessor import DB_Accessor
from transmissions.models import Handle


class HandleRepo(DB_Accessor):
    """Repository for Handle queries keyed by canonical key."""

    def __init__(self) -> None:
        """Initialise with the Handle model."""
        super().__init__(Handle)

    def find_by_canonical_key(self, canonical_key: str) -> Optional[Handle]:
        """Return the handle whose canonical key equals the given key."""
        return self.first(self.model.objects.filter(canonical_key=canonical_key))

    def find_by_key_or_display(self, canonical_key: str, display: str) -> Optional[Handle]:
        """Return a handle matching the canonical key or the exact display spelling."""
        qs = self.model.objects.filter(
            Q(canonical_key=canonical_key) | Q(display=display)
        ).order_by("created_at")
        return self.first(qs)

    def create_handle(self, *, display: str, canonical_key: str, platform: Optional[str]) -> Handle:
        """Insert a new handle; raises ConflictError when the key already exists."""
        return self.create(display=display, canonical_key=canonical_key, platform=platform)

    def search(self, query: str, canonical_key: str, limit: int = 50) -> List[Handle]:
        """Handles whose key equals ``canonical_key`` or whose display contains ``query``."""
        match = Q(display__icontains=query)
        if canonical_key:
            match |= Q(canonical_key=canonical_key)
        return self.fetch(self.model.objects.filter(match)[:limit])
