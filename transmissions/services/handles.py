"""Find-or-create resolution of free-text handles to canonical Handle ids."""

import logging
from uuid import UUID

from transmissions.exceptions import ConflictError, ResolutionError, StoreError, ValidationError
from transmissions.repos import HandleRepo
from transmissions.utils import normalize_handle

logger = logging.getLogger(__name__)


class HandleResolver:
    """Resolve a raw handle to the id of its canonical Handle row.

    Creation is optimistic: the unique constraint on ``canonical_key`` is the
    only arbiter between concurrent first-time reporters. The loser of the
    race sees a ``ConflictError`` and re-reads the winner's row.
    """

    def __init__(self, *, repo: HandleRepo | None = None) -> None:
        self.repo = repo or HandleRepo()

    def resolve(self, raw_handle: str, platform: str | None = None) -> UUID:
        """Return the id of the Handle for ``raw_handle``, creating it if unseen."""
        display = (raw_handle or "").strip()
        canonical_key = normalize_handle(display)
        if not canonical_key:
            raise ValidationError("Handle is required.")

        try:
            found = self.repo.find_by_canonical_key(canonical_key)
        except StoreError as exc:
            raise ResolutionError(f"Handle lookup error: {exc.message}") from exc
        if found is not None:
            return found.id

        try:
            created = self.repo.create_handle(
                display=display,
                canonical_key=canonical_key,
                platform=(platform or "").strip() or None,
            )
        except ConflictError:
            logger.info("Handle %r created concurrently; re-reading", canonical_key)
            return self._recover(canonical_key, display)
        except StoreError as exc:
            raise ResolutionError(f"Handle create error: {exc.message}") from exc

        logger.info("Created handle %s for key %r", created.id, canonical_key)
        return created.id

    def _recover(self, canonical_key: str, display: str) -> UUID:
        """Re-read the row that won the insert race."""
        try:
            again = self.repo.find_by_canonical_key(canonical_key)
            if again is None:
                again = self.repo.find_by_key_or_display(canonical_key, display)
        except StoreError as exc:
            raise ResolutionError(
                f"Handle exists but could not re-fetch id: {exc.message}"
            ) from exc
        if again is None:
            raise ResolutionError("Handle exists but could not re-fetch id: unknown error")
        return again.id
