"""Repository helpers for user lookups."""

import logging
from typing import Optional

from transmissions.db_accessor import DB_Accessor
from transmissions.exceptions import ConflictError
from transmissions.models import User

logger = logging.getLogger(__name__)


class UserRepo(DB_Accessor):
    """Repository for local accounts linked to Firebase identities."""

    def __init__(self) -> None:
        """Initialise with the User model."""
        super().__init__(User)

    def get_by_firebase_uid(self, uid: str) -> Optional[User]:
        """Return the user linked to a Firebase uid, if any."""
        return self.first(self.model.objects.filter(firebase_uid=uid))

    def get_by_email(self, email: str) -> Optional[User]:
        """Return a user by case-insensitive email."""
        if not email:
            return None
        return self.first(self.model.objects.filter(email__iexact=email))

    def get_or_create_for_firebase(self, uid: str, email: str) -> User:
        """
        Return the local account for a Firebase identity, creating it on first sign-in.

        An account that already exists for the email (for example from Google
        sign-in) is linked to the uid instead of duplicated. A concurrent
        sign-in that wins the insert race is picked up by re-reading.
        """
        user = self.get_by_firebase_uid(uid)
        if user:
            return user

        user = self.get_by_email(email)
        if user:
            if not user.firebase_uid:
                self.update({"pk": user.pk}, firebase_uid=uid)
                user.firebase_uid = uid
            return user

        try:
            user = self.create(username=uid, email=email or f"{uid}@users.invalid", firebase_uid=uid)
            user.set_unusable_password()
            user.save(update_fields=["password"])
            logger.info("Created local account for firebase uid %s", uid)
            return user
        except ConflictError:
            existing = self.get_by_firebase_uid(uid) or self.get_by_email(email)
            if existing is None:
                raise
            return existing
