"""django-allauth hooks: Google sign-in creates or links local accounts."""

import logging
import re
from itertools import count

from allauth.account.adapter import DefaultAccountAdapter
from allauth.socialaccount.adapter import DefaultSocialAccountAdapter
from django.db import IntegrityError

from transmissions.repos import UserRepo

logger = logging.getLogger(__name__)

_USERNAME_STRIP = re.compile(r"[^a-z0-9_.]")


def _unique_username(base, user_model, exclude_user_id=None):
    """Return ``base`` cleaned to ``[a-z0-9_.]``, suffixed with 1, 2, ... until unused."""
    stem = _USERNAME_STRIP.sub("", (base or "").strip().lstrip("@").lower()) or "user"
    taken = user_model.objects.filter(username__startswith=stem)
    if exclude_user_id:
        taken = taken.exclude(pk=exclude_user_id)
    names = set(taken.values_list("username", flat=True))
    for suffix in count():
        candidate = f"{stem}{suffix or ''}"
        if candidate not in names:
            return candidate


def _email_local_part(email):
    email = (email or "").strip()
    return email.split("@", 1)[0] if "@" in email else ""


class CustomAccountAdapter(DefaultAccountAdapter):
    """Local password sign-up is closed; accounts come from Google or a magic link."""

    def is_open_for_signup(self, request):
        return False

    def populate_username(self, request, user):
        """Use the existing username, else the email local part, made unique."""
        base = (user.username or "").strip() or _email_local_part(user.email)
        user.username = _unique_username(base, type(user), exclude_user_id=user.pk)
        return user.username


class CustomSocialAccountAdapter(DefaultSocialAccountAdapter):
    """
    Google sign-in may create accounts, and reuses the account a magic-link
    sign-in already created for the same email.
    """

    def is_open_for_signup(self, request, sociallogin):
        return True

    def pre_social_login(self, request, sociallogin):
        """Connect a first Google login to an existing account with that email."""
        if sociallogin.is_existing:
            return
        existing = self._find_existing_user(sociallogin)
        if existing is not None:
            logger.info("Linking Google login to existing account %s", existing.pk)
            sociallogin.connect(request, existing)

    def populate_user(self, request, sociallogin, data):
        """Give Google users a unique username derived from their email."""
        user = super().populate_user(request, sociallogin, data)
        candidate = user.username or data.get("username") or _email_local_part(data.get("email"))
        user.username = _unique_username(candidate, type(user), exclude_user_id=user.pk)
        return user

    def save_user(self, request, sociallogin, form=None):
        """Fall back to linking when a concurrent sign-in took the email first."""
        try:
            return super().save_user(request, sociallogin, form=form)
        except IntegrityError:
            existing = self._find_existing_user(sociallogin)
            if existing is None:
                raise
            sociallogin.connect(request, existing)
            return existing

    def _find_existing_user(self, sociallogin):
        return UserRepo().get_by_email((sociallogin.user.email or "").strip())
