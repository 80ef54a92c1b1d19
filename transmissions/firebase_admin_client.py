"""Lazy Firebase Admin app used to verify ID tokens sent to the API."""

import logging
import os
import sys
import firebase_admin
from django.conf import settings
from firebase_admin import auth, credentials, exceptions as firebase_exceptions

logger = logging.getLogger(__name__)

_app = None


def _is_mock(obj) -> bool:
    """Return True when obj is a unittest.mock sentinel."""
    return "unittest.mock" in type(obj).__module__


def _env_truthy(name: str) -> bool:
    return os.getenv(name, "").lower() in ("1", "true", "yes")


def _is_running_tests() -> bool:
    """True under ``manage.py test`` or pytest, where Firebase must stay offline."""
    return any(arg in sys.argv for arg in ("test", "pytest")) or "pytest" in sys.modules


def _quiet() -> bool:
    """Firebase warnings are muted in test runs unless FIREBASE_VERBOSE_TEST_LOGS is set."""
    return _is_running_tests() and not _env_truthy("FIREBASE_VERBOSE_TEST_LOGS")


def _init_blocked() -> bool:
    # tests may opt in with FIREBASE_ALLOW_TEST_APP, or by mocking initialize_app
    if not _is_running_tests() or _env_truthy("FIREBASE_ALLOW_TEST_APP"):
        return False
    return not _is_mock(firebase_admin.initialize_app)


def _credential():
    path = getattr(settings, "FIREBASE_SERVICE_ACCOUNT_FILE", None)
    if not path or not os.path.exists(path):
        if not _quiet():
            logger.warning("FIREBASE_SERVICE_ACCOUNT_FILE not found. Firebase token verification disabled.")
        return None
    return credentials.Certificate(path)


def get_app():
    """
    Return the Firebase Admin app, initialising it on first use.

    Returns None when credentials are missing or invalid so callers can
    degrade instead of crashing at import time.
    """
    global _app
    if _app:
        return _app
    if firebase_admin._apps:
        _app = firebase_admin.get_app()
        return _app
    if _init_blocked():
        return None

    try:
        cred = _credential()
        if cred is None:
            return None
        _app = firebase_admin.initialize_app(cred)
    except (ValueError, OSError, firebase_exceptions.FirebaseError) as e:
        if not _quiet():
            logger.error("Failed to initialize Firebase: %s", e)
        return None
    return _app


def verify_id_token(id_token: str) -> dict:
    """
    Verify a Firebase ID token and return its decoded claims.

    Raises ``ValueError`` when Firebase is not configured, and the
    firebase_admin auth errors when the token is invalid or expired.
    """
    app = get_app()
    if app is None and not _is_mock(auth.verify_id_token):
        raise ValueError("Firebase is not configured")
    return auth.verify_id_token(id_token, app=app)
