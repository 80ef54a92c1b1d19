"""Firebase Auth REST helpers for the email magic-link sign-in flow."""

import logging
import requests
from django.conf import settings

logger = logging.getLogger(__name__)

IDENTITY_TOOLKIT_URL = "https://identitytoolkit.googleapis.com/v1/accounts:{action}?key={key}"
REQUEST_TIMEOUT = 10


class FirebaseAuthError(Exception):
    """The Identity Toolkit rejected the request or could not be reached."""


def _endpoint(action: str) -> str:
    api_key = getattr(settings, "FIREBASE_API_KEY", None)
    if not api_key:
        logger.warning("Firebase %s skipped: FIREBASE_API_KEY not configured", action)
        raise FirebaseAuthError("Sign-in is not configured.")
    return IDENTITY_TOOLKIT_URL.format(action=action, key=api_key)


def _error_message(response) -> str:
    try:
        return response.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        return getattr(response, "text", "") or f"status {response.status_code}"


def _post(action: str, payload: dict) -> dict:
    url = _endpoint(action)
    try:
        response = requests.post(url, json=payload, timeout=REQUEST_TIMEOUT)
    except requests.RequestException as e:
        logger.warning("Firebase %s request failed: %s", action, e)
        raise FirebaseAuthError(str(e)) from e

    if response.status_code == 200:
        return response.json()

    message = _error_message(response)
    logger.warning("Firebase %s failed (status=%s): %s", action, response.status_code, message)
    raise FirebaseAuthError(message)


def send_sign_in_link(email: str, continue_url: str) -> None:
    """Ask Firebase to email a one-time sign-in link that returns to ``continue_url``."""
    _post(
        "sendOobCode",
        {
            "requestType": "EMAIL_SIGNIN",
            "email": email,
            "continueUrl": continue_url,
            "canHandleCodeInApp": True,
        },
    )
    logger.info("Sent sign-in link to %s", email)


def sign_in_with_email_link(email: str, oob_code: str) -> dict:
    """
    Exchange the one-time code from a sign-in link for the Firebase identity.

    Returns a dict with at least ``uid`` and ``email``.
    """
    data = _post("signInWithEmailLink", {"email": email, "oobCode": oob_code})
    uid = data.get("localId")
    if not uid:
        raise FirebaseAuthError("Sign-in response did not include a user id.")
    return {"uid": uid, "email": data.get("email") or email, "id_token": data.get("idToken")}
