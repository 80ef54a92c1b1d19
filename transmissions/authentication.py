import logging
from firebase_admin import auth
from rest_framework import authentication
from rest_framework import exceptions
from .exceptions import SurfaceLogError
from .firebase_admin_client import verify_id_token
from .repos import UserRepo

logger = logging.getLogger(__name__)


class AccountUnavailable(exceptions.APIException):
    status_code = 503
    default_detail = "Account store unavailable."
    default_code = "account_unavailable"


class FirebaseAuthentication(authentication.BaseAuthentication):
    """DRF authentication backend validating Firebase ID tokens."""

    keyword = "Bearer"

    def authenticate(self, request):
        """Validate Authorization header token and return (user, decoded_token)."""
        auth_header = request.META.get('HTTP_AUTHORIZATION')
        if not auth_header:
            return None

        parts = auth_header.split()
        if len(parts) != 2 or parts[0] != self.keyword:
            return None
        id_token = parts[1]

        try:
            decoded_token = verify_id_token(id_token)
        except (ValueError, auth.InvalidIdTokenError, auth.ExpiredIdTokenError,
                auth.RevokedIdTokenError, auth.CertificateFetchError) as e:
            logger.info("Rejected Firebase token: %s", e)
            raise exceptions.AuthenticationFailed('Invalid Firebase token')

        uid = decoded_token.get("uid")
        if not uid:
            raise exceptions.AuthenticationFailed('Invalid Firebase token')

        try:
            user = UserRepo().get_or_create_for_firebase(uid, decoded_token.get("email") or "")
        except SurfaceLogError as e:
            logger.error("Account lookup failed for firebase uid %s: %s", uid, e)
            raise AccountUnavailable(f"Account lookup error: {e.message}") from e
        if not user.is_active:
            raise exceptions.AuthenticationFailed('User inactive')
        return (user, decoded_token)

    def authenticate_header(self, request):
        """Advertise bearer auth so unauthenticated API calls get 401."""
        return self.keyword
