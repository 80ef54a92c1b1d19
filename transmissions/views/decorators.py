from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.shortcuts import redirect


class LoginProhibitedMixin:
    """
    Mixin that prevents logged-in users from accessing certain class-based views.

    Useful for the sign-in pages, where an authenticated user should be sent
    on to the board instead.

    Attributes:
        redirect_when_logged_in_url (str): Optional. The URL to redirect to if
            the user is already logged in. Defaults to
            ``settings.REDIRECT_URL_WHEN_LOGGED_IN``.
    """

    redirect_when_logged_in_url = None

    def dispatch(self, *args, **kwargs):
        """Redirect authenticated users, otherwise proceed normally."""
        if self.request.user.is_authenticated:
            return redirect(self.get_redirect_when_logged_in_url())
        return super().dispatch(*args, **kwargs)

    def get_redirect_when_logged_in_url(self):
        """
        Determine the redirect URL for authenticated users.

        Raises ``ImproperlyConfigured`` when neither the attribute nor the
        setting provides one.
        """
        url = self.redirect_when_logged_in_url or getattr(settings, "REDIRECT_URL_WHEN_LOGGED_IN", None)
        if url is None:
            raise ImproperlyConfigured(
                "LoginProhibitedMixin requires either a value for "
                "'redirect_when_logged_in_url' or REDIRECT_URL_WHEN_LOGGED_IN."
            )
        return url
