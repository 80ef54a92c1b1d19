import logging
from urllib.parse import urlencode
from django.contrib import messages
from django.contrib.auth import login
from django.shortcuts import redirect, render
from django.urls import reverse
from django.utils.decorators import method_decorator
from django.utils.http import url_has_allowed_host_and_scheme
from django.views import View
from django.views.decorators.cache import never_cache
from transmissions.exceptions import SurfaceLogError
from transmissions.firebase_auth_services import (
    FirebaseAuthError,
    send_sign_in_link,
    sign_in_with_email_link,
)
from transmissions.forms import MagicLinkForm
from transmissions.repos import UserRepo
from transmissions.views.decorators import LoginProhibitedMixin

logger = logging.getLogger(__name__)

__all__ = ["LogInView", "complete_log_in"]

MAGIC_LINK_EMAIL_KEY = "magic_link_email"


def _safe_next(request, next_url):
    if next_url and url_has_allowed_host_and_scheme(next_url, allowed_hosts={request.get_host()}):
        return next_url
    return None


@method_decorator(never_cache, name="dispatch")
class LogInView(LoginProhibitedMixin, View):
    """Sign-in terminal: Google via allauth, or a Firebase email magic link."""

    def dispatch(self, request, *args, **kwargs):
        """Capture ?next param before handling request."""
        self.next = _safe_next(request, request.POST.get("next") or request.GET.get("next"))
        return super().dispatch(request, *args, **kwargs)

    def get(self, request):
        """Render the sign-in options."""
        return self._render(request, MagicLinkForm())

    def post(self, request):
        """Send a magic link to the submitted email address."""
        form = MagicLinkForm(request.POST)
        if not form.is_valid():
            return self._render(request, form)

        email = form.cleaned_data["email"]
        try:
            send_sign_in_link(email, self._continue_url(request))
        except FirebaseAuthError as e:
            messages.error(request, f"Magic link error: {e}")
            return self._render(request, form)

        request.session[MAGIC_LINK_EMAIL_KEY] = email
        messages.success(request, "Check your email for the magic link.")
        return redirect(request.get_full_path())

    def _continue_url(self, request):
        url = request.build_absolute_uri(reverse("complete_log_in"))
        if self.next:
            url += "?" + urlencode({"next": self.next})
        return url

    def _render(self, request, form):
        return render(request, "auth/log_in.html", {"form": form, "next": self.next})


def complete_log_in(request):
    """Landing page of the emailed link: exchange the one-time code for a session."""
    oob_code = request.GET.get("oobCode")
    email = request.session.get(MAGIC_LINK_EMAIL_KEY) or request.GET.get("email")
    if not oob_code or not email:
        messages.error(request, "This sign-in link is invalid or was opened in a different browser.")
        return redirect("log_in")

    try:
        identity = sign_in_with_email_link(email, oob_code)
    except FirebaseAuthError as e:
        messages.error(request, f"Sign-in error: {e}")
        return redirect("log_in")

    try:
        user = UserRepo().get_or_create_for_firebase(identity["uid"], identity["email"])
    except SurfaceLogError as e:
        logger.error("Account lookup failed for firebase uid %s: %s", identity["uid"], e)
        messages.error(request, f"Sign-in error: {e.message}")
        return redirect("log_in")

    login(request, user, backend='django.contrib.auth.backends.ModelBackend')
    request.session.pop(MAGIC_LINK_EMAIL_KEY, None)
    logger.info("User %s signed in with email link", user.pk)
    messages.success(request, f"Signed in as {user.email}.")
    return redirect(_safe_next(request, request.GET.get("next")) or "home")
