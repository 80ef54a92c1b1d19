from datetime import timedelta
from django.urls import reverse
from django.utils import timezone
import uuid

from transmissions.models import Handle, Report, User
from transmissions.utils import normalize_handle


def reverse_with_next(url_name, next_url):
    """Extended version of reverse to generate URLs with redirects"""
    url = reverse(url_name)
    url += f"?next={next_url}"
    return url


def make_user(**kwargs):
    username = kwargs.pop("username", f"reporter_{uuid.uuid4().hex[:6]}")
    email = kwargs.pop("email", f"{username}@example.org")
    password = kwargs.pop("password", "Password123")
    return User.objects.create_user(username=username, email=email, password=password, **kwargs)


def make_handle(display="Fox", platform=None):
    return Handle.objects.create(
        display=display,
        canonical_key=normalize_handle(display),
        platform=platform,
    )


def make_report(handle=None, *, age=None, **fields):
    """
    creates and returns a report. age (a timedelta) backdates created_at.
    """
    if handle is None:
        handle = make_handle()
    fields.setdefault("description", "ran past us at extraction")
    report = Report.objects.create(handle=handle, **fields)
    if age is not None:
        report.created_at = timezone.now() - age
        Report.objects.filter(pk=report.pk).update(created_at=report.created_at)
    return report


def days(n):
    return timedelta(days=n)


class LogInTester:
    def _is_logged_in(self):
        return '_auth_user_id' in self.client.session.keys()
