from django.contrib.auth.models import AnonymousUser
from django.test import RequestFactory, TestCase, override_settings
from transmissions.context_processors import session_identity, site_links
from transmissions.tests.helpers import make_user


class ContextProcessorTests(TestCase):

    def setUp(self):
        self.request = RequestFactory().get("/")

    def test_session_identity_for_guest(self):
        self.request.user = AnonymousUser()
        self.assertEqual(session_identity(self.request), {"signed_in_email": None})

    def test_session_identity_for_signed_in_user(self):
        self.request.user = make_user(email="fox@example.org")
        context = session_identity(self.request)
        self.assertEqual(context["signed_in_email"], "fox@example.org")
        self.assertIn("gravatar.com/avatar", context["navbar_avatar_url"])

    @override_settings(SURFACELOG_SUPPORT_URL="https://support.example.com/", SURFACELOG_FLAG_HIDE_THRESHOLD=4)
    def test_site_links(self):
        self.assertEqual(site_links(self.request), {
            "support_url": "https://support.example.com/",
            "flag_hide_threshold": 4,
        })
