from unittest.mock import patch
from django.test import TestCase
from django.urls import reverse
from transmissions.exceptions import StoreError
from transmissions.models import Flag
from transmissions.services import FeedService
from transmissions.tests.helpers import make_handle, make_report, make_user


class FeedViewTestCase(TestCase):

    def setUp(self):
        self.url = reverse('home')
        self.fox = make_handle("Fox")
        self.report = make_report(self.fox, description="camped the spawn")

    def test_home_url(self):
        self.assertEqual(self.url, '/')

    def test_get_home_as_guest(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, 'content/feed.html')
        self.assertEqual(response.context['reports'], [self.report])
        self.assertContains(response, "camped the spawn")
        self.assertNotContains(response, reverse('flag_report', args=[self.report.id]))

    def test_hidden_reports_not_shown(self):
        make_report(self.fox, description="secret text", hidden=True)
        response = self.client.get(self.url)
        self.assertNotContains(response, "secret text")

    def test_signed_in_user_sees_flag_state(self):
        user = make_user()
        Flag.objects.create(report=self.report, user=user)
        self.client.force_login(user)
        response = self.client.get(self.url)
        self.assertEqual(response.context['flagged_ids'], {str(self.report.id)})
        self.assertContains(response, "Flagged")

    def test_leaderboards_in_context(self):
        response = self.client.get(self.url)
        boards = response.context['boards']
        self.assertEqual([r.handle for r in boards.most_reported_all_time], ["Fox"])

    def test_store_error_shows_message(self):
        with patch.object(FeedService, "latest", side_effect=StoreError("offline")):
            response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context['reports'], [])
        messages = [str(m) for m in response.context['messages']]
        self.assertIn("Feed error: offline", messages)
