from unittest.mock import patch
from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient
from transmissions.exceptions import StoreError
from transmissions.models import Dispute, Flag, Handle, Report
from transmissions.services import FeedService
from transmissions.tests.helpers import make_handle, make_report, make_user


class ReportListApiTestCase(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.user = make_user()
        self.list_url = reverse('report_list_api')
        self.data = {
            "handle": "Fox_Hound",
            "platform": "PC",
            "sentiment": "good",
            "severity": "info",
            "encounter": "comms",
            "description": "Called every third party.",
        }

    def test_list_is_public_and_excludes_hidden(self):
        report = make_report(make_handle("Fox"))
        make_report(make_handle("Wolf"), hidden=True)
        response = self.client.get(self.list_url)
        self.assertEqual(response.status_code, 200)
        results = response.json()["results"]
        self.assertEqual([item["id"] for item in results], [str(report.id)])
        self.assertEqual(results[0]["handle"], "Fox")
        self.assertEqual(results[0]["severity_label"], "FYI")

    def test_list_rejects_bad_limit(self):
        response = self.client.get(self.list_url, {"limit": "many"})
        self.assertEqual(response.status_code, 400)

    def test_list_store_error_is_503(self):
        with patch.object(FeedService, "latest", side_effect=StoreError("down")):
            response = self.client.get(self.list_url)
        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json()["detail"], "down")

    def test_create_requires_authentication(self):
        response = self.client.post(self.list_url, self.data, format="json")
        self.assertIn(response.status_code, [401, 403])
        self.assertEqual(Report.objects.count(), 0)

    def test_user_can_create_report(self):
        self.client.force_authenticate(user=self.user)
        response = self.client.post(self.list_url, self.data, format="json")
        self.assertEqual(response.status_code, 201)
        report = Report.objects.get()
        self.assertEqual(report.reporter, self.user)
        self.assertEqual(report.category, "general")
        self.assertEqual(response.json()["handle"], "Fox_Hound")

    def test_blank_description_is_400_and_writes_nothing(self):
        self.client.force_authenticate(user=self.user)
        self.data["description"] = "  "
        response = self.client.post(self.list_url, self.data, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"], "Description is required.")
        self.assertEqual(Handle.objects.count(), 0)

    def test_unknown_sentiment_is_400(self):
        self.client.force_authenticate(user=self.user)
        self.data["sentiment"] = "amazing"
        response = self.client.post(self.list_url, self.data, format="json")
        self.assertEqual(response.status_code, 400)


class ReadApiTestCase(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.handle = make_handle("Fox_Hound", platform="PC")
        self.report = make_report(self.handle, sentiment="good")

    def test_search(self):
        response = self.client.get(reverse('search_api'), {"q": "fox hound"})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["status"], "")
        self.assertEqual([item["id"] for item in body["results"]], [str(self.report.id)])

    def test_search_blank(self):
        response = self.client.get(reverse('search_api'))
        self.assertEqual(response.json()["status"], "Type a handle to search.")

    def test_handle_history(self):
        response = self.client.get(reverse('handle_api', args=["FOX-HOUND"]))
        body = response.json()
        self.assertEqual(body["signature"], "foxhound")
        self.assertEqual(body["display_name"], "Fox_Hound")
        self.assertEqual(body["platform"], "PC")
        self.assertEqual(len(body["results"]), 1)

    def test_leaderboards(self):
        response = self.client.get(reverse('leaderboards_api'))
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["most_reported_all_time"], [
            {"handle_id": str(self.handle.id), "handle": "Fox_Hound", "platform": "PC", "value": 1},
        ])
        self.assertEqual(body["nicest"], [])


class ModerationApiTestCase(TestCase):

    def setUp(self):
        self.client = APIClient()
        self.user = make_user()
        self.report = make_report()
        self.flag_url = reverse('flag_api', args=[self.report.id])
        self.dispute_url = reverse('dispute_api', args=[self.report.id])

    def test_flag_requires_authentication(self):
        response = self.client.post(self.flag_url)
        self.assertIn(response.status_code, [401, 403])

    def test_flag_then_duplicate_is_409(self):
        self.client.force_authenticate(user=self.user)
        self.assertEqual(self.client.post(self.flag_url).status_code, 201)
        response = self.client.post(self.flag_url)
        self.assertEqual(response.status_code, 409)
        self.assertEqual(Flag.objects.count(), 1)

    def test_flag_unknown_report_is_404(self):
        self.client.force_authenticate(user=self.user)
        response = self.client.post(reverse('flag_api', args=["00000000-0000-0000-0000-000000000000"]))
        self.assertEqual(response.status_code, 404)

    def test_dispute(self):
        self.client.force_authenticate(user=self.user)
        response = self.client.post(self.dispute_url, {"message": "Not me."}, format="json")
        self.assertEqual(response.status_code, 201)
        self.assertEqual(Dispute.objects.get().message, "Not me.")

    def test_blank_dispute_is_400(self):
        self.client.force_authenticate(user=self.user)
        response = self.client.post(self.dispute_url, {"message": ""}, format="json")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(Dispute.objects.count(), 0)


class ProfileApiTestCase(TestCase):

    def test_requires_authentication(self):
        response = APIClient().get(reverse('profile_api'))
        self.assertIn(response.status_code, [401, 403])

    def test_returns_linked_account(self):
        user = make_user(email="fox@example.org", firebase_uid="uid-fox")
        client = APIClient()
        client.force_authenticate(user=user)
        response = client.get(reverse('profile_api'))
        self.assertEqual(response.json(), {"uid": "uid-fox", "email": "fox@example.org"})
