from django.test import RequestFactory, SimpleTestCase
from transmissions.utils.http import is_ajax


class IsAjaxTests(SimpleTestCase):
    def setUp(self):
        self.factory = RequestFactory()

    def test_plain_request_is_not_ajax(self):
        self.assertFalse(is_ajax(self.factory.post("/")))

    def test_xhr_header(self):
        request = self.factory.post("/", HTTP_X_REQUESTED_WITH="XMLHttpRequest")
        self.assertTrue(is_ajax(request))

    def test_htmx_header(self):
        self.assertTrue(is_ajax(self.factory.post("/", HTTP_HX_REQUEST="true")))

    def test_query_flag(self):
        self.assertTrue(is_ajax(self.factory.get("/?ajax=1")))

    def test_json_accept_header(self):
        request = self.factory.post("/", HTTP_ACCEPT="application/json")
        self.assertTrue(is_ajax(request))
