from django.test import TestCase, override_settings
from django.urls import reverse


class PagesViewTestCase(TestCase):

    def test_rules(self):
        response = self.client.get(reverse('rules'))
        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, 'pages/rules.html')
        self.assertIn('last_updated', response.context)

    @override_settings(SURFACELOG_SUPPORT_URL="https://support.example.com/")
    def test_support(self):
        response = self.client.get(reverse('support'))
        self.assertEqual(response.status_code, 200)
        self.assertFalse(response.context['show_thanks'])
        self.assertContains(response, "https://support.example.com/")

    def test_support_thanks(self):
        response = self.client.get(reverse('support'), {"thanks": "1"})
        self.assertTrue(response.context['show_thanks'])
        self.assertContains(response, "Thanks for supporting the log!")
