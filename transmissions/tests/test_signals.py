from unittest.mock import patch
from django.test import TestCase, override_settings
from transmissions.models import Flag
from transmissions.tests.helpers import make_report, make_user


class FlagSignalTests(TestCase):

    def setUp(self):
        self.report = make_report()

    @patch("transmissions.signals.apply_flag_threshold")
    def test_new_flag_checks_threshold(self, mock_apply):
        Flag.objects.create(report=self.report, user=make_user())
        mock_apply.assert_called_once_with(self.report.id)

    @patch("transmissions.signals.apply_flag_threshold")
    def test_resaving_flag_does_not_check_again(self, mock_apply):
        flag = Flag.objects.create(report=self.report, user=make_user())
        mock_apply.reset_mock()
        flag.save()
        mock_apply.assert_not_called()

    @override_settings(SURFACELOG_FLAG_HIDE_THRESHOLD=2)
    def test_report_hidden_after_enough_flags(self):
        Flag.objects.create(report=self.report, user=make_user())
        Flag.objects.create(report=self.report, user=make_user())
        self.report.refresh_from_db()
        self.assertTrue(self.report.hidden)
