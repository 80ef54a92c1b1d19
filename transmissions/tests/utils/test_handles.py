from django.test import SimpleTestCase
from transmissions.utils import normalize_handle


class NormalizeHandleTests(SimpleTestCase):

    def test_separator_variants_share_one_key(self):
        for raw in ["Fox_Hound", "fox hound", "FOX-HOUND", "fox.hound", "  Fox _-. Hound  "]:
            with self.subTest(raw=raw):
                self.assertEqual(normalize_handle(raw), "foxhound")

    def test_lowercases(self):
        self.assertEqual(normalize_handle("ZeRo"), "zero")

    def test_keeps_other_characters(self):
        self.assertEqual(normalize_handle("Ghost#1234"), "ghost#1234")
        self.assertEqual(normalize_handle("Señor Rat"), "señorrat")

    def test_tabs_and_newlines_are_separators(self):
        self.assertEqual(normalize_handle("a\tb\nc"), "abc")

    def test_empty_and_separator_only_input(self):
        self.assertEqual(normalize_handle(""), "")
        self.assertEqual(normalize_handle(None), "")
        self.assertEqual(normalize_handle(" _-. "), "")

    def test_idempotent(self):
        for raw in ["Fox_Hound", "a.b-c d", "ÉCLAIR x"]:
            with self.subTest(raw=raw):
                once = normalize_handle(raw)
                self.assertEqual(normalize_handle(once), once)

    def test_output_has_no_separators_or_uppercase(self):
        key = normalize_handle("The Big_Bad.Wolf-99")
        self.assertEqual(key, "thebigbadwolf99")
        self.assertEqual(key, key.lower())
        for ch in " \t._-":
            self.assertNotIn(ch, key)
