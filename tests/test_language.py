import unittest
from pathlib import Path

from filestore.models.common import LanguageCode
from filestore.models.context import ServiceContext
from filestore.services.language import resolve_language_code
from filestore.services.storage import FileServiceProvider

class TestResolveLanguageCode(unittest.TestCase):
    def test_requested_wins_over_configured(self):
        self.assertEqual(resolve_language_code("EN", "DE"), LanguageCode.EN)

    def test_configured_used_without_request(self):
        self.assertEqual(resolve_language_code(None, "FR"), LanguageCode.FR)

    def test_invalid_configured_falls_to_default(self):
        with self.assertLogs("filestore.services.language", level="WARNING"):
            self.assertEqual(resolve_language_code(None, "XX"), LanguageCode.default())

    def test_invalid_request_falls_to_configured(self):
        with self.assertLogs("filestore.services.language", level="WARNING"):
            self.assertEqual(resolve_language_code("klingon", "IT"), LanguageCode.IT)

    def test_blank_tags_are_skipped(self):
        self.assertEqual(resolve_language_code("  ", ""), LanguageCode.EN)

    def test_explicit_default(self):
        self.assertEqual(resolve_language_code(None, None, LanguageCode.RM), LanguageCode.RM)

    def test_tags_are_case_insensitive(self):
        self.assertEqual(resolve_language_code(" de ", None), LanguageCode.DE)

    def test_parse(self):
        self.assertEqual(LanguageCode.parse("nl"), LanguageCode.NL)
        self.assertIsNone(LanguageCode.parse("XX"))
        self.assertIsNone(LanguageCode.parse(None))

class TestStickyLanguage(unittest.TestCase):
    def setUp(self):
        self.ctx = ServiceContext(base_dir=Path("."), persistent=False, init_params={"languageCode": "DE"})
        self.provider = FileServiceProvider(self.ctx, "companies")

    def test_explicit_request_beats_context(self):
        self.assertEqual(self.provider.set_language_code("EN"), LanguageCode.EN)

    def test_context_default(self):
        self.assertEqual(self.provider.set_language_code(), LanguageCode.DE)

    def test_other_context_is_used(self):
        other = ServiceContext(base_dir=Path("."), init_params={"languageCode": "FR"})
        self.assertEqual(self.provider.set_language_code(None, other), LanguageCode.FR)

    def test_resolved_value_is_sticky(self):
        self.assertEqual(self.provider.set_language_code("EN"), LanguageCode.EN)
        self.assertEqual(self.provider.set_language_code("FR"), LanguageCode.EN)
        self.assertEqual(self.provider.language_code, LanguageCode.EN)

    def test_reset_allows_new_resolution(self):
        self.provider.set_language_code("EN")
        self.provider.reset_language_code()
        self.assertIsNone(self.provider.language_code)
        self.assertEqual(self.provider.set_language_code("FR"), LanguageCode.FR)

if __name__ == "__main__":
    unittest.main()
