import unittest

from scrap2md.core.errors import InvalidIdentifier
from scrap2md.core.slug import extract_slug, relative_link


class ExtractSlugTest(unittest.TestCase):
    def test_url_with_scraps_segment(self):
        self.assertEqual(extract_slug("https://zenn.dev/foo/scraps/barbaz"), "barbaz")

    def test_bare_slug_passes_through(self):
        self.assertEqual(extract_slug("barbaz"), "barbaz")

    def test_trailing_separators_are_stripped(self):
        self.assertEqual(extract_slug("https://example.com/scraps/slug/"), "slug")
        self.assertEqual(extract_slug("https://example.com/scraps/slug///"), "slug")
        self.assertEqual(extract_slug("  barbaz/ \n"), "barbaz")

    def test_empty_inputs_are_rejected(self):
        for value in ["", "   ", "/", "https://zenn.dev/foo/scraps/", "https://zenn.dev/foo/scraps//"]:
            with self.subTest(value=value):
                with self.assertRaises(InvalidIdentifier):
                    extract_slug(value)


class RelativeLinkTest(unittest.TestCase):
    def test_absolute_url_becomes_path(self):
        self.assertEqual(relative_link("https://zenn.dev/foo/scraps/barbaz"), "/foo/scraps/barbaz")

    def test_bare_slug_is_kept(self):
        self.assertEqual(relative_link("barbaz"), "barbaz")


if __name__ == "__main__":
    unittest.main()
