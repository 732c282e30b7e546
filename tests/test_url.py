"""
Tests for URL resolution, fragment stripping and filename mapping.
"""

import unittest

from graph_crawler.config import MAX_FILENAME_LENGTH
from graph_crawler.errors import MalformedURLError
from graph_crawler.utils.url import local_filename, resolve_url, strip_fragment


class TestStripFragment(unittest.TestCase):
    def test_strips_fragment(self):
        self.assertEqual(
            strip_fragment("https://example.com/page.html#section"),
            "https://example.com/page.html",
        )

    def test_no_fragment_unchanged(self):
        url = "https://example.com/page.html?q=1"
        self.assertEqual(strip_fragment(url), url)

    def test_truncates_at_first_hash(self):
        self.assertEqual(strip_fragment("https://example.com/a#b#c"), "https://example.com/a")

    def test_idempotent(self):
        for url in ("", "#", "https://example.com/#x", "a#b#c", "https://example.com/"):
            once = strip_fragment(url)
            self.assertEqual(strip_fragment(once), once)


class TestResolveUrl(unittest.TestCase):
    PAGE = "https://example.com/blog/post.html"

    def test_absolute(self):
        self.assertEqual(
            resolve_url("https://other.org/x.png", self.PAGE), "https://other.org/x.png"
        )

    def test_relative_path(self):
        self.assertEqual(
            resolve_url("../images/logo.png", self.PAGE),
            "https://example.com/images/logo.png",
        )

    def test_root_relative(self):
        self.assertEqual(
            resolve_url("/css/style.css", self.PAGE), "https://example.com/css/style.css"
        )

    def test_fragment_only_keeps_page(self):
        self.assertEqual(
            resolve_url("#section", self.PAGE), "https://example.com/blog/post.html#section"
        )

    def test_surrounding_whitespace_ignored(self):
        self.assertEqual(
            resolve_url("  next.html ", self.PAGE), "https://example.com/blog/next.html"
        )

    def test_mailto_rejected(self):
        with self.assertRaises(MalformedURLError):
            resolve_url("mailto:someone@example.com", self.PAGE)

    def test_javascript_rejected(self):
        with self.assertRaises(MalformedURLError):
            resolve_url("javascript:void(0)", self.PAGE)

    def test_no_scheme_rejected(self):
        with self.assertRaises(MalformedURLError):
            resolve_url("not a url", "not a url")

    def test_bad_port_rejected(self):
        with self.assertRaises(MalformedURLError):
            resolve_url("http://example.com:99999999999/", self.PAGE)

    def test_malformed_error_is_value_error(self):
        with self.assertRaises(ValueError):
            resolve_url("ftp://example.com/file", self.PAGE)


class TestLocalFilename(unittest.TestCase):
    def test_no_path_separators(self):
        name = local_filename("https://example.com/images/logo.png")
        self.assertNotIn("/", name)
        self.assertNotIn("\\", name)
        self.assertNotIn(":", name)

    def test_deterministic(self):
        url = "https://example.com/a.png?size=2"
        self.assertEqual(local_filename(url), local_filename(url))

    def test_distinct_urls_distinct_names(self):
        self.assertNotEqual(
            local_filename("https://example.com/a/b.png"),
            local_filename("https://example.com/a_b.png"),
        )

    def test_long_url_bounded(self):
        base = "https://example.com/" + "x" * 500
        name_a = local_filename(base + "/a.png")
        name_b = local_filename(base + "/b.png")
        self.assertLessEqual(len(name_a), MAX_FILENAME_LENGTH)
        self.assertLessEqual(len(name_b), MAX_FILENAME_LENGTH)
        self.assertNotEqual(name_a, name_b)

    def test_short_url_is_percent_encoded(self):
        self.assertEqual(
            local_filename("http://a.com/x.png"), "http%3A%2F%2Fa.com%2Fx.png"
        )


if __name__ == "__main__":
    unittest.main()
