"""
Tests for the page graph model and its JSON export.
"""

import json
import unittest

from graph_crawler.core.export import graph_to_dict, iter_pages
from graph_crawler.core.models import Image, Page, Task


class TestPage(unittest.TestCase):
    def test_defaults(self):
        page = Page("https://example.com/")
        self.assertEqual(page.title, "")
        self.assertEqual(page.images, ())
        self.assertEqual(page.links, ())

    def test_images_are_ordered_set(self):
        page = Page("https://example.com/")
        a = Image("https://example.com/a.png", "a")
        b = Image("https://example.com/b.png", "b")
        page.add_image(a)
        page.add_image(b)
        page.add_image(a)
        self.assertEqual(page.images, (a, b))

    def test_links_are_ordered_set(self):
        page = Page("https://example.com/")
        child = Page("https://example.com/child")
        page.add_link(child)
        page.add_link(page)
        page.add_link(child)
        self.assertEqual([p.url for p in page.links], [child.url, page.url])

    def test_identity_is_url(self):
        self.assertEqual(Page("https://example.com/", "x"), Page("https://example.com/", "y"))
        self.assertEqual(len({Page("u"), Page("u")}), 1)

    def test_url_and_title_read_only(self):
        page = Page("https://example.com/", "t")
        with self.assertRaises(AttributeError):
            page.title = "other"

    def test_repr_of_cyclic_graph(self):
        a = Page("https://example.com/a", "A")
        b = Page("https://example.com/b", "B")
        a.add_link(b)
        b.add_link(a)
        self.assertIn("https://example.com/b", repr(a))
        self.assertIn("https://example.com/a", repr(b))


class TestValueTypes(unittest.TestCase):
    def test_image_is_frozen(self):
        img = Image("https://example.com/a.png", "a.png")
        with self.assertRaises(AttributeError):
            img.filename = "b.png"

    def test_task_is_frozen(self):
        task = Task("https://example.com/", 2)
        with self.assertRaises(AttributeError):
            task.depth = 1


class TestExport(unittest.TestCase):
    def setUp(self):
        self.logo = Image("https://example.com/logo.png", "logo")
        self.a = Page("https://example.com/a", "A")
        self.b = Page("https://example.com/b", "B")
        self.c = Page("https://example.com/c")
        self.a.add_image(self.logo)
        self.b.add_image(self.logo)
        self.a.add_link(self.b)
        self.a.add_link(self.c)
        self.b.add_link(self.a)
        self.b.add_link(self.c)

    def test_iter_pages_breadth_first_once(self):
        self.assertEqual([p.url for p in iter_pages(self.a)], [self.a.url, self.b.url, self.c.url])

    def test_graph_to_dict(self):
        data = graph_to_dict(self.a)
        self.assertEqual(data["root"], self.a.url)
        self.assertEqual(len(data["pages"]), 3)
        first = data["pages"][0]
        self.assertEqual(first["title"], "A")
        self.assertEqual(first["images"], [{"url": self.logo.url, "filename": "logo"}])
        self.assertEqual(first["links"], [self.b.url, self.c.url])
        self.assertEqual(data["pages"][1]["links"], [self.a.url, self.c.url])

    def test_json_serialisable(self):
        text = json.dumps(graph_to_dict(self.a))
        self.assertIn('"root"', text)


if __name__ == "__main__":
    unittest.main()
