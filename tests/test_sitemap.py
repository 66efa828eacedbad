from __future__ import annotations

import unittest
import xml.etree.ElementTree as ET
from datetime import datetime, timezone

from support import ApiTestCase, settings

from app.schemas.entities import Blog, Portfolio
from app.utils.sitemap import STATIC_PAGES, build_sitemap, build_sitemap_entry

NS = {"sm": "http://www.sitemaps.org/schemas/sitemap/0.9"}


def _locs(xml_text: str) -> list:
    root = ET.fromstring(xml_text.encode("utf-8"))
    return [loc.text for loc in root.findall("sm:url/sm:loc", NS)]


class TestBuildSitemap(unittest.TestCase):
    def test_static_pages_only(self) -> None:
        locs = _locs(build_sitemap([], []))

        self.assertEqual(len(STATIC_PAGES), 11)
        self.assertEqual(len(locs), 11)
        self.assertEqual(locs[0], f"{settings.SITE_URL.rstrip('/')}/")

    def test_published_blogs_and_projects_are_listed(self) -> None:
        blogs = [
            Blog(title="Live", slug="live-post", published_at="2024-01-01T00:00:00+00:00"),
            Blog(title="Draft", slug="draft-post"),
        ]
        projects = [Portfolio(id=3, title="IndoMath"), Portfolio(id=9, title="BetterSelf")]
        locs = _locs(build_sitemap(blogs, projects, now=datetime(2024, 5, 1, tzinfo=timezone.utc)))
        base = settings.SITE_URL.rstrip("/")

        self.assertEqual(len(locs), 11 + 1 + 2)
        self.assertIn(f"{base}/blog/live-post", locs)
        self.assertNotIn(f"{base}/blog/draft-post", locs)
        self.assertEqual(locs[-2:], [f"{base}/projects/3", f"{base}/projects/9"])

    def test_entry_escapes_location(self) -> None:
        entry = build_sitemap_entry("/blog/a&b", lastmod=None, changefreq=None, priority=None)

        self.assertIn("a&amp;b", entry)
        self.assertNotIn("<lastmod>", entry)
        self.assertNotIn("<priority>", entry)


class TestSitemapEndpoint(ApiTestCase):
    def test_lists_blogs_and_projects(self) -> None:
        self.db.tables["blogs"] = [
            {"id": 1, "title": "Live", "slug": "live", "published_at": "2024-01-01T00:00:00+00:00"},
        ]
        self.db.tables["portfolio"] = [{"id": 4, "title": "Mahonia Decor"}]

        response = self.client.get("/sitemap.xml")

        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.headers["content-type"].startswith("application/xml"))
        self.assertEqual(response.headers["cache-control"], "public, max-age=3600, s-maxage=3600")
        self.assertEqual(len(_locs(response.text)), 13)

    def test_degrades_to_static_pages(self) -> None:
        self.db.failing_tables.update({"blogs", "portfolio"})

        response = self.client.get("/sitemap.xml")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(_locs(response.text)), 11)

    def test_rows_with_null_columns_are_listed(self) -> None:
        self.db.tables["blogs"] = [
            {"id": 1, "title": "Post", "slug": "post", "content": None, "tags": None,
             "published_at": "2024-01-01T00:00:00+00:00"},
        ]
        self.db.tables["portfolio"] = [{"id": 7, "title": "Untitled", "description": None}]
        base = settings.SITE_URL.rstrip("/")

        locs = _locs(self.client.get("/sitemap.xml").text)

        self.assertIn(f"{base}/blog/post", locs)
        self.assertIn(f"{base}/projects/7", locs)
