"""
XML sitemap generation.
"""
from datetime import datetime, timezone
from html import escape as xml_escape
from typing import List, Optional, Tuple
from app.core.config import settings
from app.schemas.entities import Blog, Portfolio

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"

# (path, changefreq, priority)
STATIC_PAGES: List[Tuple[str, str, str]] = [
    ("/", "weekly", "1.0"),
    ("/services", "monthly", "0.9"),
    ("/projects", "weekly", "0.8"),
    ("/blog", "daily", "0.8"),
    ("/campaign-seo", "weekly", "0.9"),
    ("/campaign-web", "weekly", "0.9"),
    ("/campaign-automation", "weekly", "0.9"),
    ("/contact", "monthly", "0.7"),
    ("/privacy", "yearly", "0.3"),
    ("/terms", "yearly", "0.3"),
    ("/cookies", "yearly", "0.3"),
]


def absolute_url(path: str) -> str:
    return f"{settings.SITE_URL.rstrip('/')}{path}"


def build_sitemap_entry(path: str, lastmod: Optional[str] = None, changefreq: Optional[str] = "weekly", priority: Optional[str] = "0.6") -> str:
    lines = [
        "  <url>",
        f"    <loc>{xml_escape(absolute_url(path))}</loc>",
    ]
    if lastmod:
        lines.append(f"    <lastmod>{xml_escape(lastmod)}</lastmod>")
    if changefreq:
        lines.append(f"    <changefreq>{changefreq}</changefreq>")
    if priority:
        lines.append(f"    <priority>{priority}</priority>")
    lines.append("  </url>")
    return "\n".join(lines)


def build_sitemap(blogs: List[Blog], projects: List[Portfolio], now: Optional[datetime] = None) -> str:
    """
    Render the sitemap document.

    Static pages are always listed. Each blog with a ``published_at`` adds
    ``/blog/<slug>`` and each portfolio item adds ``/projects/<id>``.

    Args:
        blogs: Blog posts; unpublished ones are skipped
        projects: Portfolio items
        now: Timestamp used as the static pages' lastmod
    """
    now_iso = (now or datetime.now(timezone.utc)).isoformat()

    entries = [
        build_sitemap_entry(path, now_iso, changefreq, priority)
        for path, changefreq, priority in STATIC_PAGES
    ]
    entries.extend(
        build_sitemap_entry(f"/blog/{blog.slug}", blog.updated_at or blog.published_at, "monthly", "0.7")
        for blog in blogs
        if blog.published_at
    )
    entries.extend(
        build_sitemap_entry(f"/projects/{project.id}", project.created_at, "monthly", "0.6")
        for project in projects
    )

    return "\n".join([
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<urlset xmlns="{SITEMAP_NAMESPACE}">',
        *entries,
        "</urlset>",
    ])
