"""
Page metadata (title, description, Open Graph, Twitter) from `seo_metadata` rows.
"""
from typing import Any, Dict, Optional
from app.core.config import settings
from app.schemas.entities import SeoMetadata

PAGE_DEFAULT_METADATA: Dict[str, Dict[str, str]] = {
    "/": {
        "title": "EtherCore - Web Development, SEO & AI Automation",
        "description": "Custom websites, SEO and AI automation for growing businesses.",
    },
    "/services": {
        "title": "Services - EtherCore",
        "description": "Web development, SEO, Google Ads management and AI automation services.",
    },
    "/projects": {
        "title": "Projects - EtherCore",
        "description": "Selected websites, stores and automation projects we have delivered.",
    },
    "/blog": {
        "title": "Blog - EtherCore",
        "description": "Articles on web development, SEO and business automation.",
    },
    "/contact": {
        "title": "Contact - EtherCore",
        "description": "Book a free consultation or send us a message.",
    },
}


def generate_metadata(
    seo: Optional[SeoMetadata],
    fallback: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Map an SEO row to page metadata.

    Open Graph fields fall back to the meta fields; Twitter fields fall back
    to Open Graph, then meta.

    Args:
        seo: The row for the page, if any
        fallback: Returned unchanged when there is no row
    """
    if not seo:
        return dict(fallback or {})

    og_title = seo.og_title or seo.meta_title
    og_description = seo.og_description or seo.meta_description
    twitter_image = seo.twitter_image_url or seo.og_image_url

    metadata: Dict[str, Any] = {
        "title": seo.meta_title,
        "description": seo.meta_description,
        "keywords": seo.meta_keywords,
        "robots": seo.robots or "index, follow",
        "open_graph": {
            "title": og_title,
            "description": og_description,
            "type": seo.og_type or "website",
            "images": [seo.og_image_url] if seo.og_image_url else None,
        },
        "twitter": {
            "card": seo.twitter_card or "summary_large_image",
            "title": seo.twitter_title or og_title,
            "description": seo.twitter_description or og_description,
            "images": [twitter_image] if twitter_image else None,
        },
    }

    if seo.canonical_url:
        metadata["canonical"] = seo.canonical_url

    return metadata


def generate_page_metadata(
    page_route: str,
    seo: Optional[SeoMetadata],
    title: Optional[str] = None,
    description: Optional[str] = None,
    image: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Metadata for a route, with optional per-render overrides.

    Overrides (e.g. a blog post's own title) replace the stored values in
    every channel. Without a stored row the route's defaults are used.
    """
    fallback = dict(PAGE_DEFAULT_METADATA.get(page_route, {"title": settings.SITE_NAME}))
    if title:
        fallback["title"] = title
    if description:
        fallback["description"] = description

    if seo and (title or description or image):
        seo = seo.model_copy(update={
            "meta_title": title or seo.meta_title,
            "meta_description": description or seo.meta_description,
            "og_title": title or seo.og_title or seo.meta_title,
            "og_description": description or seo.og_description or seo.meta_description,
            "og_image_url": image or seo.og_image_url,
            "twitter_title": title or seo.twitter_title,
            "twitter_description": description or seo.twitter_description,
            "twitter_image_url": image or seo.twitter_image_url,
        })

    return generate_metadata(seo, fallback)
