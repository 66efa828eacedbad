"""
Database integration with Supabase for the agency site.

Every read helper degrades gracefully: on any error it logs and returns
``None`` or an empty list so a page can still render with fallback content.
The Supabase client is synchronous, so queries run in a worker thread to let
page handlers gather independent fetches concurrently.
"""
import asyncio
from datetime import datetime
from typing import Any, Dict, List, Optional, Type, TypeVar
from pydantic import BaseModel, ValidationError
from supabase import Client, ClientOptions, create_client
from app.core.config import settings
from app.core.logging import logger
from app.schemas.entities import (
    AutomationGalleryItem,
    Blog,
    CampaignVideo,
    CompanyInfo,
    Developer,
    HeroSection,
    LegalPage,
    Portfolio,
    PromoOffer,
    PromoPackage,
    PromoSEM,
    SeoMetadata,
    Service,
    Testimonial,
)
from app.utils.campaigns import PromoKind

ModelT = TypeVar("ModelT", bound=BaseModel)

# Table names for database operations
BLOGS_TABLE = "blogs"
PORTFOLIO_TABLE = "portfolio"
SERVICES_TABLE = "services"
TESTIMONIALS_TABLE = "testimonials"
COMPANY_INFO_TABLE = "company_info"
HERO_SECTIONS_TABLE = "hero_sections"
SEO_METADATA_TABLE = "seo_metadata"
LEGAL_PAGES_TABLE = "legal_pages"
CAMPAIGN_VIDEOS_TABLE = "campaign_videos"
PROMO_WEB_TABLE = "promo_web"
PROMO_SEO_TABLE = "promo_seo"
PROMO_SEM_TABLE = "promo_sem"
PROMO_AUTOMATION_TABLE = "promo_automation"
AUTOMATION_GALLERY_TABLE = "automation_gallery"
DEVELOPERS_TABLE = "developers"
CONTACTS_TABLE = "contacts"

ECOMMERCE_PROMO_SLUG = "ecommerce-package-800"

PROMO_TABLES: Dict[PromoKind, tuple] = {
    PromoKind.WEB: (PROMO_WEB_TABLE, PromoOffer),
    PromoKind.ECOMMERCE: (PROMO_WEB_TABLE, PromoOffer),
    PromoKind.SEO: (PROMO_SEO_TABLE, PromoOffer),
    PromoKind.SEM: (PROMO_SEM_TABLE, PromoSEM),
    PromoKind.AUTOMATION: (PROMO_AUTOMATION_TABLE, PromoOffer),
}

_client: Optional[Client] = None


def get_supabase() -> Client:
    """
    Return the shared Supabase client, creating it on first use.

    PostgREST calls fail after ``SUPABASE_TIMEOUT`` seconds; nothing retries.
    """
    global _client
    if _client is None:
        _client = create_client(
            settings.SUPABASE_URL,
            settings.SUPABASE_KEY,
            options=ClientOptions(
                postgrest_client_timeout=settings.SUPABASE_TIMEOUT,
                auto_refresh_token=False,
                persist_session=False,
            ),
        )
        logger.info("Supabase client initialized successfully")
    return _client


async def _execute(query) -> List[Dict[str, Any]]:
    """Run a PostgREST query builder off the event loop and return its rows."""
    response = await asyncio.to_thread(query.execute)
    return response.data or []


def _parse_rows(model: Type[ModelT], rows: List[Dict[str, Any]]) -> List[ModelT]:
    """Validate rows into models, skipping (and logging) malformed ones."""
    parsed = []
    for row in rows:
        try:
            parsed.append(model.model_validate(row))
        except ValidationError as e:
            logger.warning(f"Skipping malformed {model.__name__} row {row.get('id')}: {e.error_count()} errors")
    return parsed


def _first(model: Type[ModelT], rows: List[Dict[str, Any]]) -> Optional[ModelT]:
    parsed = _parse_rows(model, rows[:1])
    return parsed[0] if parsed else None


# =============================================
# SITE-WIDE CONTENT
# =============================================

async def get_company_info() -> Optional[CompanyInfo]:
    """
    Get the active company record.

    Returns:
        The company info or None if missing or the fetch failed
    """
    try:
        rows = await _execute(
            get_supabase().table(COMPANY_INFO_TABLE).select("*").eq("is_active", True).limit(1)
        )
        return _first(CompanyInfo, rows)
    except Exception as e:
        logger.error(f"Error fetching company info: {str(e)}")
        return None


async def get_hero_section(page_route: str) -> Optional[HeroSection]:
    try:
        rows = await _execute(
            get_supabase().table(HERO_SECTIONS_TABLE)
            .select("*")
            .eq("page_route", page_route)
            .eq("is_active", True)
            .limit(1)
        )
        return _first(HeroSection, rows)
    except Exception as e:
        logger.error(f"Error fetching hero section for {page_route}: {str(e)}")
        return None


async def get_seo_metadata(page_route: str) -> Optional[SeoMetadata]:
    try:
        rows = await _execute(
            get_supabase().table(SEO_METADATA_TABLE)
            .select("*")
            .eq("page_route", page_route)
            .eq("is_active", True)
            .limit(1)
        )
        return _first(SeoMetadata, rows)
    except Exception as e:
        logger.error(f"Error fetching SEO metadata for {page_route}: {str(e)}")
        return None


# =============================================
# SERVICES, PORTFOLIO AND TESTIMONIALS
# =============================================

async def get_services(active_only: bool = False) -> List[Service]:
    """
    Get services ordered by creation date (oldest first).

    Args:
        active_only: Only return services flagged ``is_active``

    Returns:
        List of services, empty on failure
    """
    try:
        query = get_supabase().table(SERVICES_TABLE).select("*")
        if active_only:
            query = query.eq("is_active", True)
        rows = await _execute(query.order("created_at"))
        return _parse_rows(Service, rows)
    except Exception as e:
        logger.error(f"Error fetching services: {str(e)}")
        return []


async def get_portfolio(titles: Optional[List[str]] = None) -> List[Portfolio]:
    """
    Get portfolio projects, newest first.

    Args:
        titles: Restrict to these project titles (campaign showcases)
    """
    try:
        query = get_supabase().table(PORTFOLIO_TABLE).select("*")
        if titles:
            query = query.in_("title", titles)
        rows = await _execute(query.order("created_at", desc=True))
        return _parse_rows(Portfolio, rows)
    except Exception as e:
        logger.error(f"Error fetching portfolio: {str(e)}")
        return []


async def get_testimonials(limit: Optional[int] = None) -> List[Testimonial]:
    try:
        query = get_supabase().table(TESTIMONIALS_TABLE).select("*").order("created_at", desc=True)
        if limit:
            query = query.limit(limit)
        rows = await _execute(query)
        return _parse_rows(Testimonial, rows)
    except Exception as e:
        logger.error(f"Error fetching testimonials: {str(e)}")
        return []


async def get_developers() -> List[Developer]:
    try:
        rows = await _execute(
            get_supabase().table(DEVELOPERS_TABLE)
            .select("*")
            .eq("is_active", True)
            .order("display_order")
        )
        return _parse_rows(Developer, rows)
    except Exception as e:
        logger.error(f"Error fetching developers: {str(e)}")
        return []


async def get_automation_gallery(limit: int = 3) -> List[AutomationGalleryItem]:
    try:
        rows = await _execute(
            get_supabase().table(AUTOMATION_GALLERY_TABLE)
            .select("*")
            .eq("is_active", True)
            .order("display_order")
            .limit(limit)
        )
        return _parse_rows(AutomationGalleryItem, rows)
    except Exception as e:
        logger.error(f"Error fetching automation gallery: {str(e)}")
        return []


# =============================================
# BLOGS
# =============================================

async def get_blogs(limit: Optional[int] = None) -> List[Blog]:
    """
    Get blog posts, most recently published first.

    Args:
        limit: Maximum number of posts to return
    """
    try:
        query = get_supabase().table(BLOGS_TABLE).select("*").order("published_at", desc=True)
        if limit:
            query = query.limit(limit)
        rows = await _execute(query)
        return _parse_rows(Blog, rows)
    except Exception as e:
        logger.error(f"Error fetching blogs: {str(e)}")
        return []


async def get_blog_by_slug(slug: str) -> Optional[Blog]:
    try:
        rows = await _execute(
            get_supabase().table(BLOGS_TABLE).select("*").eq("slug", slug).limit(1)
        )
        return _first(Blog, rows)
    except Exception as e:
        logger.error(f"Error fetching blog {slug}: {str(e)}")
        return None


async def get_blogs_published_since(start: datetime) -> List[Blog]:
    try:
        rows = await _execute(
            get_supabase().table(BLOGS_TABLE)
            .select("*")
            .gte("published_at", start.isoformat())
            .order("published_at", desc=True)
        )
        return _parse_rows(Blog, rows)
    except Exception as e:
        logger.error(f"Error fetching blogs published since {start.isoformat()}: {str(e)}")
        return []


async def get_blogs_with_tag(tag: str) -> List[Blog]:
    try:
        rows = await _execute(
            get_supabase().table(BLOGS_TABLE)
            .select("*")
            .contains("tags", [tag])
            .order("published_at", desc=True)
        )
        return _parse_rows(Blog, rows)
    except Exception as e:
        logger.error(f"Error fetching blogs tagged {tag}: {str(e)}")
        return []


async def get_blog_tags() -> List[str]:
    """
    Get every tag used by a blog post, de-duplicated in first-seen order.
    """
    try:
        rows = await _execute(get_supabase().table(BLOGS_TABLE).select("tags"))
    except Exception as e:
        logger.error(f"Error fetching blog tags: {str(e)}")
        return []

    return list(dict.fromkeys(tag for row in rows for tag in (row.get("tags") or [])))


# =============================================
# CAMPAIGNS AND PROMOS
# =============================================

async def get_campaign_video(page_slug: str) -> Optional[CampaignVideo]:
    try:
        rows = await _execute(
            get_supabase().table(CAMPAIGN_VIDEOS_TABLE)
            .select("*")
            .eq("page_slug", page_slug)
            .eq("is_active", True)
            .order("priority")
            .limit(1)
        )
        return _first(CampaignVideo, rows)
    except Exception as e:
        logger.error(f"Error fetching campaign video for {page_slug}: {str(e)}")
        return None


async def get_promo(kind: PromoKind) -> Optional[PromoPackage]:
    """
    Get the current promo package of a given kind.

    The e-commerce package lives in ``promo_web`` under a fixed slug; every
    other kind is the most recently created active row of its own table.

    Args:
        kind: Which promo package to fetch

    Returns:
        The promo package, or None so the page falls back to default copy
    """
    table, model = PROMO_TABLES[kind]
    try:
        query = get_supabase().table(table).select("*")
        if kind == PromoKind.ECOMMERCE:
            query = query.eq("slug", ECOMMERCE_PROMO_SLUG)
        else:
            query = query.eq("is_active", True).order("created_at", desc=True)
        rows = await _execute(query.limit(1))
        return _first(model, rows)
    except Exception as e:
        logger.error(f"Error fetching {kind.value} promo data: {str(e)}")
        return None


# =============================================
# LEGAL PAGES
# =============================================

async def get_legal_page(page_type: str) -> Optional[LegalPage]:
    try:
        rows = await _execute(
            get_supabase().table(LEGAL_PAGES_TABLE)
            .select("*")
            .eq("page_type", page_type)
            .eq("is_active", True)
            .limit(1)
        )
        return _first(LegalPage, rows)
    except Exception as e:
        logger.error(f"Error fetching {page_type} page: {str(e)}")
        return None


# =============================================
# CONTACTS
# =============================================

async def insert_contact(contact_record: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """
    Store a contact form submission.

    Args:
        contact_record: Column values for the ``contacts`` row

    Returns:
        The inserted row, or None if the insert failed
    """
    try:
        rows = await _execute(get_supabase().table(CONTACTS_TABLE).insert(contact_record))
        if not rows:
            logger.error("Contact insert returned no data")
            return None
        return rows[0]
    except Exception as e:
        logger.error(f"Error inserting contact: {str(e)}")
        return None
