"""
API endpoints that assemble server-side page data.

Each page handler gathers its independent fetches concurrently, runs the
page's schema manifest and returns the data bag, metadata, the schema list and
the rendered JSON-LD script blocks. A failure while loading a page's data is
logged and the page renders with an empty data shape.
"""
import asyncio
from typing import Any, Awaitable, Dict, List, Tuple
from fastapi import APIRouter, HTTPException
from app.core.config import settings
from app.core.database import (
    get_automation_gallery,
    get_blog_by_slug,
    get_blog_tags,
    get_blogs,
    get_campaign_video,
    get_company_info,
    get_developers,
    get_hero_section,
    get_legal_page,
    get_portfolio,
    get_promo,
    get_seo_metadata,
    get_services,
    get_testimonials,
)
from app.core.logging import logger
from app.schemas.entities import Service
from app.schemas.pages import PageResponse
from app.utils.campaigns import (
    CampaignProfile,
    generate_video_thumbnail_url,
    get_campaign,
    get_service_campaign_url,
    get_service_cta_text,
)
from app.utils.json_ld import render_json_ld
from app.utils.legal import (
    LEGAL_PAGE_TYPES,
    default_legal_page,
    format_last_updated,
    generate_legal_page_metadata,
    parse_content,
)
from app.utils.page_schema import PageSchemaData, PageType, generate_page_schema
from app.utils.popup_channel import POPUP_HASH
from app.utils.schema_builders import BLOG_DESCRIPTION_LENGTH
from app.utils.seo_metadata import generate_page_metadata

router = APIRouter()

PageLoad = Tuple[PageSchemaData, Dict[str, Any], Dict[str, Any]]

HOME_BLOG_COUNT = 3
HOME_TESTIMONIAL_COUNT = 6
CAMPAIGN_TESTIMONIAL_COUNT = 3


async def _fallback(value):
    return value


async def _render(page_type: PageType, loader: Awaitable[PageLoad], fallback_metadata: Dict[str, Any]) -> PageResponse:
    """
    Run a page loader and turn its result into a response.

    Args:
        page_type: Selects the schema manifest
        loader: Coroutine returning (entities, extra data, metadata)
        fallback_metadata: Metadata used when the loader fails
    """
    try:
        schema_data, extras, metadata = await loader
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error loading {page_type.value} page data: {str(e)}", exc_info=True)
        schema_data, extras, metadata = PageSchemaData(), {}, fallback_metadata

    schemas = generate_page_schema(page_type, schema_data)
    data = schema_data.model_dump(exclude={"promos"})
    data.update(extras)

    return PageResponse(
        page=page_type.value,
        data=data,
        metadata=metadata,
        schemas=schemas,
        json_ld=render_json_ld(schemas),
    )


def _with_campaign_links(services: List[Service]) -> List[Service]:
    """Fill in each service card's campaign link and CTA when not stored."""
    return [
        service.model_copy(update={
            "campaign_url": service.campaign_url or get_service_campaign_url(service.service_category, service.slug),
            "cta_text": service.cta_text or get_service_cta_text(service.service_category),
        })
        for service in services
    ]


# =============================================
# PAGE LOADERS
# =============================================

async def _load_home() -> PageLoad:
    company, hero, services, projects, blogs, testimonials, seo = await asyncio.gather(
        get_company_info(),
        get_hero_section("/"),
        get_services(active_only=True),
        get_portfolio(),
        get_blogs(limit=HOME_BLOG_COUNT),
        get_testimonials(limit=HOME_TESTIMONIAL_COUNT),
        get_seo_metadata("/"),
    )
    schema_data = PageSchemaData(
        company_info=company,
        hero=hero,
        services=_with_campaign_links(services),
        projects=projects,
        blogs=blogs,
    )
    extras = {"testimonials": [t.model_dump() for t in testimonials]}
    return schema_data, extras, generate_page_metadata("/", seo)


async def _load_services() -> PageLoad:
    company, hero, services, seo = await asyncio.gather(
        get_company_info(),
        get_hero_section("/services"),
        get_services(),
        get_seo_metadata("/services"),
    )
    schema_data = PageSchemaData(company_info=company, hero=hero, services=_with_campaign_links(services))
    return schema_data, {}, generate_page_metadata("/services", seo)


async def _load_contact() -> PageLoad:
    company, hero, developers, seo = await asyncio.gather(
        get_company_info(),
        get_hero_section("/contact"),
        get_developers(),
        get_seo_metadata("/contact"),
    )
    schema_data = PageSchemaData(company_info=company, hero=hero, developers=developers)
    return schema_data, {}, generate_page_metadata("/contact", seo)


async def _load_blog() -> PageLoad:
    company, hero, blogs, tags, seo = await asyncio.gather(
        get_company_info(),
        get_hero_section("/blog"),
        get_blogs(),
        get_blog_tags(),
        get_seo_metadata("/blog"),
    )
    schema_data = PageSchemaData(company_info=company, hero=hero, blogs=blogs)
    return schema_data, {"tags": tags}, generate_page_metadata("/blog", seo)


async def _load_blog_post(slug: str) -> PageLoad:
    company, blog, seo = await asyncio.gather(
        get_company_info(),
        get_blog_by_slug(slug),
        get_seo_metadata("/blog"),
    )
    if not blog:
        raise HTTPException(status_code=404, detail=f"Blog post '{slug}' not found")
    schema_data = PageSchemaData(company_info=company, blog=blog)

    metadata = generate_page_metadata(
        f"/blog/{slug}",
        seo,
        title=blog.title,
        description=blog.content[:BLOG_DESCRIPTION_LENGTH],
        image=blog.image_url,
    )
    return schema_data, {}, metadata


async def _load_projects() -> PageLoad:
    company, hero, projects, seo = await asyncio.gather(
        get_company_info(),
        get_hero_section("/projects"),
        get_portfolio(),
        get_seo_metadata("/projects"),
    )
    schema_data = PageSchemaData(company_info=company, hero=hero, projects=projects)
    return schema_data, {}, generate_page_metadata("/projects", seo)


async def _load_campaign(campaign: CampaignProfile) -> PageLoad:
    promo_fetches = asyncio.gather(*(get_promo(kind) for kind in campaign.promos))
    company, video, projects, gallery, testimonials, seo, promos = await asyncio.gather(
        get_company_info(),
        get_campaign_video(campaign.slug),
        get_portfolio(campaign.portfolio_titles) if campaign.portfolio_titles else _fallback([]),
        get_automation_gallery() if campaign.show_automation_gallery else _fallback([]),
        get_testimonials(limit=CAMPAIGN_TESTIMONIAL_COUNT),
        get_seo_metadata(campaign.route),
        promo_fetches,
    )

    schema_data = PageSchemaData(
        company_info=company,
        projects=projects,
        campaign_video=video,
        promos=list(zip(campaign.promos, promos)),
    )
    extras = {
        "campaign": campaign.model_dump(),
        "video_thumbnail_url": (
            generate_video_thumbnail_url(video.video_url, video.video_thumbnail_url) if video else None
        ),
        "promos": {
            kind.value: promo.model_dump() if promo else None
            for kind, promo in zip(campaign.promos, promos)
        },
        "automation_gallery": [item.model_dump() for item in gallery],
        "testimonials": [t.model_dump() for t in testimonials],
        "popup": {
            "auto_open_delay_seconds": settings.POPUP_AUTO_OPEN_DELAY_SECONDS,
            "trigger_hash": POPUP_HASH,
        },
    }
    metadata = generate_page_metadata(
        campaign.route,
        seo,
        title=None if seo else campaign.page_title,
        description=None if seo else campaign.page_description,
    )
    return schema_data, extras, metadata


async def _load_legal(page_type: str) -> PageLoad:
    company, legal_page = await asyncio.gather(get_company_info(), get_legal_page(page_type))
    if not legal_page:
        logger.info(f"No stored {page_type} page, using default content")
        legal_page = default_legal_page(page_type)

    extras = {
        "legal": {
            **legal_page.model_dump(),
            "last_updated_display": format_last_updated(legal_page.last_updated),
            "html": parse_content(legal_page.content),
        },
    }
    return PageSchemaData(company_info=company), extras, generate_legal_page_metadata(legal_page)


# =============================================
# ROUTES
# =============================================

@router.get("/home", response_model=PageResponse)
async def home_page() -> PageResponse:
    return await _render(PageType.HOME, _load_home(), generate_page_metadata("/", None))


@router.get("/services", response_model=PageResponse)
async def services_page() -> PageResponse:
    return await _render(PageType.SERVICES, _load_services(), generate_page_metadata("/services", None))


@router.get("/contact", response_model=PageResponse)
async def contact_page() -> PageResponse:
    return await _render(PageType.CONTACT, _load_contact(), generate_page_metadata("/contact", None))


@router.get("/blog", response_model=PageResponse)
async def blog_page() -> PageResponse:
    return await _render(PageType.BLOG, _load_blog(), generate_page_metadata("/blog", None))


@router.get("/blog/{slug}", response_model=PageResponse)
async def blog_post_page(slug: str) -> PageResponse:
    """
    Render a single blog post.

    A failure while loading renders the degraded page rather than a 404.

    Raises:
        HTTPException: 404 when no post has this slug
    """
    return await _render(PageType.BLOG_POST, _load_blog_post(slug), generate_page_metadata("/blog", None))


@router.get("/projects", response_model=PageResponse)
async def projects_page() -> PageResponse:
    return await _render(PageType.PROJECTS, _load_projects(), generate_page_metadata("/projects", None))


@router.get("/campaigns/{slug}", response_model=PageResponse)
async def campaign_page(slug: str) -> PageResponse:
    """
    Render a campaign landing page (``campaign-web``, ``campaign-seo`` or
    ``campaign-automation``).

    Raises:
        HTTPException: 404 for an unknown campaign
    """
    campaign = get_campaign(slug)
    if not campaign:
        raise HTTPException(status_code=404, detail=f"Campaign '{slug}' not found")

    fallback_metadata = {"title": campaign.page_title, "description": campaign.page_description}
    return await _render(PageType(slug), _load_campaign(campaign), fallback_metadata)


@router.get("/legal/{page_type}", response_model=PageResponse)
async def legal_page(page_type: str) -> PageResponse:
    if page_type not in LEGAL_PAGE_TYPES:
        raise HTTPException(status_code=404, detail=f"Legal page '{page_type}' not found")

    default_page = default_legal_page(page_type)
    return await _render(PageType.LEGAL, _load_legal(page_type), generate_legal_page_metadata(default_page))
