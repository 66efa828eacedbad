"""
Per-page schema aggregation.

Every page type has a manifest: an ordered tuple of steps, each turning the
page's entity bag into zero or more schemas. ``generate_page_schema`` runs the
manifest, drops ``None`` results and returns the rest in manifest order.
"""
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple
from pydantic import BaseModel, Field
from app.core.config import settings
from app.schemas.entities import (
    Blog,
    CampaignVideo,
    CompanyInfo,
    Developer,
    HeroSection,
    Portfolio,
    PromoPackage,
    Service,
)
from app.utils.campaigns import CampaignProfile, PromoKind, get_campaign
from app.utils.schema_builders import (
    Schema,
    build_blog_post_schema,
    build_breadcrumb_schema,
    build_campaign_service_schema,
    build_creative_work_schema,
    build_faq_schema,
    build_local_business_schema,
    build_organization_schema,
    build_promo_schema,
    build_service_schema,
    build_team_schema,
    build_video_object_schema,
    build_web_page_schema,
    build_website_schema,
)


class PageType(str, Enum):
    HOME = "home"
    SERVICES = "services"
    CONTACT = "contact"
    BLOG = "blog"
    PROJECTS = "projects"
    BLOG_POST = "blog-post"
    LEGAL = "legal"
    CAMPAIGN_WEB = "campaign-web"
    CAMPAIGN_SEO = "campaign-seo"
    CAMPAIGN_AUTOMATION = "campaign-automation"


class PageSchemaData(BaseModel):
    """Bag of entities a page has fetched"""
    company_info: Optional[CompanyInfo] = None
    hero: Optional[HeroSection] = None
    services: List[Service] = Field(default_factory=list)
    blogs: List[Blog] = Field(default_factory=list)
    blog: Optional[Blog] = None
    projects: List[Portfolio] = Field(default_factory=list)
    developers: List[Developer] = Field(default_factory=list)
    campaign_video: Optional[CampaignVideo] = None
    promos: List[Tuple[PromoKind, Optional[PromoPackage]]] = Field(default_factory=list)


SchemaStep = Callable[[PageSchemaData, Optional[CampaignProfile]], List[Optional[Schema]]]


# =============================================
# MANIFEST STEPS
# =============================================

def _organization(data: PageSchemaData, campaign: Optional[CampaignProfile]) -> List[Optional[Schema]]:
    return [build_organization_schema(data.company_info)]


def _website(data: PageSchemaData, campaign: Optional[CampaignProfile]) -> List[Optional[Schema]]:
    return [build_website_schema(data.company_info)]


def _local_business(data: PageSchemaData, campaign: Optional[CampaignProfile]) -> List[Optional[Schema]]:
    return [build_local_business_schema(data.company_info)]


def _team(data: PageSchemaData, campaign: Optional[CampaignProfile]) -> List[Optional[Schema]]:
    return [build_team_schema(data.developers, data.company_info)]


def _each_service(data: PageSchemaData, campaign: Optional[CampaignProfile]) -> List[Optional[Schema]]:
    return [build_service_schema(service, data.company_info) for service in data.services]


def _each_blog(data: PageSchemaData, campaign: Optional[CampaignProfile]) -> List[Optional[Schema]]:
    return [build_blog_post_schema(blog, data.company_info) for blog in data.blogs]


def _single_blog(data: PageSchemaData, campaign: Optional[CampaignProfile]) -> List[Optional[Schema]]:
    return [build_blog_post_schema(data.blog, data.company_info)]


def _each_project(data: PageSchemaData, campaign: Optional[CampaignProfile]) -> List[Optional[Schema]]:
    return [build_creative_work_schema(project, data.company_info) for project in data.projects]


def _campaign_service(data: PageSchemaData, campaign: Optional[CampaignProfile]) -> List[Optional[Schema]]:
    return [build_campaign_service_schema(campaign, data.company_info)]


def _campaign_faq(data: PageSchemaData, campaign: Optional[CampaignProfile]) -> List[Optional[Schema]]:
    return [build_faq_schema(campaign.faqs)]


def _campaign_breadcrumbs(data: PageSchemaData, campaign: Optional[CampaignProfile]) -> List[Optional[Schema]]:
    base_url = data.company_info.website_url if data.company_info else settings.SITE_URL
    return [build_breadcrumb_schema(campaign.breadcrumbs, base_url)]


def _campaign_video(data: PageSchemaData, campaign: Optional[CampaignProfile]) -> List[Optional[Schema]]:
    return [build_video_object_schema(data.campaign_video, data.company_info)]


def _campaign_web_page(data: PageSchemaData, campaign: Optional[CampaignProfile]) -> List[Optional[Schema]]:
    return [build_web_page_schema(campaign, data.campaign_video, data.company_info)]


def _promos(data: PageSchemaData, campaign: Optional[CampaignProfile]) -> List[Optional[Schema]]:
    return [build_promo_schema(promo, kind, data.company_info) for kind, promo in data.promos]


CAMPAIGN_MANIFEST: Tuple[SchemaStep, ...] = (
    _organization,
    _website,
    _local_business,
    _campaign_service,
    _campaign_faq,
    _campaign_breadcrumbs,
    _campaign_video,
    _campaign_web_page,
    _promos,
)

PAGE_MANIFESTS: Dict[PageType, Tuple[SchemaStep, ...]] = {
    PageType.HOME: (_organization, _website),
    PageType.SERVICES: (_organization, _local_business, _each_service),
    PageType.CONTACT: (_organization, _local_business, _team),
    PageType.BLOG: (_organization, _each_blog),
    PageType.PROJECTS: (_organization, _each_project),
    PageType.BLOG_POST: (_single_blog,),
    PageType.LEGAL: (_organization,),
    PageType.CAMPAIGN_WEB: CAMPAIGN_MANIFEST,
    PageType.CAMPAIGN_SEO: CAMPAIGN_MANIFEST,
    PageType.CAMPAIGN_AUTOMATION: CAMPAIGN_MANIFEST,
}


def generate_page_schema(page_type: PageType, data: PageSchemaData) -> List[Schema]:
    """
    Build the ordered list of schemas to embed on a page.

    Args:
        page_type: Which page is being rendered
        data: The entities fetched for that page

    Returns:
        Non-null schemas in manifest order; the Organization schema comes
        first whenever company info is present
    """
    page_type = PageType(page_type)
    campaign = get_campaign(page_type.value)

    schemas: List[Schema] = []
    for step in PAGE_MANIFESTS[page_type]:
        schemas.extend(schema for schema in step(data, campaign) if schema is not None)
    return schemas
