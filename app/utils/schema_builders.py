"""
schema.org JSON-LD builders.

Each builder maps one entity (plus optional company context) to a plain dict
ready for ``json.dumps``. A builder returns ``None`` instead of raising when
an input it needs is missing, so callers can filter results uniformly. A
precomputed schema stored on an entity always wins over a generated one.
"""
from datetime import date, timedelta
from typing import Any, Dict, List, Optional, Sequence
from app.core.config import settings
from app.core.logging import logger
from app.schemas.entities import (
    Blog,
    CampaignVideo,
    CompanyInfo,
    Developer,
    Portfolio,
    PromoPackage,
    RecurringPricing,
    Service,
)
from app.utils.campaigns import (
    FAQ,
    PROMO_PROFILES,
    Breadcrumb,
    CampaignProfile,
    PromoKind,
    generate_video_thumbnail_url,
)

SCHEMA_CONTEXT = "https://schema.org"
IN_STOCK = "https://schema.org/InStock"
BLOG_DESCRIPTION_LENGTH = 160

Schema = Dict[str, Any]


def _today() -> date:
    return date.today()


def _organization_ref(company: CompanyInfo) -> Schema:
    return {
        "@type": "Organization",
        "name": company.company_name,
        "url": company.website_url,
    }


def _publisher(company: Optional[CompanyInfo]) -> Schema:
    """Publisher/seller block, falling back to the configured site identity."""
    return {
        "@type": "Organization",
        "name": company.company_name if company else settings.SITE_NAME,
        "url": company.website_url if company else settings.SITE_URL,
        "logo": {
            "@type": "ImageObject",
            "url": (company.logo_url if company else None) or settings.SITE_LOGO_URL,
        },
    }


def _postal_address() -> Schema:
    location = settings.BUSINESS_LOCATION
    return {
        "@type": "PostalAddress",
        "addressCountry": location.country_code,
        "addressRegion": location.region,
    }


def _geo() -> Schema:
    location = settings.BUSINESS_LOCATION
    return {
        "@type": "GeoCoordinates",
        "latitude": location.latitude,
        "longitude": location.longitude,
    }


def _area_served() -> Schema:
    return {"@type": "Country", "name": settings.BUSINESS_LOCATION.service_area}


# =============================================
# COMPANY-LEVEL SCHEMAS
# =============================================

def build_organization_schema(company: Optional[CompanyInfo]) -> Optional[Schema]:
    if not company:
        return None

    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "Organization",
        "name": company.company_name,
        "description": company.description,
        "url": company.website_url,
        "logo": company.logo_url,
        "email": company.primary_email,
        "telephone": company.phone,
        "sameAs": [url for url in (company.website_url, company.calendly_url) if url],
        "address": _postal_address(),
        "contactPoint": {
            "@type": "ContactPoint",
            "telephone": company.phone,
            "email": company.primary_email,
            "contactType": "customer service",
            "availableLanguage": "English",
        },
    }


def build_website_schema(company: Optional[CompanyInfo]) -> Optional[Schema]:
    if not company:
        return None

    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "WebSite",
        "name": company.company_name,
        "description": company.tagline,
        "url": company.website_url,
        "potentialAction": {
            "@type": "SearchAction",
            "target": f"{company.website_url}/search?q={{search_term_string}}",
            "query-input": "required name=search_term_string",
        },
        "publisher": {
            "@type": "Organization",
            "name": company.company_name,
            "logo": company.logo_url,
        },
    }


def build_local_business_schema(company: Optional[CompanyInfo]) -> Optional[Schema]:
    """
    LocalBusiness schema for the contact, services and campaign pages.

    Geo coordinates, opening hours, price range and service area come from
    ``settings.BUSINESS_LOCATION``; the company record only overrides the
    opening hours string.
    """
    if not company:
        return None

    location = settings.BUSINESS_LOCATION
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "LocalBusiness",
        "@id": company.website_url,
        "name": company.company_name,
        "description": company.description,
        "url": company.website_url,
        "logo": company.logo_url,
        "image": company.logo_url,
        "email": company.primary_email,
        "telephone": company.phone,
        "openingHours": company.business_hours or location.opening_hours,
        "openingHoursSpecification": {
            "@type": "OpeningHoursSpecification",
            "dayOfWeek": list(location.opening_days),
            "opens": location.opens,
            "closes": location.closes,
        },
        "address": _postal_address(),
        "geo": _geo(),
        "priceRange": location.price_range,
        "serviceArea": {
            "@type": "GeoCircle",
            "name": location.service_area,
            "geoMidpoint": _geo(),
            "geoRadius": location.service_radius_metres,
        },
    }


def build_team_schema(developers: Sequence[Developer], company: Optional[CompanyInfo]) -> Optional[Schema]:
    """Organization schema listing the team as employees."""
    if not developers or not company:
        return None

    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "Organization",
        "name": company.company_name,
        "url": company.website_url,
        "employee": [
            {
                "@type": "Person",
                "name": developer.name,
                "jobTitle": developer.role,
                "description": developer.bio,
                "image": developer.photo_url,
                "sameAs": [url for url in (developer.linkedin_url, developer.github_url) if url],
                "knowsAbout": list(developer.skills),
                "worksFor": _organization_ref(company),
            }
            for developer in developers
        ],
    }


# =============================================
# CONTENT SCHEMAS
# =============================================

def build_service_schema(service: Optional[Service], company: Optional[CompanyInfo]) -> Optional[Schema]:
    """
    Service schema for one entry on the services page.

    The Offer block is only emitted when the service publishes a price; a
    missing price means "contact for pricing", not a default amount.
    """
    if not service or not company:
        return None

    schema = {
        "@context": SCHEMA_CONTEXT,
        "@type": "Service",
        "name": service.name,
        "description": service.description,
        "provider": _organization_ref(company),
        "serviceType": service.name,
        "category": service.service_category or "Digital Services",
        "areaServed": _area_served(),
    }

    if service.price:
        schema["offers"] = {
            "@type": "Offer",
            "price": service.price,
            "priceCurrency": settings.DEFAULT_CURRENCY,
            "availability": IN_STOCK,
            "validFrom": _today().isoformat(),
        }
    else:
        logger.warning(f"Service '{service.name}' has no price; omitting its Offer")

    return schema


def build_blog_post_schema(blog: Optional[Blog], company: Optional[CompanyInfo]) -> Optional[Schema]:
    if not blog or not company:
        return None

    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BlogPosting",
        "headline": blog.title,
        "description": blog.content[:BLOG_DESCRIPTION_LENGTH],
        "image": blog.image_url,
        "datePublished": blog.published_at,
        "dateModified": blog.updated_at or blog.published_at,
        "author": _organization_ref(company),
        "publisher": {
            "@type": "Organization",
            "name": company.company_name,
            "logo": {"@type": "ImageObject", "url": company.logo_url},
        },
        "mainEntityOfPage": {
            "@type": "WebPage",
            "@id": f"{company.website_url}/blog/{blog.slug}",
        },
        "keywords": ", ".join(blog.tags),
    }


def build_creative_work_schema(project: Optional[Portfolio], company: Optional[CompanyInfo]) -> Optional[Schema]:
    if not project or not company:
        return None

    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "CreativeWork",
        "name": project.title,
        "description": project.description,
        "image": project.image_url,
        "url": project.project_url,
        "creator": _organization_ref(company),
        "dateCreated": project.created_at,
        "genre": project.category or "Web Development",
        "keywords": project.technologies,
    }


def build_faq_schema(faqs: Sequence[FAQ]) -> Optional[Schema]:
    if not faqs:
        return None

    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "FAQPage",
        "mainEntity": [
            {
                "@type": "Question",
                "name": faq.question,
                "acceptedAnswer": {"@type": "Answer", "text": faq.answer},
            }
            for faq in faqs
        ],
    }


def build_breadcrumb_schema(breadcrumbs: Sequence[Breadcrumb], base_url: str) -> Optional[Schema]:
    if not breadcrumbs:
        return None

    root = base_url.rstrip("/")
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": [
            {
                "@type": "ListItem",
                "position": position,
                "name": crumb.name,
                "item": f"{root}{crumb.url}",
            }
            for position, crumb in enumerate(breadcrumbs, start=1)
        ],
    }


# =============================================
# CAMPAIGN SCHEMAS
# =============================================

def build_video_object_schema(video: Optional[CampaignVideo], company: Optional[CompanyInfo]) -> Optional[Schema]:
    """
    VideoObject schema for a campaign video hero.

    A ``video_schema`` stored on the row is returned as is. Otherwise the
    thumbnail is the explicit one, or the YouTube still derived from the
    video URL, or null when neither is available.
    """
    if not video:
        return None
    if video.video_schema:
        return video.video_schema

    schema = {
        "@context": SCHEMA_CONTEXT,
        "@type": "VideoObject",
        "name": video.meta_title or video.header_text,
        "description": video.meta_description or video.subtitle_text,
        "thumbnailUrl": generate_video_thumbnail_url(video.video_url, video.video_thumbnail_url),
        "uploadDate": video.created_at,
        "embedUrl": video.video_url,
        "contentUrl": video.video_url,
        "publisher": _publisher(company),
        "genre": "Business",
        "inLanguage": "en-US",
    }
    if video.video_duration:
        schema["duration"] = f"PT{video.video_duration}S"
    if video.video_keywords:
        schema["keywords"] = video.video_keywords
    return schema


def build_campaign_service_schema(campaign: CampaignProfile, company: Optional[CompanyInfo]) -> Optional[Schema]:
    if not company:
        return None

    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "Service",
        "name": campaign.service_name,
        "description": campaign.service_description,
        "provider": {
            **_organization_ref(company),
            "telephone": company.phone,
            "email": company.primary_email,
        },
        "serviceType": campaign.service_type,
        "areaServed": _area_served(),
        "offers": {
            "@type": "Offer",
            "name": campaign.consultation_name,
            "description": campaign.consultation_description,
            "price": "0",
            "priceCurrency": settings.DEFAULT_CURRENCY,
            "availability": IN_STOCK,
            "validFrom": _today().isoformat(),
            "priceValidUntil": (_today() + timedelta(days=365)).isoformat(),
        },
    }


def build_web_page_schema(
    campaign: CampaignProfile,
    video: Optional[CampaignVideo],
    company: Optional[CompanyInfo],
) -> Schema:
    site_url = company.website_url if company else settings.SITE_URL
    site_name = company.company_name if company else settings.SITE_NAME
    logo_url = (company.logo_url if company else None) or settings.SITE_LOGO_URL

    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "WebPage",
        "name": (video.meta_title if video else None) or campaign.page_title,
        "description": (video.meta_description if video else None) or campaign.page_description,
        "url": f"{site_url.rstrip('/')}{campaign.route}",
        "isPartOf": {"@type": "WebSite", "name": site_name, "url": site_url},
        "primaryImageOfPage": {
            "@type": "ImageObject",
            "url": (video.video_thumbnail_url if video else None) or logo_url,
        },
    }


def build_promo_schema(
    promo: Optional[PromoPackage],
    kind: PromoKind,
    company: Optional[CompanyInfo] = None,
) -> Optional[Schema]:
    """
    Offer (one-time price) or Product (setup + monthly) schema for a promo.

    Args:
        promo: The promo row, possibly missing
        kind: Promo kind, selects the category from ``PROMO_PROFILES``
        company: Seller details; the configured site identity otherwise

    Returns:
        The stored ``schema_data`` when present, a generated schema when the
        promo has a title and a price, else None
    """
    if not promo:
        return None
    if promo.schema_data:
        return promo.schema_data

    pricing = promo.pricing(settings.DEFAULT_CURRENCY)
    if not promo.title or pricing is None:
        return None

    profile = PROMO_PROFILES[kind]
    seller = _publisher(company)

    if isinstance(pricing, RecurringPricing):
        return {
            "@context": SCHEMA_CONTEXT,
            "@type": "Product",
            "name": promo.title,
            "description": promo.subtitle,
            "brand": {"@type": "Brand", "name": seller["name"]},
            "offers": _recurring_offers(pricing),
            "category": profile.category,
            "provider": seller,
        }

    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "Offer",
        "name": promo.title,
        "description": promo.subtitle,
        "price": _format_price(pricing.amount),
        "priceCurrency": pricing.currency,
        "availability": IN_STOCK,
        "validFrom": promo.created_at or _today().isoformat(),
        "seller": seller,
        "category": profile.category,
        "itemOffered": {
            "@type": "Service",
            "name": promo.title,
            "description": promo.subtitle,
            "provider": seller,
        },
    }


def _recurring_offers(pricing: RecurringPricing) -> List[Schema]:
    return [
        {
            "@type": "Offer",
            "name": pricing.setup_label or "Initial Setup",
            "price": _format_price(pricing.setup_amount),
            "priceCurrency": pricing.currency,
            "availability": IN_STOCK,
        },
        {
            "@type": "Offer",
            "name": pricing.monthly_label or "Monthly Management",
            "price": _format_price(pricing.monthly_amount),
            "priceCurrency": pricing.currency,
            "availability": IN_STOCK,
            "priceSpecification": {
                "@type": "RecurringCharge",
                "frequency": "Monthly",
            },
        },
    ]


def _format_price(amount: float) -> str:
    """Prices are strings in schema.org; drop a trailing .0 for whole amounts."""
    return str(int(amount)) if float(amount).is_integer() else str(amount)

