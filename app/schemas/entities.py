"""
Schema definitions for the rows read from the site's datastore.

Every model ignores unknown columns, and numeric values stored in text
columns (such as service prices) are read as strings. A NULL in a column
whose field has a default (empty text, empty tag list) reads as that default.
"""
from abc import abstractmethod
from typing import Any, Dict, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, model_validator


class Entity(BaseModel):
    """Base for all datastore rows"""
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    @model_validator(mode="before")
    @classmethod
    def null_columns_to_defaults(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        row = dict(data)
        for name, field in cls.model_fields.items():
            if name in row and row[name] is None and not field.is_required():
                row[name] = field.get_default(call_default_factory=True)
        return row


class CompanyInfo(Entity):
    """Active company record from `company_info`"""
    id: Optional[str] = None
    company_name: str = Field(..., description="Trading name of the company")
    tagline: Optional[str] = Field(None, description="Short strap line used for the WebSite schema")
    description: Optional[str] = None
    primary_email: Optional[str] = None
    phone: Optional[str] = None
    website_url: str = Field(..., description="Canonical site URL without a trailing slash")
    calendly_url: Optional[str] = None
    logo_url: Optional[str] = None
    business_hours: Optional[str] = Field(None, description="schema.org openingHours string")


class HeroSection(Entity):
    """Hero banner content keyed by page route"""
    id: Optional[str] = None
    page_route: str = Field(..., description="Route such as '/', '/services'")
    headline: str
    subheadline: Optional[str] = None
    description: Optional[str] = None
    primary_cta_text: Optional[str] = None
    primary_cta_url: Optional[str] = None
    secondary_cta_text: Optional[str] = None
    secondary_cta_url: Optional[str] = None
    background_image_url: Optional[str] = None
    background_video_url: Optional[str] = None
    display_order: int = 0


class Service(Entity):
    id: Optional[int] = None
    name: str
    description: str = ""
    price: Optional[str] = Field(None, description="Explicit starting price, if published")
    price_range: Optional[str] = None
    service_category: Optional[str] = None
    slug: Optional[str] = None
    icon_url: Optional[str] = None
    cta_text: Optional[str] = None
    cta_url: Optional[str] = None
    campaign_url: Optional[str] = None
    is_featured: bool = False
    created_at: Optional[str] = None


class ImageSeoFields(Entity):
    """Image metadata columns shared by blogs and portfolio items"""
    image_url: Optional[str] = None
    image_alt: Optional[str] = None
    image_title: Optional[str] = None
    image_description: Optional[str] = None
    image_caption: Optional[str] = None
    image_width: Optional[int] = None
    image_height: Optional[int] = None
    image_seo_score: Optional[int] = None


class Blog(ImageSeoFields):
    id: Optional[int] = None
    title: str
    content: str = ""
    slug: str
    published_at: Optional[str] = None
    updated_at: Optional[str] = None
    created_at: Optional[str] = None
    tags: List[str] = Field(default_factory=list)


class Portfolio(ImageSeoFields):
    id: int
    title: str
    description: str = ""
    project_url: Optional[str] = None
    github_url: Optional[str] = None
    client_name: Optional[str] = None
    technologies: Optional[str] = Field(None, description="Comma separated technology list, kept verbatim")
    category: Optional[str] = None
    slug: Optional[str] = None
    is_featured: bool = False
    created_at: Optional[str] = None


class Testimonial(Entity):
    id: Optional[int] = None
    client_name: str
    testimonial: str
    rating: Optional[int] = None
    created_at: Optional[str] = None


class SeoMetadata(Entity):
    """Per-route SEO metadata from `seo_metadata`"""
    page_route: str
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    meta_keywords: Optional[str] = None
    canonical_url: Optional[str] = None
    og_title: Optional[str] = None
    og_description: Optional[str] = None
    og_image_url: Optional[str] = None
    og_type: Optional[str] = None
    twitter_card: Optional[str] = None
    twitter_title: Optional[str] = None
    twitter_description: Optional[str] = None
    twitter_image_url: Optional[str] = None
    robots: Optional[str] = None


class LegalPage(Entity):
    page_type: Literal["privacy", "terms", "cookies"]
    title: str
    content: str
    last_updated: Optional[str] = None
    version: Optional[str] = None


class CampaignVideo(Entity):
    """Video hero for a campaign landing page"""
    id: Optional[int] = None
    page_slug: str
    video_url: str
    header_text: str = ""
    subtitle_text: str = ""
    cta_button_text: Optional[str] = None
    cta_button_url: Optional[str] = None
    cta_button_text_2: Optional[str] = None
    cta_button_url_2: Optional[str] = None
    cta_button_icon_2: Optional[str] = None
    video_duration: Optional[int] = Field(None, description="Duration in seconds")
    video_thumbnail_url: Optional[str] = None
    autoplay: bool = True
    muted: bool = True
    loop_video: bool = True
    priority: int = 0
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    video_schema: Optional[Dict[str, Any]] = Field(None, description="Precomputed VideoObject override")
    video_keywords: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class AutomationGalleryItem(Entity):
    id: Optional[int] = None
    title: str
    description: str = ""
    image_url: Optional[str] = None
    image_alt: Optional[str] = None
    image_title: Optional[str] = None
    meta_description: Optional[str] = None
    display_order: int = 0
    schema_data: Optional[Dict[str, Any]] = None


class Developer(Entity):
    id: Optional[str] = None
    name: str
    role: str = ""
    education: Optional[str] = None
    bio: str = ""
    photo_url: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    linkedin_url: Optional[str] = None
    github_url: Optional[str] = None
    display_order: int = 0


# =============================================
# PROMO PACKAGES
# =============================================

class OneTimePricing(BaseModel):
    """A single up-front price"""
    kind: Literal["one_time"] = "one_time"
    amount: float
    currency: str
    label: Optional[str] = None


class RecurringPricing(BaseModel):
    """A setup fee followed by a monthly charge"""
    kind: Literal["recurring"] = "recurring"
    setup_amount: float
    monthly_amount: float
    currency: str
    setup_label: Optional[str] = None
    monthly_label: Optional[str] = None


PromoPricing = Union[OneTimePricing, RecurringPricing]


class PromoFeature(Entity):
    icon: Optional[str] = None
    order: int = 0
    title: str
    description: str = ""
    metric: Optional[str] = None


class PromoPackage(Entity):
    """Fields shared by every promo table"""
    id: Optional[int] = None
    slug: Optional[str] = None
    title: Optional[str] = None
    subtitle: Optional[str] = None
    price_currency: Optional[str] = None
    cta_button_text: Optional[str] = None
    cta_button_url: Optional[str] = None
    additional_info: Optional[str] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    meta_keywords: Optional[str] = None
    og_image: Optional[str] = None
    schema_data: Optional[Dict[str, Any]] = Field(None, description="Precomputed schema override")
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @abstractmethod
    def pricing(self, default_currency: str) -> Optional[PromoPricing]:
        """Tagged pricing for the schema builder, or None when unpriced."""


class PromoOffer(PromoPackage):
    """Single-price promo (`promo_web`, `promo_seo`, `promo_automation`)"""
    price_amount: Optional[float] = None
    price_label: Optional[str] = None
    features: List[PromoFeature] = Field(default_factory=list)

    def pricing(self, default_currency: str) -> Optional[OneTimePricing]:
        if not self.price_amount:
            return None
        return OneTimePricing(
            amount=self.price_amount,
            currency=self.price_currency or default_currency,
            label=self.price_label,
        )


class PromoSEM(PromoPackage):
    """Setup plus monthly management promo (`promo_sem`)"""
    setup_price_amount: Optional[float] = None
    monthly_price_amount: Optional[float] = None
    setup_price_label: Optional[str] = None
    monthly_price_label: Optional[str] = None
    benefits: List[PromoFeature] = Field(default_factory=list)

    def pricing(self, default_currency: str) -> Optional[RecurringPricing]:
        if not self.setup_price_amount:
            return None
        return RecurringPricing(
            setup_amount=self.setup_price_amount,
            monthly_amount=self.monthly_price_amount or 0,
            currency=self.price_currency or default_currency,
            setup_label=self.setup_price_label,
            monthly_label=self.monthly_price_label,
        )
