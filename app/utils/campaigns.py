"""
Campaign landing page profiles and helpers.

Each campaign page is described here once: the copy used in its structured
data, its FAQ entries, its breadcrumb trail, the portfolio items it showcases
and the promo packages it sells. Page handlers and the schema manifest both
read from these profiles.
"""
import re
from enum import Enum
from typing import Dict, List, Optional, Tuple
from pydantic import BaseModel, Field


class PromoKind(str, Enum):
    WEB = "web"
    ECOMMERCE = "ecommerce"
    SEO = "seo"
    SEM = "sem"
    AUTOMATION = "automation"


class PromoProfile(BaseModel):
    """Static description of one promo kind"""
    category: str = Field(..., description="schema.org category for the offer")


PROMO_PROFILES: Dict[PromoKind, PromoProfile] = {
    PromoKind.WEB: PromoProfile(category="Web Development Services"),
    PromoKind.ECOMMERCE: PromoProfile(category="E-Commerce Development Services"),
    PromoKind.SEO: PromoProfile(category="SEO Services"),
    PromoKind.SEM: PromoProfile(category="Google Ads Management Services"),
    PromoKind.AUTOMATION: PromoProfile(category="AI Automation Services"),
}


class FAQ(BaseModel):
    question: str
    answer: str


class Breadcrumb(BaseModel):
    name: str
    url: str = Field(..., description="Path relative to the site URL")


class CampaignProfile(BaseModel):
    slug: str
    service_name: str
    service_description: str
    service_type: str
    consultation_name: str
    consultation_description: str
    page_title: str
    page_description: str
    faqs: List[FAQ]
    breadcrumbs: List[Breadcrumb]
    portfolio_titles: List[str] = Field(default_factory=list)
    promos: List[PromoKind] = Field(default_factory=list)
    show_automation_gallery: bool = False

    @property
    def route(self) -> str:
        return f"/{self.slug}"


CAMPAIGNS: Dict[str, CampaignProfile] = {
    "campaign-web": CampaignProfile(
        slug="campaign-web",
        service_name="Web Development & AI Automation Services",
        service_description=(
            "Transform your business with professional web development, "
            "AI automation, and digital solutions"
        ),
        service_type="Web Development",
        consultation_name="Free Consultation",
        consultation_description=(
            "30-minute free consultation for web development and AI automation services"
        ),
        page_title="Transform Your Business with EtherCore",
        page_description="Professional web development & AI automation services",
        faqs=[
            FAQ(
                question="What's included in the free consultation?",
                answer=(
                    "Our free 30-minute consultation includes project scope analysis, "
                    "technology recommendations, timeline estimation, cost breakdown, and "
                    "strategic advice for your web development or AI automation project."
                ),
            ),
            FAQ(
                question="How long does it take to build a website?",
                answer=(
                    "Website development timeline varies based on complexity. A basic "
                    "website takes 2-4 weeks, while complex applications with custom "
                    "features can take 8-16 weeks. We provide detailed timelines during "
                    "the consultation."
                ),
            ),
            FAQ(
                question="Do you provide ongoing support and maintenance?",
                answer=(
                    "Yes, we offer comprehensive maintenance packages including security "
                    "updates, performance optimization, content updates, backup management, "
                    "and technical support to keep your website running smoothly."
                ),
            ),
            FAQ(
                question="What technologies do you use for web development?",
                answer=(
                    "We use modern technologies including Next.js, React, TypeScript, "
                    "Node.js, Python, and cloud platforms like Vercel and AWS. We choose the "
                    "best technology stack based on your specific project requirements."
                ),
            ),
        ],
        breadcrumbs=[
            Breadcrumb(name="Home", url="/"),
            Breadcrumb(name="Web Development", url="/campaign-web"),
        ],
        portfolio_titles=["Mahonia Decor", "BetterSelf", "IndoMath"],
        promos=[PromoKind.WEB, PromoKind.ECOMMERCE],
    ),
    "campaign-seo": CampaignProfile(
        slug="campaign-seo",
        service_name="SEO Optimization & Digital Marketing Services",
        service_description=(
            "Professional SEO services to improve search rankings and drive organic traffic"
        ),
        service_type="SEO Services",
        consultation_name="Free SEO Audit",
        consultation_description=(
            "Comprehensive SEO analysis and optimization recommendations"
        ),
        page_title="SEO Services - Boost Your Search Rankings",
        page_description="Professional SEO optimization services",
        faqs=[
            FAQ(
                question="What is included in a free SEO audit?",
                answer=(
                    "Our free SEO audit includes technical SEO analysis, keyword research, "
                    "competitor analysis, content strategy recommendations, link building "
                    "opportunities, and local SEO optimization. You'll receive a detailed "
                    "report with actionable insights to improve your search rankings."
                ),
            ),
            FAQ(
                question="How long does it take to see SEO results?",
                answer=(
                    "SEO is a long-term strategy. You can typically expect to see initial "
                    "improvements in 3-6 months, with significant results in 6-12 months. "
                    "The timeline depends on your industry competition, current website "
                    "state, and the scope of optimization work."
                ),
            ),
            FAQ(
                question="Do you provide local SEO services?",
                answer=(
                    "Yes, we specialize in local SEO optimization including Google My "
                    "Business optimization, local keyword targeting, local link building, "
                    "and review management to help your business dominate local search "
                    "results."
                ),
            ),
            FAQ(
                question="What makes EtherCore's SEO services different?",
                answer=(
                    "We combine technical SEO expertise with AI-powered tools and "
                    "data-driven strategies. Our approach includes comprehensive audits, "
                    "custom strategies, transparent reporting, and ongoing optimization to "
                    "ensure sustainable growth in search rankings."
                ),
            ),
        ],
        breadcrumbs=[
            Breadcrumb(name="Home", url="/"),
            Breadcrumb(name="SEO Services", url="/campaign-seo"),
        ],
        portfolio_titles=["Mudanzas Palma", "D&F Wines", "NutriyAcción"],
        promos=[PromoKind.SEO, PromoKind.SEM],
    ),
    "campaign-automation": CampaignProfile(
        slug="campaign-automation",
        service_name="AI Business Automation & Workflow Optimization",
        service_description=(
            "Custom AI automation solutions to streamline business processes and "
            "increase efficiency"
        ),
        service_type="AI Automation Services",
        consultation_name="Free Automation Consultation",
        consultation_description=(
            "30-minute consultation to discuss your automation needs and opportunities"
        ),
        page_title="AI Automation Services - Streamline Your Business",
        page_description="Custom AI automation solutions to streamline business processes",
        faqs=[
            FAQ(
                question="What types of business processes can be automated?",
                answer=(
                    "We can automate various processes including customer service with AI "
                    "chatbots, email marketing workflows, data processing and reporting, "
                    "lead generation and qualification, inventory management, and "
                    "repetitive administrative tasks."
                ),
            ),
            FAQ(
                question="How much can automation save my business?",
                answer=(
                    "Businesses typically see 20-60% reduction in operational costs and "
                    "3-5x increase in productivity. ROI varies by industry and "
                    "implementation scope, but most clients see positive returns within "
                    "6-12 months."
                ),
            ),
            FAQ(
                question="Is AI automation suitable for small businesses?",
                answer=(
                    "Yes! We design scalable automation solutions for businesses of all "
                    "sizes. Small businesses often see the biggest impact from automation "
                    "as it allows them to compete with larger companies without increasing "
                    "headcount."
                ),
            ),
            FAQ(
                question="How long does it take to implement automation?",
                answer=(
                    "Implementation timeline depends on complexity. Simple chatbots can be "
                    "deployed in 1-2 weeks, while comprehensive workflow automation may "
                    "take 6-12 weeks. We provide detailed project timelines during "
                    "consultation."
                ),
            ),
        ],
        breadcrumbs=[
            Breadcrumb(name="Home", url="/"),
            Breadcrumb(name="AI Automation", url="/campaign-automation"),
        ],
        promos=[PromoKind.AUTOMATION],
        show_automation_gallery=True,
    ),
}


def get_campaign(slug: str) -> Optional[CampaignProfile]:
    return CAMPAIGNS.get(slug)


# =============================================
# SERVICE TO CAMPAIGN MAPPING
# =============================================

CATEGORY_CAMPAIGNS: Dict[str, Tuple[str, str]] = {
    # category: (campaign route, CTA text)
    "SEO Services": ("/campaign-seo", "Boost Your Rankings"),
    "Web Development": ("/campaign-web", "Build Your Website"),
    "AI Automation": ("/campaign-automation", "Automate Your Business"),
    "Design Services": ("/campaign-web", "Design Your Brand"),
}


def get_service_campaign_url(service_category: Optional[str] = None, slug: Optional[str] = None) -> str:
    """
    Pick the campaign landing page a service card should link to.

    The category wins; otherwise keywords in the slug decide; anything else
    goes to the contact page.
    """
    if service_category and service_category in CATEGORY_CAMPAIGNS:
        return CATEGORY_CAMPAIGNS[service_category][0]

    if slug:
        if "seo" in slug:
            return "/campaign-seo"
        if "web" in slug or "design" in slug:
            return "/campaign-web"
        if "ai" in slug or "automation" in slug:
            return "/campaign-automation"

    return "/contact"


def get_service_cta_text(service_category: Optional[str] = None) -> str:
    if service_category and service_category in CATEGORY_CAMPAIGNS:
        return CATEGORY_CAMPAIGNS[service_category][1]
    return "Learn More"


# =============================================
# VIDEO HELPERS
# =============================================

YOUTUBE_ID_PATTERN = re.compile(
    r"(?:youtube\.com/embed/|youtu\.be/|youtube\.com/watch\?v=)([^&\n?#]+)"
)


def extract_youtube_video_id(url: Optional[str]) -> Optional[str]:
    if not url:
        return None
    match = YOUTUBE_ID_PATTERN.search(url)
    return match.group(1) if match else None


def generate_video_thumbnail_url(video_url: Optional[str], custom_thumbnail: Optional[str] = None) -> Optional[str]:
    """Explicit thumbnail first, then the YouTube still for the video, else None."""
    if custom_thumbnail:
        return custom_thumbnail

    video_id = extract_youtube_video_id(video_url)
    return f"https://img.youtube.com/vi/{video_id}/maxresdefault.jpg" if video_id else None
