from __future__ import annotations

import unittest

from support import COMPANY_ROW

from app.schemas.entities import (
    Blog,
    CampaignVideo,
    CompanyInfo,
    Developer,
    Portfolio,
    PromoOffer,
    PromoSEM,
    Service,
)
from app.utils.campaigns import PromoKind
from app.utils.page_schema import PageSchemaData, PageType, generate_page_schema


def _types(schemas) -> list:
    return [schema["@type"] for schema in schemas]


class TestGeneratePageSchema(unittest.TestCase):
    def setUp(self) -> None:
        self.company = CompanyInfo.model_validate(COMPANY_ROW)

    def test_services_page_order(self) -> None:
        data = PageSchemaData(
            company_info=self.company,
            services=[Service(name="Web Design", price="500"), Service(name="SEO")],
        )
        schemas = generate_page_schema(PageType.SERVICES, data)

        self.assertEqual(_types(schemas), ["Organization", "LocalBusiness", "Service", "Service"])
        self.assertEqual([schemas[2]["name"], schemas[3]["name"]], ["Web Design", "SEO"])

    def test_home_page(self) -> None:
        schemas = generate_page_schema("home", PageSchemaData(company_info=self.company))

        self.assertEqual(_types(schemas), ["Organization", "WebSite"])

    def test_null_company_drops_dependent_schemas(self) -> None:
        data = PageSchemaData(
            services=[Service(name="SEO")],
            blogs=[Blog(title="A", slug="a")],
            projects=[Portfolio(id=1, title="P")],
        )

        for page_type in (PageType.HOME, PageType.SERVICES, PageType.BLOG, PageType.PROJECTS, PageType.LEGAL):
            with self.subTest(page_type=page_type.value):
                self.assertEqual(generate_page_schema(page_type, data), [])

    def test_contact_page_adds_team_when_developers_known(self) -> None:
        without_team = generate_page_schema(PageType.CONTACT, PageSchemaData(company_info=self.company))
        with_team = generate_page_schema(
            PageType.CONTACT,
            PageSchemaData(company_info=self.company, developers=[Developer(name="Ana")]),
        )

        self.assertEqual(_types(without_team), ["Organization", "LocalBusiness"])
        self.assertEqual(_types(with_team), ["Organization", "LocalBusiness", "Organization"])
        self.assertEqual(with_team[2]["employee"][0]["name"], "Ana")

    def test_blog_and_projects_pages(self) -> None:
        blogs = [Blog(title="A", slug="a"), Blog(title="B", slug="b")]
        projects = [Portfolio(id=1, title="P1")]

        blog_schemas = generate_page_schema(PageType.BLOG, PageSchemaData(company_info=self.company, blogs=blogs))
        project_schemas = generate_page_schema(
            PageType.PROJECTS, PageSchemaData(company_info=self.company, projects=projects)
        )

        self.assertEqual(_types(blog_schemas), ["Organization", "BlogPosting", "BlogPosting"])
        self.assertEqual(_types(project_schemas), ["Organization", "CreativeWork"])

    def test_blog_post_page_only_has_the_post(self) -> None:
        blog = Blog(title="A", slug="a", published_at="2024-01-01T00:00:00+00:00")
        schemas = generate_page_schema(PageType.BLOG_POST, PageSchemaData(company_info=self.company, blog=blog))

        self.assertEqual(_types(schemas), ["BlogPosting"])
        self.assertEqual(generate_page_schema(PageType.BLOG_POST, PageSchemaData(company_info=self.company)), [])


class TestCampaignPageSchema(unittest.TestCase):
    def setUp(self) -> None:
        self.company = CompanyInfo.model_validate(COMPANY_ROW)

    def test_manifest_order(self) -> None:
        data = PageSchemaData(
            company_info=self.company,
            campaign_video=CampaignVideo(page_slug="campaign-seo", video_url="https://youtu.be/abc"),
            promos=[
                (PromoKind.SEO, PromoOffer(title="SEO Package", price_amount=400)),
                (PromoKind.SEM, PromoSEM(title="Ads", setup_price_amount=200, monthly_price_amount=150)),
            ],
        )
        types = _types(generate_page_schema(PageType.CAMPAIGN_SEO, data))

        self.assertEqual(
            types,
            [
                "Organization",
                "WebSite",
                "LocalBusiness",
                "Service",
                "FAQPage",
                "BreadcrumbList",
                "VideoObject",
                "WebPage",
                "Offer",
                "Product",
            ],
        )
        self.assertEqual(types.count("Organization"), 1)
        self.assertEqual(types.count("LocalBusiness"), 1)

    def test_without_company_keeps_structural_schemas(self) -> None:
        data = PageSchemaData(promos=[(PromoKind.AUTOMATION, None)])
        schemas = generate_page_schema(PageType.CAMPAIGN_AUTOMATION, data)

        self.assertEqual(_types(schemas), ["FAQPage", "BreadcrumbList", "WebPage"])

    def test_stored_promo_schema_is_passed_through(self) -> None:
        stored = {"@context": "https://schema.org", "@type": "Offer", "name": "Stored"}
        data = PageSchemaData(
            company_info=self.company,
            promos=[(PromoKind.WEB, PromoOffer(schema_data=stored)), (PromoKind.ECOMMERCE, None)],
        )
        schemas = generate_page_schema(PageType.CAMPAIGN_WEB, data)

        self.assertEqual(schemas[-1], stored)
