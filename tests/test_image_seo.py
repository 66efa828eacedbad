from __future__ import annotations

import unittest

from support import ApiTestCase

from app.schemas.entities import Blog, Portfolio
from app.utils.image_seo import (
    blog_image_report,
    calculate_blog_image_score,
    calculate_portfolio_image_score,
    generate_blog_alt_text,
    generate_portfolio_alt_text,
    generate_portfolio_image_caption,
    get_blog_image_recommendations,
    get_image_format,
    get_image_score_category,
    get_portfolio_image_recommendations,
)


class TestBlogImageSeo(unittest.TestCase):
    def test_fully_described_image_scores_100(self) -> None:
        blog = Blog(
            title="Speed",
            slug="speed",
            image_url="https://cdn.example.com/speed.webp",
            image_alt="A stopwatch next to a laptop",
            image_title="Speed",
            image_description="Page speed matters",
            image_caption="Measured on 4G",
            image_width=1200,
            image_height=675,
        )

        self.assertEqual(calculate_blog_image_score(blog), 100)
        self.assertEqual(get_blog_image_recommendations(blog), ["Image SEO is fully optimized!"])

    def test_short_alt_text_scores_less(self) -> None:
        blog = Blog(title="Speed", slug="speed", image_url="https://cdn.example.com/a.png", image_alt="laptop")

        self.assertEqual(calculate_blog_image_score(blog), 25 + 15)
        self.assertIn("Add descriptive alt text (10-125 characters)", get_blog_image_recommendations(blog))

    def test_without_image(self) -> None:
        blog = Blog(title="Text only", slug="text")

        self.assertEqual(calculate_blog_image_score(blog), 0)
        self.assertEqual(get_blog_image_recommendations(blog), ["Add a featured image"])
        self.assertIsNone(blog_image_report(blog)["image_object"])

    def test_generated_alt_text(self) -> None:
        blog = Blog(title="SEO Basics", slug="seo", content="## *Search* engines reward clarity. Second sentence.")

        self.assertEqual(generate_blog_alt_text(blog), "SEO Basics - Search engines reward clarity")


class TestPortfolioImageSeo(unittest.TestCase):
    def test_score_and_text(self) -> None:
        project = Portfolio(
            id=1,
            title="Mahonia Decor",
            image_url="https://cdn.example.com/mahonia.jpg",
            client_name="Mahonia",
            category="E-commerce",
            technologies="Shopify",
        )

        self.assertEqual(calculate_portfolio_image_score(project), 20 + 10 + 10 + 5)
        self.assertEqual(
            generate_portfolio_alt_text(project),
            "Mahonia Decor for Mahonia - E-commerce - EtherCore Portfolio",
        )
        self.assertEqual(generate_portfolio_image_caption(project), "Mahonia Decor - Client: Mahonia")
        self.assertNotIn("Add client name for credibility boost", get_portfolio_image_recommendations(project))

    def test_caption_needs_client(self) -> None:
        self.assertIsNone(generate_portfolio_image_caption(Portfolio(id=2, title="IndoMath")))


class TestImageHelpers(unittest.TestCase):
    def test_score_categories(self) -> None:
        cases = [
            (100, "Excellent"),
            (80, "Excellent"),
            (79, "Good"),
            (60, "Good"),
            (40, "Needs Improvement"),
            (39, "Poor"),
        ]
        for score, category in cases:
            with self.subTest(score=score):
                self.assertEqual(get_image_score_category(score), category)

    def test_image_format(self) -> None:
        cases = [
            ("https://cdn.example.com/a.JPEG", "jpg"),
            ("https://cdn.example.com/a.png?width=300", "png"),
            ("https://cdn.example.com/a.webp", "webp"),
            ("https://cdn.example.com/a.gif", "jpg"),
        ]
        for url, fmt in cases:
            with self.subTest(url=url):
                self.assertEqual(get_image_format(url), fmt)


class TestImageReportEndpoint(ApiTestCase):
    def test_portfolio_report(self) -> None:
        self.db.tables["portfolio"] = [
            {"id": 1, "title": "Bare", "image_url": "https://cdn.example.com/bare.png"},
            {"id": 2, "title": "No image"},
        ]

        response = self.client.get("/api/v1/seo/images/portfolio")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["kind"], "portfolio")
        self.assertEqual(body["total"], 2)
        self.assertEqual(body["needs_optimization"], 1)
        self.assertEqual(body["average_score"], 10.0)

    def test_unknown_kind(self) -> None:
        self.assertEqual(self.client.get("/api/v1/seo/images/videos").status_code, 422)
