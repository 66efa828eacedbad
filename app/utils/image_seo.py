"""
Image SEO scoring for blog and portfolio images.

Scores are additive and capped at 100. The generators fill in missing alt,
title, description and caption text from the item's own content; stored
values always win.
"""
from typing import Any, Dict, List, Optional
from app.core.config import settings
from app.schemas.entities import Blog, Portfolio

OPTIMIZED_SCORE = 80
DEFAULT_IMAGE_WIDTH = 1200
DEFAULT_IMAGE_HEIGHT = 675
IMAGE_FORMATS = {"jpg": "jpg", "jpeg": "jpg", "png": "png", "webp": "webp"}


def _good_alt_length(alt: str) -> bool:
    return 10 < len(alt) < 125


# =============================================
# BLOG IMAGES
# =============================================

def calculate_blog_image_score(blog: Blog) -> int:
    score = 0
    if blog.image_url:
        score += 25
    if blog.image_alt:
        score += 30 if _good_alt_length(blog.image_alt) else 15
    if blog.image_title:
        score += 15
    if blog.image_description:
        score += 15
    if blog.image_caption:
        score += 10
    if blog.image_width and blog.image_height:
        score += 5
    return min(score, 100)


def generate_blog_alt_text(blog: Blog) -> str:
    """Stored alt text, else the title plus the post's first sentence (100 chars max)."""
    if blog.image_alt:
        return blog.image_alt
    first_sentence = blog.content.split(".")[0]
    clean = first_sentence.replace("#", "").replace("*", "").replace("\n", "").strip()
    return f"{blog.title} - {clean[:100]}"


def generate_blog_image_title(blog: Blog) -> str:
    return blog.image_title or blog.title


def generate_blog_image_description(blog: Blog) -> str:
    return blog.image_description or f"Featured image for: {blog.title}"


def get_blog_image_recommendations(blog: Blog) -> List[str]:
    if not blog.image_url:
        return ["Add a featured image"]

    recommendations = []
    if not blog.image_alt or len(blog.image_alt) < 10:
        recommendations.append("Add descriptive alt text (10-125 characters)")
    if not blog.image_title:
        recommendations.append("Add image title attribute")
    if not blog.image_description:
        recommendations.append("Add image description for better context")
    if not blog.image_width or not blog.image_height:
        recommendations.append("Add image dimensions for better performance")

    return recommendations or ["Image SEO is fully optimized!"]


# =============================================
# PORTFOLIO IMAGES
# =============================================

def calculate_portfolio_image_score(project: Portfolio) -> int:
    score = 0
    if project.image_url:
        score += 20
    if project.image_alt:
        score += 25 if _good_alt_length(project.image_alt) else 10
    if project.image_title:
        score += 15
    if project.image_description:
        score += 15
    if project.client_name:
        score += 10
    if project.category:
        score += 10
    if project.technologies:
        score += 5
    return min(score, 100)


def generate_portfolio_alt_text(project: Portfolio) -> str:
    if project.image_alt:
        return project.image_alt
    client = f" for {project.client_name}" if project.client_name else ""
    category = f" - {project.category}" if project.category else ""
    return f"{project.title}{client}{category} - {settings.SITE_NAME} Portfolio"


def generate_portfolio_image_title(project: Portfolio) -> str:
    if project.image_title:
        return project.image_title
    client = f" - {project.client_name}" if project.client_name else ""
    return f"{project.title}{client}"


def generate_portfolio_image_description(project: Portfolio) -> str:
    if project.image_description:
        return project.image_description
    client = (
        f" - Built for {project.client_name}" if project.client_name
        else f" - {settings.SITE_NAME} Portfolio"
    )
    return f"Project showcase for {project.title}{client}"


def generate_portfolio_image_caption(project: Portfolio) -> Optional[str]:
    if project.image_caption:
        return project.image_caption
    if project.client_name:
        return f"{project.title} - Client: {project.client_name}"
    return None


def get_portfolio_image_recommendations(project: Portfolio) -> List[str]:
    if not project.image_url:
        return ["Add a project showcase image"]

    recommendations = []
    if not project.image_alt or len(project.image_alt) < 10:
        recommendations.append("Add descriptive alt text with project and client details")
    if not project.image_title:
        recommendations.append("Add image title with client context")
    if not project.image_description:
        recommendations.append("Add image description for better context")
    if not project.client_name:
        recommendations.append("Add client name for credibility boost")
    if not project.category:
        recommendations.append("Add project category for better organization")
    if not project.technologies:
        recommendations.append("Add technology stack information")

    return recommendations or ["Portfolio image SEO is fully optimized!"]


# =============================================
# SHARED
# =============================================

def get_image_score_category(score: int) -> str:
    if score >= 80:
        return "Excellent"
    if score >= 60:
        return "Good"
    if score >= 40:
        return "Needs Improvement"
    return "Poor"


def get_image_format(url: str) -> str:
    """File format from the URL extension; anything unknown is treated as jpg."""
    extension = url.split("?")[0].rsplit(".", 1)[-1].lower()
    return IMAGE_FORMATS.get(extension, "jpg")


def needs_image_optimization(item) -> bool:
    if not item.image_url:
        return False
    return not item.image_alt or not item.image_title or (item.image_seo_score or 0) < OPTIMIZED_SCORE


def build_image_object(item, alt: str, description: str, caption: Optional[str] = None) -> Optional[Dict[str, Any]]:
    """ImageObject for an item's featured image, or None without an image."""
    if not item.image_url:
        return None

    image: Dict[str, Any] = {
        "@type": "ImageObject",
        "url": item.image_url,
        "width": item.image_width or DEFAULT_IMAGE_WIDTH,
        "height": item.image_height or DEFAULT_IMAGE_HEIGHT,
        "alt": alt,
        "description": description,
    }
    if caption:
        image["caption"] = caption
    return image


def blog_image_report(blog: Blog) -> Dict[str, Any]:
    score = calculate_blog_image_score(blog)
    return {
        "id": blog.id,
        "title": blog.title,
        "image_url": blog.image_url,
        "format": get_image_format(blog.image_url) if blog.image_url else None,
        "score": score,
        "category": get_image_score_category(score),
        "needs_optimization": needs_image_optimization(blog),
        "recommendations": get_blog_image_recommendations(blog),
        "suggested": {
            "image_alt": generate_blog_alt_text(blog),
            "image_title": generate_blog_image_title(blog),
            "image_description": generate_blog_image_description(blog),
        },
        "image_object": build_image_object(
            blog,
            alt=blog.image_alt or blog.title,
            description=generate_blog_image_description(blog),
            caption=blog.image_caption,
        ),
    }


def portfolio_image_report(project: Portfolio) -> Dict[str, Any]:
    score = calculate_portfolio_image_score(project)
    return {
        "id": project.id,
        "title": project.title,
        "image_url": project.image_url,
        "format": get_image_format(project.image_url) if project.image_url else None,
        "score": score,
        "category": get_image_score_category(score),
        "needs_optimization": needs_image_optimization(project),
        "recommendations": get_portfolio_image_recommendations(project),
        "suggested": {
            "image_alt": generate_portfolio_alt_text(project),
            "image_title": generate_portfolio_image_title(project),
            "image_description": generate_portfolio_image_description(project),
            "image_caption": generate_portfolio_image_caption(project),
        },
        "image_object": build_image_object(
            project,
            alt=generate_portfolio_alt_text(project),
            description=generate_portfolio_image_description(project),
            caption=generate_portfolio_image_caption(project),
        ),
    }
