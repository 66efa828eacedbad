"""
API endpoints for image SEO reports.
"""
from enum import Enum
from fastapi import APIRouter
from app.core.database import get_blogs, get_portfolio
from app.schemas.pages import ImageSeoReport
from app.utils.image_seo import blog_image_report, portfolio_image_report

router = APIRouter()


class ImageKind(str, Enum):
    BLOGS = "blogs"
    PORTFOLIO = "portfolio"


@router.get("/images/{kind}", response_model=ImageSeoReport)
async def image_seo_report(kind: ImageKind) -> ImageSeoReport:
    """
    Score every blog or portfolio image and list what would improve it.

    Nothing is written back; the suggested alt, title and description text
    is returned for review.
    """
    if kind == ImageKind.BLOGS:
        items = [blog_image_report(blog) for blog in await get_blogs()]
    else:
        items = [portfolio_image_report(project) for project in await get_portfolio()]

    scores = [item["score"] for item in items]
    return ImageSeoReport(
        kind=kind.value,
        total=len(items),
        needs_optimization=sum(1 for item in items if item["needs_optimization"]),
        average_score=round(sum(scores) / len(scores), 1) if scores else 0.0,
        items=items,
    )
