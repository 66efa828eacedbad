"""
API endpoints for the blog sidebar filters.
"""
from datetime import datetime, timezone
from typing import Optional
from fastapi import APIRouter, HTTPException, Query
from app.core.database import get_blog_tags
from app.core.logging import logger
from app.schemas.pages import BlogPostsResponse, BlogTagsResponse
from app.utils.blog_filter import BlogFilter, TimePeriod, fetch_filtered_blogs

router = APIRouter()


def _now() -> datetime:
    return datetime.now(timezone.utc)


@router.get("/posts", response_model=BlogPostsResponse)
async def list_blog_posts(
    period: Optional[TimePeriod] = Query(None, description="'All Time', 'This Month', 'This Week' or 'Last Week'"),
    tag: Optional[str] = Query(None, description="Only posts carrying this tag"),
) -> BlogPostsResponse:
    """
    List blog posts, newest first, filtered by period or by tag.

    Raises:
        HTTPException: 400 when both a period and a tag are given
    """
    if period and tag:
        raise HTTPException(status_code=400, detail="Filter by either a time period or a tag, not both")

    blog_filter = BlogFilter()
    if tag:
        blog_filter = blog_filter.select_tag(tag)
    elif period:
        blog_filter = blog_filter.select_period(period)

    blogs = await fetch_filtered_blogs(blog_filter, _now())
    logger.info(f"Blog filter period={blog_filter.period} tag={blog_filter.tag} returned {len(blogs)} posts")

    return BlogPostsResponse(
        period=blog_filter.period.value if blog_filter.period else None,
        tag=blog_filter.tag,
        blogs=[blog.model_dump() for blog in blogs],
    )


@router.get("/tags", response_model=BlogTagsResponse)
async def list_blog_tags() -> BlogTagsResponse:
    return BlogTagsResponse(tags=await get_blog_tags())
