"""
XML sitemap endpoint, mounted at the site root.
"""
import asyncio
from fastapi import APIRouter
from fastapi.responses import Response
from app.core.config import settings
from app.core.database import get_blogs, get_portfolio
from app.core.logging import logger
from app.utils.sitemap import build_sitemap

router = APIRouter()


@router.get("/sitemap.xml", include_in_schema=False)
async def sitemap_xml() -> Response:
    # Fetchers return [] on failure, leaving only the static pages
    blogs, projects = await asyncio.gather(get_blogs(), get_portfolio())
    logger.info(f"Building sitemap with {len(blogs)} blogs and {len(projects)} projects")

    max_age = settings.SITEMAP_CACHE_SECONDS
    return Response(
        content=build_sitemap(blogs, projects),
        media_type="application/xml",
        headers={"Cache-Control": f"public, max-age={max_age}, s-maxage={max_age}"},
    )
