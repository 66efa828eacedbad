"""
API router for version 1 of the API.
"""
from fastapi import APIRouter

from app.api.v1.endpoints import blog, contact, pages, seo

api_router = APIRouter()

api_router.include_router(pages.router, prefix="/pages", tags=["pages"])
api_router.include_router(contact.router, prefix="/contact", tags=["contact"])
api_router.include_router(blog.router, prefix="/blog", tags=["blog"])
api_router.include_router(seo.router, prefix="/seo", tags=["seo"])
