"""
Response schemas for page rendering and SEO reports.
"""
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class PageResponse(BaseModel):
    """Everything a page template needs to render server-side"""
    page: str = Field(..., description="Page type, e.g. 'services' or 'campaign-web'")
    data: Dict[str, Any] = Field(default_factory=dict, description="Entities fetched for the page")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Title, description, Open Graph and Twitter tags")
    schemas: List[Dict[str, Any]] = Field(default_factory=list, description="schema.org objects in embedding order")
    json_ld: str = Field("", description="Pre-rendered JSON-LD script blocks")


class BlogPostsResponse(BaseModel):
    period: Optional[str] = None
    tag: Optional[str] = None
    blogs: List[Dict[str, Any]] = Field(default_factory=list)


class BlogTagsResponse(BaseModel):
    tags: List[str] = Field(default_factory=list)


class ImageSeoReport(BaseModel):
    kind: str = Field(..., description="'blogs' or 'portfolio'")
    total: int
    needs_optimization: int
    average_score: float
    items: List[Dict[str, Any]] = Field(default_factory=list)
