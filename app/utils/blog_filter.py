"""
Blog sidebar filtering by publication period or tag.

A filter holds at most one criterion: choosing a period clears the tag and
choosing a tag clears the period. Each selection maps to a fresh datastore
query.
"""
import re
from datetime import datetime, timedelta
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel
from app.core import database
from app.core.logging import logger
from app.schemas.entities import Blog


FRACTION_PATTERN = re.compile(r"(?<=:\d{2})\.(\d+)")


class TimePeriod(str, Enum):
    ALL_TIME = "All Time"
    THIS_MONTH = "This Month"
    THIS_WEEK = "This Week"
    LAST_WEEK = "Last Week"


class BlogFilter(BaseModel):
    period: Optional[TimePeriod] = None
    tag: Optional[str] = None

    def select_period(self, period: TimePeriod) -> "BlogFilter":
        return BlogFilter(period=TimePeriod(period), tag=None)

    def select_tag(self, tag: str) -> "BlogFilter":
        return BlogFilter(period=None, tag=tag)


def period_start(period: TimePeriod, now: datetime) -> Optional[datetime]:
    """
    Earliest publication time included in a period.

    ``This Week`` starts at the most recent Sunday midnight, ``Last Week`` is
    the trailing seven days, ``This Month`` starts on the 1st at midnight and
    ``All Time`` has no lower bound.
    """
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    if period == TimePeriod.THIS_WEEK:
        # weekday() counts from Monday; shift so Sunday is 0
        days_since_sunday = (now.weekday() + 1) % 7
        return midnight - timedelta(days=days_since_sunday)
    if period == TimePeriod.LAST_WEEK:
        return now - timedelta(days=7)
    if period == TimePeriod.THIS_MONTH:
        return midnight.replace(day=1)
    return None


def _parse_timestamp(value: str, tzinfo) -> datetime:
    """
    Parse a datastore timestamp into the same awareness as the comparison bound.

    Postgres trims trailing zeros from fractional seconds; the fraction is
    padded back to six digits so older ``fromisoformat`` versions accept it.
    """
    normalised = FRACTION_PATTERN.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), value.replace("Z", "+00:00"))
    parsed = datetime.fromisoformat(normalised)
    if tzinfo is None:
        return parsed.replace(tzinfo=None) if parsed.tzinfo else parsed
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=tzinfo)


def filter_blogs(blogs: List[Blog], blog_filter: BlogFilter, now: datetime) -> List[Blog]:
    """Apply a filter to an already fetched list, keeping input order."""
    if blog_filter.tag:
        return [blog for blog in blogs if blog_filter.tag in blog.tags]

    start = period_start(blog_filter.period or TimePeriod.ALL_TIME, now)
    if start is None:
        return list(blogs)

    selected = []
    for blog in blogs:
        if not blog.published_at:
            continue
        try:
            published = _parse_timestamp(blog.published_at, start.tzinfo)
        except ValueError:
            logger.warning(f"Skipping blog {blog.slug} with unreadable published_at: {blog.published_at}")
            continue
        if published >= start:
            selected.append(blog)
    return selected


async def fetch_filtered_blogs(blog_filter: BlogFilter, now: datetime) -> List[Blog]:
    """
    Run the datastore query for a filter, newest first.

    Rows also pass through ``filter_blogs``, so only the filter's exact
    subset is returned.
    """
    if blog_filter.tag:
        blogs = await database.get_blogs_with_tag(blog_filter.tag)
    else:
        start = period_start(blog_filter.period or TimePeriod.ALL_TIME, now)
        if start is None:
            blogs = await database.get_blogs()
        else:
            blogs = await database.get_blogs_published_since(start)
    return filter_blogs(blogs, blog_filter, now)
