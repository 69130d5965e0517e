"""Turn raw proxy items into canonical articles."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Union

from .config import FeedConfig
from .identifiers import generate_id
from .models import Article, parse_instant, to_iso
from .readtime import estimate_read_time
from .sanitizer import backfill_content, extract_image, sanitize, summarize
from .schemas import RawFeedItem

DEFAULT_AUTHOR = "News Staff"


def normalize_item(
    raw: Union[RawFeedItem, Mapping[str, Any]],
    default_category: str,
    config: Optional[FeedConfig] = None,
    now: Optional[datetime] = None,
) -> Article:
    """Normalize one feed item.

    ``now`` stands in for the publication time when the item carries no
    readable date.
    """

    if not isinstance(raw, RawFeedItem):
        raw = RawFeedItem.model_validate(raw)
    config = config or FeedConfig()

    title = sanitize(raw.title)
    description = sanitize(raw.description)
    content = sanitize(raw.content) if raw.content else description

    published = parse_instant(raw.pub_date)
    if published is None:
        published = now or datetime.now(timezone.utc)

    enclosure_thumbnail = raw.enclosure.thumbnail if raw.enclosure else ""

    return Article(
        id=generate_id(title, raw.link),
        title=title,
        summary=summarize(description, config.summary_max_chars),
        content=backfill_content(content, description, config.min_content_chars),
        author=raw.author.strip() or DEFAULT_AUTHOR,
        published_at=to_iso(published),
        image_url=extract_image(
            raw.content, raw.description, raw.thumbnail, enclosure_thumbnail
        ),
        category=raw.primary_category or default_category,
        read_time=estimate_read_time(content, config.words_per_minute),
    )


__all__ = ["DEFAULT_AUTHOR", "normalize_item"]
