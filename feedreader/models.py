"""Core data models for the feed reader."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from dateutil import parser as dtparse

from .schemas import StoredArticle


def to_iso(dt: datetime) -> str:
    """Render ``dt`` as a UTC ISO-8601 timestamp with second precision."""

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}T{dt:%H:%M:%S}Z"


def parse_instant(value: str) -> Optional[datetime]:
    """Parse a timestamp string into an aware UTC datetime, or ``None``.

    Dates whose UTC conversion falls outside the representable range also
    read as ``None``.
    """

    if not value or not value.strip():
        return None
    try:
        dt = dtparse.parse(value)
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        return None


@dataclass
class Article:
    """Normalized article ready for display."""

    id: str
    title: str
    summary: str
    content: str
    author: str
    published_at: str
    category: str
    read_time: int
    image_url: Optional[str] = None

    def published_instant(self) -> datetime:
        """Return ``published_at`` as an instant; unreadable values sort oldest."""

        return parse_instant(self.published_at) or datetime.min.replace(tzinfo=timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "summary": self.summary,
            "content": self.content,
            "author": self.author,
            "publishedAt": self.published_at,
            "category": self.category,
            "readTime": self.read_time,
        }
        if self.image_url is not None:
            payload["imageUrl"] = self.image_url
        return payload

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Article":
        """Build an article from its stored shape.

        Raises :class:`pydantic.ValidationError` when ``data`` is not a
        well-formed article record.
        """

        record = StoredArticle.model_validate(data)
        return cls(
            id=record.id,
            title=record.title,
            summary=record.summary,
            content=record.content,
            author=record.author,
            published_at=record.published_at,
            category=record.category,
            read_time=record.read_time,
            image_url=record.image_url,
        )


__all__ = ["Article", "parse_instant", "to_iso"]
