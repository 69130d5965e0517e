"""Pydantic schemas for proxy payloads and stored articles."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return _as_text(value[0]) if value else ""
    if isinstance(value, dict):
        return ""
    return str(value)


class Enclosure(BaseModel):
    model_config = ConfigDict(extra="ignore")

    link: str = ""
    type: str = ""
    thumbnail: str = ""

    @field_validator("link", "type", "thumbnail", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> str:
        return _as_text(value)


class RawFeedItem(BaseModel):
    """One item of the proxy's JSON rendition of a feed."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    title: str = ""
    description: str = ""
    link: str = ""
    pub_date: str = Field("", alias="pubDate")
    author: str = ""
    category: str = ""
    categories: List[str] = Field(default_factory=list)
    content: str = ""
    thumbnail: str = ""
    enclosure: Optional[Enclosure] = None

    @field_validator(
        "title",
        "description",
        "link",
        "pub_date",
        "author",
        "category",
        "content",
        "thumbnail",
        mode="before",
    )
    @classmethod
    def coerce_text(cls, value: Any) -> str:
        return _as_text(value)

    @field_validator("categories", mode="before")
    @classmethod
    def coerce_categories(cls, value: Any) -> List[str]:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        if isinstance(value, (list, tuple)):
            return [_as_text(entry) for entry in value if _as_text(entry)]
        return []

    @field_validator("enclosure", mode="before")
    @classmethod
    def coerce_enclosure(cls, value: Any) -> Any:
        if isinstance(value, dict) and value:
            return value
        return None

    @property
    def primary_category(self) -> str:
        if self.category.strip():
            return self.category.strip()
        for entry in self.categories:
            if entry.strip():
                return entry.strip()
        return ""


class FeedPayload(BaseModel):
    """Envelope returned by the feed conversion proxy."""

    model_config = ConfigDict(extra="ignore")

    items: List[RawFeedItem]
    title: Optional[str] = None
    description: Optional[str] = None

    @field_validator("title", "description", mode="before")
    @classmethod
    def coerce_optional_text(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        return _as_text(value)


class StoredArticle(BaseModel):
    """Article record as persisted in keyed storage."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str
    title: str
    summary: str
    content: str
    author: str
    published_at: str = Field(..., alias="publishedAt")
    image_url: Optional[str] = Field(None, alias="imageUrl")
    category: str
    read_time: int = Field(..., alias="readTime", ge=1)


__all__ = ["Enclosure", "FeedPayload", "RawFeedItem", "StoredArticle"]
