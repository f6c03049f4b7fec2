from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel


class PostCategory(str, Enum):
    ENGINEERING = "engineering"
    RELEASES = "releases"
    NEWS_AND_EVENTS = "news-and-events"

    @property
    def display_name(self) -> str:
        return _CATEGORY_NAMES[self]

    @classmethod
    def parse(cls, value: str) -> "PostCategory":
        """Accept either the url slug (``news-and-events``) or the member name."""
        normalized = value.strip()
        for member in cls:
            if normalized.lower() == member.value or normalized.upper() == member.name:
                return member
        raise ValueError(f"Unknown post category: {value!r}")


_CATEGORY_NAMES = {
    PostCategory.ENGINEERING: "Engineering",
    PostCategory.RELEASES: "Releases",
    PostCategory.NEWS_AND_EVENTS: "News and Events",
}


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Naive values are taken to already be UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class PostStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"


class Post(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=200)
    author: Optional[str] = Field(default=None, max_length=100)
    raw_content: str = ""
    rendered_content: str = ""
    rendered_summary: str = ""
    category: PostCategory = Field(default=PostCategory.ENGINEERING, index=True)
    broadcast: bool = Field(default=False, index=True)
    draft: bool = Field(default=False, index=True)
    created_at: datetime = Field(default_factory=utc_now)
    publish_at: datetime = Field(default_factory=utc_now, index=True)

    @property
    def status(self) -> PostStatus:
        return PostStatus.DRAFT if self.draft else PostStatus.PUBLISHED


@dataclass(slots=True)
class PostForm:
    title: str
    content: str
    category: PostCategory = PostCategory.ENGINEERING
    broadcast: bool = False
    draft: bool = False
    author: Optional[str] = None
    publish_at: Optional[datetime] = None
