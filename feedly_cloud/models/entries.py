"""Entry (article) resources."""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional

from feedly_cloud.models.base import (
    drop_none,
    dump_list,
    list_of,
    optional_timestamp,
    require_dict,
)
from feedly_cloud.models.priorities import Priority
from feedly_cloud.timestamp import decode_timestamp


@dataclass
class Content:
    """Sanitized HTML content and its text direction (ltr or rtl)."""

    content: str = ""
    direction: str = "ltr"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Content":
        data = require_dict(data, "content")
        return cls(
            content=data.get("content", ""), direction=data.get("direction", "ltr")
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"content": self.content, "direction": self.direction}


@dataclass
class Link:
    href: str
    type: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Link":
        data = require_dict(data, "link")
        return cls(href=data.get("href", ""), type=data.get("type"))

    def to_dict(self) -> Dict[str, Any]:
        payload = {"href": self.href}
        payload.update(drop_none({"type": self.type}))
        return payload


@dataclass
class Origin:
    """Feed the entry was crawled from."""

    stream_id: Optional[str] = None
    title: Optional[str] = None
    html_url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Origin":
        data = require_dict(data, "origin")
        return cls(
            stream_id=data.get("streamId"),
            title=data.get("title"),
            html_url=data.get("htmlUrl"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return drop_none(
            {"streamId": self.stream_id, "title": self.title, "htmlUrl": self.html_url}
        )


@dataclass
class Visual:
    url: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    content_type: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Visual":
        data = require_dict(data, "visual")
        return cls(
            url=data.get("url"),
            width=data.get("width"),
            height=data.get("height"),
            content_type=data.get("contentType"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return drop_none(
            {
                "url": self.url,
                "width": self.width,
                "height": self.height,
                "contentType": self.content_type,
            }
        )


@dataclass
class Tag:
    id: str
    label: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tag":
        data = require_dict(data, "tag")
        return cls(id=data.get("id", ""), label=data.get("label"))

    def to_dict(self) -> Dict[str, Any]:
        payload = {"id": self.id}
        payload.update(drop_none({"label": self.label}))
        return payload


@dataclass
class Category(Tag):
    """Category the user filed the entry's feed under."""


def _optional(data: Dict[str, Any], key: str, factory):
    value = data.get(key)
    return factory(value) if value is not None else None


@dataclass
class Entry:
    """A single article.

    ``crawled`` and ``published`` are always present on the wire; the other
    timestamps are optional. ``unread`` only reflects the user's state when
    the request was authorized.
    """

    id: str
    fingerprint: str = ""
    origin_id: str = ""
    unread: bool = False
    crawled: Optional[datetime] = None
    published: Optional[datetime] = None
    title: Optional[str] = None
    content: Optional[Content] = None
    summary: Optional[Content] = None
    author: Optional[str] = None
    recrawled: Optional[datetime] = None
    updated: Optional[datetime] = None
    alternate: Optional[List[Link]] = None
    origin: Optional[Origin] = None
    keywords: Optional[List[str]] = None
    visual: Optional[Visual] = None
    tags: Optional[List[Tag]] = None
    categories: Optional[List[Category]] = None
    engagement: Optional[int] = None
    action_timestamp: Optional[datetime] = None
    enclosure: Optional[List[Link]] = None
    sid: Optional[str] = None
    priorities: Optional[List[Priority]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Entry":
        data = require_dict(data, "entry")
        return cls(
            id=data.get("id", ""),
            fingerprint=data.get("fingerprint", ""),
            origin_id=data.get("originId", ""),
            unread=data.get("unread", False),
            crawled=decode_timestamp(data.get("crawled")),
            published=decode_timestamp(data.get("published")),
            title=data.get("title"),
            content=_optional(data, "content", Content.from_dict),
            summary=_optional(data, "summary", Content.from_dict),
            author=data.get("author"),
            recrawled=decode_timestamp(data.get("recrawled")),
            updated=decode_timestamp(data.get("updated")),
            alternate=list_of(data.get("alternate"), Link.from_dict),
            origin=_optional(data, "origin", Origin.from_dict),
            keywords=data.get("keywords"),
            visual=_optional(data, "visual", Visual.from_dict),
            tags=list_of(data.get("tags"), Tag.from_dict),
            categories=list_of(data.get("categories"), Category.from_dict),
            engagement=data.get("engagement"),
            action_timestamp=decode_timestamp(data.get("actionTimestamp")),
            enclosure=list_of(data.get("enclosure"), Link.from_dict),
            sid=data.get("sid"),
            priorities=list_of(data.get("priorities"), Priority.from_dict),
        )

    def to_dict(self) -> Dict[str, Any]:
        payload = {
            "id": self.id,
            "fingerprint": self.fingerprint,
            "originId": self.origin_id,
            "unread": self.unread,
            "crawled": optional_timestamp(self.crawled),
            "published": optional_timestamp(self.published),
        }
        payload.update(
            drop_none(
                {
                    "title": self.title,
                    "content": self.content.to_dict() if self.content else None,
                    "summary": self.summary.to_dict() if self.summary else None,
                    "author": self.author,
                    "recrawled": optional_timestamp(self.recrawled),
                    "updated": optional_timestamp(self.updated),
                    "alternate": dump_list(self.alternate),
                    "origin": self.origin.to_dict() if self.origin else None,
                    "keywords": self.keywords,
                    "visual": self.visual.to_dict() if self.visual else None,
                    "tags": dump_list(self.tags),
                    "categories": dump_list(self.categories),
                    "engagement": self.engagement,
                    "actionTimestamp": optional_timestamp(self.action_timestamp),
                    "enclosure": dump_list(self.enclosure),
                    "sid": self.sid,
                    "priorities": dump_list(self.priorities),
                }
            )
        )
        return payload
