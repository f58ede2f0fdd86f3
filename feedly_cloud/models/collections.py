"""Collection resources and the payloads that modify them."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from feedly_cloud.models.base import (
    drop_none,
    dump_list,
    list_of,
    optional_timestamp,
    require_dict,
)
from feedly_cloud.models.feeds import Feed
from feedly_cloud.timestamp import decode_timestamp


@dataclass
class Collection:
    """A personal or enterprise collection of feeds."""

    id: str
    label: str = ""
    created: Optional[datetime] = None
    feeds: List[Feed] = field(default_factory=list)
    description: Optional[str] = None
    cover: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Collection":
        data = require_dict(data, "collection")
        return cls(
            id=data.get("id", ""),
            label=data.get("label", ""),
            created=decode_timestamp(data.get("created")),
            feeds=list_of(data.get("feeds"), Feed.from_dict) or [],
            description=data.get("description"),
            cover=data.get("cover"),
        )

    def to_dict(self) -> Dict[str, Any]:
        payload = {
            "id": self.id,
            "created": optional_timestamp(self.created),
            "label": self.label,
            "feeds": dump_list(self.feeds),
        }
        payload.update(drop_none({"description": self.description, "cover": self.cover}))
        return payload


@dataclass
class AddFeedRequest:
    """Feed to add to a collection; the default title is used when unset."""

    id: str
    title: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        payload = {"id": self.id}
        payload.update(drop_none({"title": self.title}))
        return payload


@dataclass
class DeleteFeedRequest:
    id: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id}


@dataclass
class CreateOrUpdateCollectionRequest:
    """Payload for creating or updating a personal collection.

    ``label`` is required for new collections. When ``id`` is missing the
    server generates one.
    """

    label: str
    id: Optional[str] = None
    description: Optional[str] = None
    feeds: Optional[List[AddFeedRequest]] = None
    delete_cover: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        payload = {"label": self.label}
        payload.update(
            drop_none(
                {
                    "id": self.id,
                    "description": self.description,
                    "feeds": dump_list(self.feeds),
                    "deleteCover": self.delete_cover,
                }
            )
        )
        return payload
