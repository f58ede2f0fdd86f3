"""Feed resource."""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from feedly_cloud.models.base import drop_none, require_dict


@dataclass
class Feed:
    """A feed as returned inside collections."""

    id: str
    feed_id: Optional[str] = None
    subscribers: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    language: Optional[str] = None
    # Average number of articles published weekly
    velocity: Optional[float] = None
    website: Optional[str] = None
    topics: Optional[List[str]] = None
    # Only set when the feed cannot be polled: dead, dead.flooded, dormant...
    state: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Feed":
        data = require_dict(data, "feed")
        return cls(
            id=data.get("id", ""),
            feed_id=data.get("feedId"),
            subscribers=data.get("subscribers"),
            title=data.get("title"),
            description=data.get("description"),
            language=data.get("language"),
            velocity=data.get("velocity"),
            website=data.get("website"),
            topics=data.get("topics"),
            state=data.get("state"),
        )

    def to_dict(self) -> Dict[str, Any]:
        payload = {"id": self.id}
        payload.update(
            drop_none(
                {
                    "feedId": self.feed_id,
                    "subscribers": self.subscribers,
                    "title": self.title,
                    "description": self.description,
                    "language": self.language,
                    "velocity": self.velocity,
                    "website": self.website,
                    "topics": self.topics,
                    "state": self.state,
                }
            )
        )
        return payload
