"""Priority (importance filter) resources attached to entries."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from feedly_cloud.models.base import (
    drop_none,
    list_of,
    optional_timestamp,
    require_dict,
)
from feedly_cloud.timestamp import decode_timestamp


@dataclass
class Filter:
    """Search filter used by a priority.

    ``type`` is ``matches`` for entity/topic/phrase filtering, ``likeBoard``
    for like-board filtering and ``security`` for vulnerability severity
    filtering. ``parts`` holds the ids relevant to that type.
    """

    type: str
    parts: List[str] = field(default_factory=list)
    # "about" or "mention", entities only
    salience: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Filter":
        data = require_dict(data, "filter")
        return cls(
            type=data.get("type", ""),
            parts=data.get("parts") or [],
            salience=data.get("salience"),
        )

    def to_dict(self) -> Dict[str, Any]:
        payload = {"type": self.type, "parts": list(self.parts)}
        payload.update(drop_none({"salience": self.salience}))
        return payload


@dataclass
class Priority:
    """Priority filter that matched an entry (pro+ and team only)."""

    id: str
    label: str
    layers: List[Filter] = field(default_factory=list)
    stream_ids: List[str] = field(default_factory=list)
    last_updated: Optional[datetime] = None
    last_entry_match: Optional[datetime] = None
    active: Optional[bool] = None
    active_until: Optional[datetime] = None
    next_run: Optional[datetime] = None
    num_entries_processed: Optional[int] = None
    num_entries_matching: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Priority":
        data = require_dict(data, "priority")
        return cls(
            id=data.get("id", ""),
            label=data.get("label", ""),
            layers=list_of(data.get("filters"), Filter.from_dict) or [],
            stream_ids=data.get("streamIds") or [],
            last_updated=decode_timestamp(data.get("lastUpdated")),
            last_entry_match=decode_timestamp(data.get("lastEntryMatch")),
            active=data.get("active"),
            active_until=decode_timestamp(data.get("activeUntil")),
            next_run=decode_timestamp(data.get("nextRun")),
            num_entries_processed=data.get("numEntriesProcessed"),
            num_entries_matching=data.get("numEntriesMatching"),
        )

    def to_dict(self) -> Dict[str, Any]:
        payload = {
            "id": self.id,
            "label": self.label,
            "filters": [layer.to_dict() for layer in self.layers],
            "streamIds": list(self.stream_ids),
            "lastUpdated": optional_timestamp(self.last_updated),
            "lastEntryMatch": optional_timestamp(self.last_entry_match),
        }
        payload.update(
            drop_none(
                {
                    "active": self.active,
                    "activeUntil": optional_timestamp(self.active_until),
                    "nextRun": optional_timestamp(self.next_run),
                    "numEntriesProcessed": self.num_entries_processed,
                    "numEntriesMatching": self.num_entries_matching,
                }
            )
        )
        return payload
