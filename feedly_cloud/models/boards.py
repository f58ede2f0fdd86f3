"""Board resources."""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from feedly_cloud.models.base import drop_none, optional_timestamp, require_dict
from feedly_cloud.timestamp import decode_timestamp


@dataclass
class Board:
    """A personal or enterprise board.

    ``customizable`` is False for boards whose label, description and cover
    cannot be changed by the user. ``html_url`` and ``stream_id`` are only
    set for public boards.
    """

    id: str
    label: str = ""
    created: Optional[datetime] = None
    customizable: bool = False
    enterprise: bool = False
    description: Optional[str] = None
    cover: Optional[str] = None
    is_public: Optional[bool] = None
    show_notes: Optional[bool] = None
    show_highlights: Optional[bool] = None
    html_url: Optional[str] = None
    stream_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Board":
        data = require_dict(data, "board")
        return cls(
            id=data.get("id", ""),
            label=data.get("label", ""),
            created=decode_timestamp(data.get("created")),
            customizable=data.get("customizable", False),
            enterprise=data.get("enterprise", False),
            description=data.get("description"),
            cover=data.get("cover"),
            is_public=data.get("isPublic"),
            show_notes=data.get("showNotes"),
            show_highlights=data.get("showHighlights"),
            html_url=data.get("htmlUrl"),
            stream_id=data.get("streamId"),
        )

    def to_dict(self) -> Dict[str, Any]:
        payload = {
            "id": self.id,
            "created": optional_timestamp(self.created),
            "label": self.label,
            "customizable": self.customizable,
            "enterprise": self.enterprise,
        }
        payload.update(
            drop_none(
                {
                    "description": self.description,
                    "cover": self.cover,
                    "isPublic": self.is_public,
                    "showNotes": self.show_notes,
                    "showHighlights": self.show_highlights,
                    "htmlUrl": self.html_url,
                    "streamId": self.stream_id,
                }
            )
        )
        return payload


@dataclass
class UpdateBoardRequest:
    """Payload for updating a board.

    Changing ``is_public``, ``show_notes`` or ``show_highlights`` requires a
    Feedly Pro subscription.
    """

    id: str
    label: Optional[str] = None
    description: Optional[str] = None
    is_public: Optional[bool] = None
    show_notes: Optional[bool] = None
    show_highlights: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        payload = {"id": self.id}
        payload.update(
            drop_none(
                {
                    "label": self.label,
                    "description": self.description,
                    "isPublic": self.is_public,
                    "showNotes": self.show_notes,
                    "showHighlights": self.show_highlights,
                }
            )
        )
        return payload
