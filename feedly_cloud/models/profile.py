"""Profile resources."""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from feedly_cloud.models.base import drop_none, optional_timestamp, require_dict
from feedly_cloud.timestamp import decode_timestamp

# (attribute, wire key) for the optional string fields of a profile
_PROFILE_STRING_FIELDS = [
    ("email", "email"),
    ("given_name", "givenName"),
    ("family_name", "familyName"),
    ("full_name", "fullName"),
    ("picture", "picture"),
    ("gender", "gender"),
    ("locale", "locale"),
    ("google", "google"),
    ("reader", "reader"),
    ("twitter", "twitter"),
    ("twitter_user_id", "twitterUserId"),
    ("facebook_user_id", "facebookUserId"),
    ("word_press_id", "wordPressId"),
    ("windows_live_id", "windowsLiveId"),
    ("wave", "wave"),
    ("product", "product"),
    ("subscription_status", "subscriptionStatus"),
]


@dataclass
class Profile:
    """Profile of the user owning the access token.

    Most fields depend on the OAuth provider the account was created with
    and may be missing. ``created`` is not set for accounts created before
    10/2/2013. ``product``, ``product_expiration`` and
    ``subscription_status`` are only set for Pro accounts.
    """

    id: str
    client: str = ""
    source: str = ""
    created: Optional[datetime] = None
    email: Optional[str] = None
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    full_name: Optional[str] = None
    picture: Optional[str] = None
    gender: Optional[str] = None
    locale: Optional[str] = None
    google: Optional[str] = None
    reader: Optional[str] = None
    twitter: Optional[str] = None
    twitter_user_id: Optional[str] = None
    facebook_user_id: Optional[str] = None
    word_press_id: Optional[str] = None
    windows_live_id: Optional[str] = None
    # "yyyy.ww": year and week number the user joined
    wave: Optional[str] = None
    product: Optional[str] = None
    product_expiration: Optional[datetime] = None
    subscription_status: Optional[str] = None
    is_evernote_connected: Optional[bool] = None
    is_pocket_connected: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Profile":
        data = require_dict(data, "profile")
        fields = {attr: data.get(key) for attr, key in _PROFILE_STRING_FIELDS}
        return cls(
            id=data.get("id", ""),
            client=data.get("client", ""),
            source=data.get("source", ""),
            created=decode_timestamp(data.get("created")),
            product_expiration=decode_timestamp(data.get("productExpiration")),
            is_evernote_connected=data.get("isEvernoteConnected"),
            is_pocket_connected=data.get("isPocketConnected"),
            **fields,
        )

    def to_dict(self) -> Dict[str, Any]:
        payload = {
            "id": self.id,
            "client": self.client,
            "source": self.source,
            "created": optional_timestamp(self.created),
        }
        optional = {key: getattr(self, attr) for attr, key in _PROFILE_STRING_FIELDS}
        optional.update(
            {
                "productExpiration": optional_timestamp(self.product_expiration),
                "isEvernoteConnected": self.is_evernote_connected,
                "isPocketConnected": self.is_pocket_connected,
            }
        )
        payload.update(drop_none(optional))
        return payload


@dataclass
class UpdateProfileRequest:
    """Payload for updating the profile. Only fields that are set are sent."""

    email: Optional[str] = None
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    picture: Optional[str] = None
    gender: Optional[str] = None
    locale: Optional[str] = None
    # Twitter handle, e.g. "edwk"
    twitter: Optional[str] = None
    facebook: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return drop_none(
            {
                "email": self.email,
                "givenName": self.given_name,
                "familyName": self.family_name,
                "picture": self.picture,
                "gender": self.gender,
                "locale": self.locale,
                "twitter": self.twitter,
                "facebook": self.facebook,
            }
        )
