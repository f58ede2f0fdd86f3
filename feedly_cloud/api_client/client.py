"""Client for the Feedly Cloud REST API."""
import logging
from typing import Any, BinaryIO, Callable, Dict, List, Optional, TypeVar, Union

import requests

from feedly_cloud.config.client_config import (
    ClientConfig,
    ClientConfigProvider,
    EnvironmentClientConfigProvider,
)
from feedly_cloud.exceptions import FeedlyAPIError, FeedlyResponseError
from feedly_cloud.models import (
    AddFeedRequest,
    Board,
    Collection,
    CreateOrUpdateCollectionRequest,
    DeleteFeedRequest,
    Entry,
    Feed,
    Profile,
    UpdateBoardRequest,
    UpdateProfileRequest,
)
from feedly_cloud.models.base import list_of
from feedly_cloud.multipart import encode_cover_image

logger = logging.getLogger(__name__)

T = TypeVar("T")

PROFILE_ENDPOINT = "profile"
BOARDS_ENDPOINT = "boards"
COLLECTIONS_ENDPOINT = "collections"
ENTRIES_ENDPOINT = "entries"

CoverImage = Union[BinaryIO, bytes, bytearray]


class FeedlyClient:
    """Typed client for the Feedly Cloud API.

    Every request carries the bearer token and a JSON content type, except
    cover image uploads which send multipart/form-data instead.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        config_provider: Optional[ClientConfigProvider] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the client.

        Args:
            config: Explicit client configuration
            config_provider: Used when config is None. Defaults to environment variables.
            session: Optional requests session to send calls through
        """
        if config is None:
            config_provider = config_provider or EnvironmentClientConfigProvider()
            config = config_provider.get_config()

        self.config = config
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {config.token}",
                "Content-Type": "application/json",
            }
        )

    def _request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, str]] = None,
        json: Any = None,
        data: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> requests.Response:
        logger.debug(f"{method} {url}")
        try:
            response = self.session.request(
                method,
                url,
                params=params,
                json=json,
                data=data,
                headers=headers,
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Feedly API call {method} {url} failed: {str(e)}")
            raise FeedlyAPIError(f"Feedly API call failed: {str(e)}") from e

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            logger.warning(
                f"Feedly API returned {response.status_code} for {method} {url}"
            )
            raise FeedlyAPIError(
                f"Feedly API returned {response.status_code} {response.reason}",
                status_code=response.status_code,
                reason=response.reason,
            ) from e

        return response

    def _decode(self, response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise FeedlyResponseError(
                f"Invalid JSON in response from {response.url}"
            ) from e

    def _decode_one(
        self, response: requests.Response, factory: Callable[[Dict[str, Any]], T]
    ) -> T:
        return factory(self._decode(response))

    def _decode_list(
        self, response: requests.Response, factory: Callable[[Dict[str, Any]], T]
    ) -> List[T]:
        return list_of(self._decode(response), factory) or []

    # Profile

    def get_profile(self) -> Profile:
        """Return the profile of the user owning the access token."""
        response = self._request("GET", self.config.get_api_url(PROFILE_ENDPOINT))
        return self._decode_one(response, Profile.from_dict)

    def update_profile(self, request: UpdateProfileRequest) -> Profile:
        """Update the profile with the fields set in the request."""
        response = self._request(
            "POST", self.config.get_api_url(PROFILE_ENDPOINT), json=request.to_dict()
        )
        return self._decode_one(response, Profile.from_dict)

    # Boards

    def list_boards(self, with_enterprise: bool = False) -> List[Board]:
        """Return the user's boards.

        Args:
            with_enterprise: Also return enterprise boards followed by the user
        """
        params = {"withEnterprise": "true"} if with_enterprise else None
        response = self._request(
            "GET", self.config.get_api_url(BOARDS_ENDPOINT), params=params
        )
        return self._decode_list(response, Board.from_dict)

    def update_board(self, request: UpdateBoardRequest) -> None:
        """Update a board with the fields set in the request."""
        self._request(
            "POST", self.config.get_api_url(BOARDS_ENDPOINT), json=request.to_dict()
        )

    def upload_board_cover_image(self, board_id: str, cover_image: CoverImage) -> None:
        """Upload a new cover image for an existing board."""
        self._upload_cover_image(
            self.config.get_api_url(BOARDS_ENDPOINT, board_id), cover_image
        )

    # Collections

    def list_collections(
        self, with_stats: bool = False, with_enterprise: bool = False
    ) -> List[Collection]:
        """Return the user's collections.

        Args:
            with_stats: Include reading and tag stats for the past 31 days
            with_enterprise: Also return enterprise collections followed by the user
        """
        params = {}
        if with_stats:
            params["withStats"] = "true"
        if with_enterprise:
            params["withEnterprise"] = "true"
        response = self._request(
            "GET", self.config.get_api_url(COLLECTIONS_ENDPOINT), params=params or None
        )
        return self._decode_list(response, Collection.from_dict)

    def get_collection(self, collection_id: str) -> Collection:
        """Return details about a personal collection."""
        response = self._request(
            "GET", self.config.get_api_url(COLLECTIONS_ENDPOINT, collection_id)
        )
        return self._decode_one(response, Collection.from_dict)

    def create_collection(self, request: CreateOrUpdateCollectionRequest) -> Collection:
        """Create a personal collection."""
        return self._create_or_update_collection(
            self.config.get_api_url(COLLECTIONS_ENDPOINT), request
        )

    def update_collection(
        self, collection_id: str, request: CreateOrUpdateCollectionRequest
    ) -> Collection:
        """Update a personal collection."""
        return self._create_or_update_collection(
            self.config.get_api_url(COLLECTIONS_ENDPOINT, collection_id), request
        )

    def _create_or_update_collection(
        self, url: str, request: CreateOrUpdateCollectionRequest
    ) -> Collection:
        response = self._request("POST", url, json=request.to_dict())
        return self._decode_one(response, Collection.from_dict)

    def upload_collection_cover_image(
        self, collection_id: str, cover_image: CoverImage
    ) -> Collection:
        """Upload a new cover image for an existing personal collection."""
        response = self._upload_cover_image(
            self.config.get_api_url(COLLECTIONS_ENDPOINT, collection_id), cover_image
        )
        return self._decode_one(response, Collection.from_dict)

    def add_feed_to_collection(
        self, collection_id: str, feed: AddFeedRequest
    ) -> List[Feed]:
        """Add a feed to a personal collection and return its feeds."""
        url = self.config.get_api_url(COLLECTIONS_ENDPOINT, collection_id, "feeds")
        response = self._request("PUT", url, json=feed.to_dict())
        return self._decode_list(response, Feed.from_dict)

    def add_multiple_feeds_to_collection(
        self, collection_id: str, feeds: List[AddFeedRequest]
    ) -> List[Feed]:
        """Add several feeds to a personal collection and return its feeds."""
        url = self.config.get_api_url(
            COLLECTIONS_ENDPOINT, collection_id, "feeds", ".mput"
        )
        response = self._request("PUT", url, json=[feed.to_dict() for feed in feeds])
        return self._decode_list(response, Feed.from_dict)

    def delete_feed_from_collection(
        self, collection_id: str, feed_id: str
    ) -> List[Feed]:
        """Remove a feed from a personal collection and return its feeds."""
        url = self.config.get_api_url(
            COLLECTIONS_ENDPOINT, collection_id, "feeds", feed_id
        )
        response = self._request("DELETE", url)
        return self._decode_list(response, Feed.from_dict)

    def delete_multiple_feeds_from_collection(
        self, collection_id: str, feeds: List[DeleteFeedRequest]
    ) -> List[Feed]:
        """Remove several feeds from a personal collection and return its feeds."""
        url = self.config.get_api_url(
            COLLECTIONS_ENDPOINT, collection_id, "feeds", ".mdelete"
        )
        response = self._request(
            "DELETE", url, json=[feed.to_dict() for feed in feeds]
        )
        return self._decode_list(response, Feed.from_dict)

    # Entries

    def get_entry(self, entry_id: str) -> List[Entry]:
        """Return the content of an entry.

        The API answers with an array, holding the entry when it exists.
        """
        response = self._request(
            "GET", self.config.get_api_url(ENTRIES_ENDPOINT, entry_id)
        )
        return self._decode_list(response, Entry.from_dict)

    def get_entries(self, entry_ids: List[str]) -> List[Entry]:
        """Return the content of several entries in one call."""
        response = self._request(
            "POST",
            self.config.get_api_url(ENTRIES_ENDPOINT, ".mget"),
            json=list(entry_ids),
        )
        return self._decode_list(response, Entry.from_dict)

    def _upload_cover_image(
        self, url: str, cover_image: CoverImage
    ) -> requests.Response:
        multipart = encode_cover_image(cover_image)
        return self._request(
            "POST",
            url,
            data=multipart.body,
            headers={"Content-Type": multipart.content_type},
        )

    def close(self):
        """Close the requests session."""
        self.session.close()
