"""Tests for the board endpoints."""
import io

import pytest
import responses
from responses import matchers

from feedly_cloud.exceptions import CoverImageError, FeedlyAPIError
from feedly_cloud.models import UpdateBoardRequest

BOARDS_URL = "https://cloud.feedly.com/v3/boards"
BOARD_ID = "user/abc/tag/reading"


@pytest.fixture
def boards_json():
    """Sample boards response."""
    return [
        {
            "id": BOARD_ID,
            "label": "Reading",
            "created": 1609459200000,
            "customizable": True,
            "enterprise": False,
        },
        {
            "id": "enterprise/xyz/tag/shared",
            "label": "Shared",
            "created": 1609459200000,
            "customizable": False,
            "enterprise": True,
            "isPublic": True,
            "htmlUrl": "https://feedly.com/shared",
        },
    ]


@responses.activate
def test_list_boards(client, boards_json):
    """Test listing boards without enterprise boards."""
    responses.add(responses.GET, BOARDS_URL, json=boards_json[:1])

    boards = client.list_boards()

    assert [board.label for board in boards] == ["Reading"]
    assert responses.calls[0].request.url == BOARDS_URL


@responses.activate
def test_list_boards_with_enterprise(client, boards_json):
    """Test that the enterprise flag is sent as a query parameter."""
    responses.add(
        responses.GET,
        BOARDS_URL,
        json=boards_json,
        match=[matchers.query_param_matcher({"withEnterprise": "true"})],
    )

    boards = client.list_boards(with_enterprise=True)

    assert boards[1].enterprise is True
    assert boards[1].html_url == "https://feedly.com/shared"


@responses.activate
def test_update_board(client):
    """Test updating a board posts the request payload."""
    responses.add(
        responses.POST,
        BOARDS_URL,
        status=200,
        match=[
            matchers.json_params_matcher(
                {"id": BOARD_ID, "label": "Later", "showNotes": False}
            )
        ],
    )

    result = client.update_board(
        UpdateBoardRequest(id=BOARD_ID, label="Later", show_notes=False)
    )

    assert result is None


@responses.activate
def test_update_board_failure(client):
    """Test that a rejected update raises with the status text."""
    responses.add(responses.POST, BOARDS_URL, status=403)

    with pytest.raises(FeedlyAPIError) as excinfo:
        client.update_board(UpdateBoardRequest(id=BOARD_ID, is_public=True))

    assert excinfo.value.status_code == 403
    assert "Forbidden" in str(excinfo.value)


@responses.activate
def test_upload_board_cover_image(client):
    """Test that the cover image is posted as multipart form data."""
    url = f"{BOARDS_URL}/user%2Fabc%2Ftag%2Freading"
    responses.add(responses.POST, url, status=200)

    client.upload_board_cover_image(BOARD_ID, io.BytesIO(b"\x89PNG image"))

    request = responses.calls[0].request
    content_type = request.headers["Content-Type"]
    assert content_type.startswith("multipart/form-data; boundary=")
    boundary = content_type.split("boundary=", 1)[1]
    assert request.body.startswith(f"--{boundary}\r\n".encode("latin-1"))
    assert b'name="cover"; filename="cover image"' in request.body
    assert b"\x89PNG image" in request.body
    assert request.headers["Authorization"] == "Bearer test-token"


def test_upload_board_cover_image_read_failure(client):
    """Test that stream failures are raised before any request is sent."""

    class BrokenStream(io.RawIOBase):
        def readable(self):
            return True

        def read(self, size=-1):
            raise OSError("read failed")

    with responses.RequestsMock() as mock:
        with pytest.raises(CoverImageError):
            client.upload_board_cover_image(BOARD_ID, BrokenStream())

        assert len(mock.calls) == 0
