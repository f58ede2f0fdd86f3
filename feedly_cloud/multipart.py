"""Multipart/form-data encoding for board and collection cover images."""
import logging
from dataclasses import dataclass
from typing import BinaryIO, Union

from urllib3.fields import RequestField
from urllib3.filepost import choose_boundary, encode_multipart_formdata

from feedly_cloud.exceptions import CoverImageError

logger = logging.getLogger(__name__)

COVER_FIELD_NAME = "cover"
COVER_FILE_NAME = "cover image"
COVER_CONTENT_TYPE = "application/octet-stream"
READ_CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class MultipartBody:
    """Encoded multipart body and the content type that describes it."""

    body: bytes
    content_type: str

    @property
    def boundary(self) -> str:
        """Boundary token declared in the content type."""
        return self.content_type.split("boundary=", 1)[1]


def _read_all(stream: Union[BinaryIO, bytes, bytearray]) -> bytes:
    if isinstance(stream, (bytes, bytearray)):
        return bytes(stream)

    chunks = []
    for chunk in iter(lambda: stream.read(READ_CHUNK_SIZE), b""):
        if not isinstance(chunk, (bytes, bytearray)):
            raise CoverImageError(
                f"Cover image stream must yield bytes, got {type(chunk).__name__}"
            )
        chunks.append(bytes(chunk))
    return b"".join(chunks)


def encode_cover_image(stream: Union[BinaryIO, bytes, bytearray]) -> MultipartBody:
    """Wrap an image stream in a single-part multipart/form-data body.

    The stream is read to exhaustion and copied verbatim into a part named
    ``cover`` with the filename ``cover image``. A new boundary is chosen
    for every call and never occurs inside the image bytes.

    Args:
        stream: Readable binary stream (or raw bytes) holding the image

    Returns:
        MultipartBody with the encoded bytes and matching content type

    Raises:
        CoverImageError: If reading the stream or building the body fails
    """
    try:
        data = _read_all(stream)
    except CoverImageError:
        raise
    # closed files raise ValueError
    except (OSError, ValueError) as e:
        logger.error(f"Failed to read cover image stream: {str(e)}")
        raise CoverImageError(f"Failed to read cover image: {str(e)}") from e

    boundary = choose_boundary()
    while boundary.encode("latin-1") in data:
        boundary = choose_boundary()

    field = RequestField(
        name=COVER_FIELD_NAME, data=data, filename=COVER_FILE_NAME
    )
    field.make_multipart(content_type=COVER_CONTENT_TYPE)

    try:
        body, content_type = encode_multipart_formdata([field], boundary=boundary)
    except (OSError, ValueError) as e:
        raise CoverImageError(f"Failed to encode cover image: {str(e)}") from e

    logger.debug(f"Encoded cover image of {len(data)} bytes")
    return MultipartBody(body=body, content_type=content_type)
