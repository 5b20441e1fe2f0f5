"""Photo intake: local image file -> inline data URI, capped in size."""

import base64
import binascii
import mimetypes
from pathlib import Path

from slat_inventory.config import MAX_PHOTO_BYTES
from slat_inventory.utils.logger import get_logger

logger = get_logger("slat_inventory.photos")

_DATA_URI_PREFIX = "data:"


def encode_photo(path: str | Path, max_bytes: int = MAX_PHOTO_BYTES) -> str:
    """Read an image file and return it as a base64 data URI.

    Raises ValueError when the file is larger than max_bytes or is not an image.
    """
    path = Path(path)
    size = path.stat().st_size
    if size > max_bytes:
        logger.warning("photos.too_large", path=str(path), size=size, max_bytes=max_bytes)
        raise ValueError(
            f"Photo {path.name!r} is {size} bytes; the limit is {max_bytes} bytes"
        )
    mime_type, _ = mimetypes.guess_type(path.name)
    if not mime_type or not mime_type.startswith("image/"):
        raise ValueError(f"Not an image file: {path.name!r}")
    payload = base64.b64encode(path.read_bytes()).decode("ascii")
    logger.debug("photos.encoded", path=str(path), size=size, mime_type=mime_type)
    return f"data:{mime_type};base64,{payload}"


def data_uri_size(uri: str) -> int | None:
    """Decoded byte size of a base64 data URI; None for anything else (external URLs)."""
    if not uri.startswith(_DATA_URI_PREFIX):
        return None
    header, sep, payload = uri.partition(",")
    if not sep or not header.endswith(";base64"):
        return None
    try:
        return len(base64.b64decode(payload, validate=True))
    except (binascii.Error, ValueError):
        return None


def check_photo_url(uri: str, max_bytes: int = MAX_PHOTO_BYTES) -> str:
    """Reject inline photos over max_bytes; external references pass through."""
    size = data_uri_size(uri)
    if size is not None and size > max_bytes:
        raise ValueError(f"Photo is {size} bytes; the limit is {max_bytes} bytes")
    return uri
