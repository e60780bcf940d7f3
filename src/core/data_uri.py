"""Data URI encoding for binary uploads."""

import base64
import binascii

DEFAULT_MEDIA_TYPE = "application/octet-stream"


def encode_data_uri(data: bytes, media_type: str | None = None) -> str:
    """Encode raw bytes as a base64 data URI.

    Args:
        data: Payload bytes. May be empty.
        media_type: Declared content type of the payload. None or an empty
            string is stored as application/octet-stream, so an empty label
            decodes back as that default rather than as "".

    Returns:
        str: ``data:<media_type>;base64,<payload>``.
    """
    media_type = media_type or DEFAULT_MEDIA_TYPE
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{media_type};base64,{encoded}"


def decode_data_uri(data_uri: str) -> tuple[bytes, str]:
    """Decode a base64 data URI produced by encode_data_uri.

    Args:
        data_uri: The data URI string.

    Returns:
        tuple[bytes, str]: The payload bytes and the media type.

    Raises:
        ValueError: If the string is not a base64 data URI.
    """
    if not data_uri.startswith("data:"):
        raise ValueError("Not a data URI")

    # Base64 never contains a comma, while a client-supplied media type may
    header, sep, payload = data_uri[len("data:"):].rpartition(",")
    if not sep or not header.endswith(";base64"):
        raise ValueError("Data URI is not base64 encoded")

    media_type = header[: -len(";base64")] or DEFAULT_MEDIA_TYPE
    try:
        data = base64.b64decode(payload, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 payload: {e}") from e

    return data, media_type
