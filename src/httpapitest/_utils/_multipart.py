import secrets
from typing import Optional

from .constants import (
    HEADER_CONTENT_DISPOSITION,
    HEADER_CONTENT_LENGTH,
    HEADER_CONTENT_TYPE,
    MULTIPART_BOUNDARY_BYTES,
    MULTIPART_FORM_DATA,
)


def random_boundary() -> str:
    return secrets.token_hex(MULTIPART_BOUNDARY_BYTES)


def _quote(value: str) -> str:
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def encode_multipart(
    body: bytes,
    length: int = 0,
    filename: str = "",
    content_type: str = "",
    boundary: Optional[str] = None,
) -> tuple[bytes, str]:
    """Encode a multipart/form-data body holding a single part.

    Args:
        body: Part payload.
        length: Declared part length, sent as Content-Length when positive.
        filename: Used as the form field name in the Content-Disposition.
        content_type: Declared part content type, omitted when empty.
        boundary: Fixed boundary, a random one is generated when None.

    Returns:
        tuple[bytes, str]: The encoded body and the value for the request
            Content-Type header.
    """
    boundary = boundary or random_boundary()

    part_headers: dict[str, str] = {}
    if filename:
        part_headers[HEADER_CONTENT_DISPOSITION] = f"form-data; name={_quote(filename)}"
    if content_type:
        part_headers[HEADER_CONTENT_TYPE] = content_type
    if length > 0:
        part_headers[HEADER_CONTENT_LENGTH] = str(length)

    lines = [f"--{boundary}"]
    lines.extend(f"{key}: {part_headers[key]}" for key in sorted(part_headers))
    head = ("\r\n".join(lines) + "\r\n\r\n").encode("utf-8")
    tail = f"\r\n--{boundary}--\r\n".encode("utf-8")

    return head + body + tail, f"{MULTIPART_FORM_DATA}; boundary={_quote(boundary)}"
