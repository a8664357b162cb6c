import io
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Protocol, Sequence, Union

import httpx

from ._context import Context
from ._utils._json import JSONTarget, encode_json, is_json_target
from ._utils._multipart import encode_multipart
from ._utils.constants import HEADER_CONTENT_TYPE
from .models.errors import OptionError


class Readable(Protocol):
    def read(self, size: int = -1, /) -> bytes: ...


RequestBody = Union[bytes, bytearray, str, Readable]
HeaderTypes = Union[
    httpx.Headers, Mapping[str, str], Sequence[tuple[str, str]]
]


@dataclass
class Options:
    """Configuration of a single `request` call.

    Request construction settings and response expectations accumulate here
    while options are applied, in argument order. An instance lives for one
    call only.
    """

    context: Optional[Context] = None
    request_body: Optional[RequestBody] = None
    request_headers: Optional[httpx.Headers] = None
    response_code: int = 0
    response_headers: Optional[httpx.Headers] = None
    expected_response: Optional[Readable] = None
    expect_json_response: bool = False
    expected_json_response: Any = None
    unmarshal_response: Optional[JSONTarget] = None
    response_body: Optional[bytearray] = None
    no_response_body: bool = False

    def add_request_header(self, key: str, value: str) -> None:
        self.request_headers = _with_added(self.request_headers, key, value)

    def set_request_header(self, key: str, value: str) -> None:
        headers = httpx.Headers(self.request_headers)
        headers[key] = value
        self.request_headers = headers

    def add_response_header(self, key: str, value: str) -> None:
        self.response_headers = _with_added(self.response_headers, key, value)


Option = Callable[[Options], None]


def _with_added(
    headers: Optional[httpx.Headers], key: str, value: str
) -> httpx.Headers:
    items = []
    if headers is not None:
        items = [
            (k.decode(headers.encoding), v.decode(headers.encoding))
            for k, v in headers.raw
        ]
    items.append((key, value))
    return httpx.Headers(items)


def read_body(body: RequestBody) -> bytes:
    if isinstance(body, (bytes, bytearray)):
        return bytes(body)
    if isinstance(body, str):
        return body.encode("utf-8")
    return body.read()


def apply_options(options: Sequence[Option]) -> Options:
    """Apply options in order to a fresh `Options` instance.

    Raises:
        OptionError: If any option fails; later options are not applied.
    """
    o = Options()
    for option in options:
        try:
            option(o)
        except OptionError:
            raise
        except Exception as e:
            raise OptionError(str(e)) from e
    return o


def with_context(ctx: Context) -> Option:
    """Attach a cancellation context to the request."""

    def apply(o: Options) -> None:
        o.context = ctx

    return apply


def with_request_body(body: RequestBody) -> Option:
    """Send the given bytes, text or binary stream as the request body."""

    def apply(o: Options) -> None:
        o.request_body = body

    return apply


def with_json_request_body(value: Any) -> Option:
    """Send the JSON encoding of a value as the request body."""

    def apply(o: Options) -> None:
        try:
            o.request_body = encode_json(value)
        except (TypeError, ValueError) as e:
            raise OptionError(f"json encode request body: {e}") from e

    return apply


def with_multipart_request(
    body: RequestBody,
    length: int = 0,
    filename: str = "",
    content_type: str = "",
) -> Option:
    """Send a multipart/form-data request body with a single part in it.

    The filename is used as the form field name of the part. The content
    type and length are declared in the part headers when given. The request
    Content-Type header is set to multipart/form-data with the generated
    boundary.
    """

    def apply(o: Options) -> None:
        try:
            data = read_body(body)
        except OSError as e:
            raise OptionError(f"copy file data to multipart part: {e}") from e
        payload, multipart_content_type = encode_multipart(
            data, length=length, filename=filename, content_type=content_type
        )
        o.request_body = payload
        o.set_request_header(HEADER_CONTENT_TYPE, multipart_content_type)

    return apply


def with_request_header(key: str, value: str) -> Option:
    """Add a single header to the request.

    Repeated options with the same key send every value.
    """

    def apply(o: Options) -> None:
        o.add_request_header(key, value)

    return apply


def with_request_headers(headers: HeaderTypes) -> Option:
    """Replace all request headers set so far.

    Options that add single headers must come after this one to be kept.
    """

    def apply(o: Options) -> None:
        o.request_headers = httpx.Headers(headers)

    return apply


def expect_status(code: int) -> Option:
    """Validate the response status code."""

    def apply(o: Options) -> None:
        o.response_code = int(code)

    return apply


def expect_response_header(key: str, value: str) -> Option:
    """Validate a response header value."""

    def apply(o: Options) -> None:
        o.add_response_header(key, value)

    return apply


def expected_response(reader: Union[Readable, bytes, bytearray, str]) -> Option:
    """Validate that the response body equals the data read from the reader.

    Bytes and text (UTF-8) are accepted in place of a reader.
    """

    def apply(o: Options) -> None:
        if isinstance(reader, (bytes, bytearray, str)):
            o.expected_response = io.BytesIO(read_body(reader))
        elif callable(getattr(reader, "read", None)):
            o.expected_response = reader
        else:
            raise OptionError(
                f"expected response must be readable, got {type(reader).__name__}"
            )

    return apply


def expected_json_response(value: Any) -> Option:
    """Validate that the response body is the JSON encoding of the value."""

    def apply(o: Options) -> None:
        o.expect_json_response = True
        o.expected_json_response = value

    return apply


def unmarshal_json_response(target: JSONTarget) -> Option:
    """Decode the JSON response body into the target.

    The target must be a `JSONCapture`, a dict or a list.
    """

    def apply(o: Options) -> None:
        if not is_json_target(target):
            raise OptionError(
                f"cannot unmarshal json response into {type(target).__name__}"
            )
        o.unmarshal_response = target

    return apply


def put_response_body(buffer: bytearray) -> Option:
    """Replace the contents of the buffer with the response body.

    Example:
        ```python
        body = bytearray()
        request(t, client, "GET", url, put_response_body(body))
        ```
    """

    def apply(o: Options) -> None:
        if not isinstance(buffer, bytearray):
            raise OptionError(
                f"response body target must be a bytearray, got {type(buffer).__name__}"
            )
        o.response_body = buffer

    return apply


def expect_no_response_body() -> Option:
    """Validate that the response has no body."""

    def apply(o: Options) -> None:
        o.no_response_body = True

    return apply
