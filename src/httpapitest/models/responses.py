from typing import Any, Optional

import httpx
from pydantic import BaseModel

from .._utils._json import encode_json
from .._utils.constants import HEADER_CONTENT_TYPE, JSON_CONTENT_TYPE

_NON_DISPLAYABLE = (dict, list, tuple, set, int, float, bool, bytes, bytearray, BaseModel)


class JSONStatusResponse(BaseModel):
    """Generic JSON body carrying a message and a status code."""

    message: str = ""
    code: int = 0

    def to_json(self) -> bytes:
        return self.model_dump_json(exclude_defaults=True).encode("utf-8")


def _is_displayable(value: Any) -> bool:
    # Objects that define their own __str__ render as a message, the way a
    # string or an exception does.
    if isinstance(value, _NON_DISPLAYABLE):
        return False
    return type(value).__str__ is not object.__str__


def status_message(response: Any) -> Optional[str]:
    """Resolve a value to a status message.

    Strings are used as they are, exceptions and displayable objects by
    their `str()` form. Any other value has no message and is sent as JSON
    unchanged.
    """
    if isinstance(response, str):
        return response
    if isinstance(response, BaseException):
        return str(response)
    if response is not None and _is_displayable(response):
        return str(response)
    return None


def respond_json(status_code: int = 0, response: Any = None) -> httpx.Response:
    """Build a JSON `httpx.Response`, mostly for use in mocked handlers.

    A status code of 0 means 200. A missing response body is replaced with
    the status reason phrase and code; message-like values (strings,
    exceptions, displayable objects) are wrapped in a `JSONStatusResponse`.

    Example:
        ```python
        def handler(request: httpx.Request) -> httpx.Response:
            if request.method != "GET":
                return respond_json(405)
            return respond_json(200, {"id": 1})
        ```
    """
    if status_code == 0:
        status_code = httpx.codes.OK

    if response is None:
        payload = JSONStatusResponse(
            message=httpx.codes.get_reason_phrase(status_code), code=status_code
        ).to_json()
    else:
        message = status_message(response)
        if message is not None:
            payload = JSONStatusResponse(message=message, code=status_code).to_json()
        else:
            payload = encode_json(response)

    return httpx.Response(
        status_code,
        headers={HEADER_CONTENT_TYPE: JSON_CONTENT_TYPE},
        content=payload + b"\n",
    )
