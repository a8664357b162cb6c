"""Single request round trip validated against declared expectations.

```python
def test_get_item(api_reporter, client):
    request(
        api_reporter,
        client,
        "GET",
        "https://api.example.com/items/1",
        with_request_header("Accept", "application/json"),
        expect_status(200),
        expected_json_response({"id": 1}),
    )
```
"""

from logging import getLogger
from typing import Optional, Union

import httpx

from ._compare import reader_content_equal, reader_content_equal_async
from ._options import Option, Options, apply_options, read_body
from ._reporting import Reporter
from ._utils._json import decode_json_into, encode_json
from ._utils.constants import COMPARE_CHUNK_SIZE, LOGGER_NAME
from .models.errors import ContextCancelledError, ContextError, OptionError

logger = getLogger(LOGGER_NAME)


def request(
    t: Reporter,
    client: httpx.Client,
    method: str,
    url: Union[httpx.URL, str],
    *options: Option,
) -> None:
    """Make one HTTP request with the client and validate the response.

    Options are applied in order before anything is sent. Option, request
    construction, transport and body read failures are reported with
    `t.fatal`; status, header and body mismatches with `t.error`, so every
    configured check still runs.

    Args:
        t: Reporter of the running test.
        client: Client used to send the request.
        method: HTTP method.
        url: Request URL, relative URLs are joined with the client base URL.
        *options: Request settings and response expectations.
    """
    __tracebackhide__ = True
    t.helper()

    prepared = _prepare(t, client, method, url, options)
    if prepared is None:
        return
    o, req = prepared

    try:
        _raise_for_context(o)
        response = client.send(req, stream=True)
    except (ContextError, httpx.HTTPError) as e:
        t.fatal(_transport_message(method, url, o, e))
        return

    try:
        if not _check_head(t, method, url, o, response):
            return

        if o.expected_response is not None:
            reader_content_equal(
                t, response.iter_bytes(COMPARE_CHUNK_SIZE), o.expected_response
            )
            return

        if not _needs_body(o):
            return

        try:
            content = response.read()
        except httpx.HTTPError as e:
            t.fatal(f"read response body: {e}")
            return

        _check_content(t, o, content)
    finally:
        response.close()


async def request_async(
    t: Reporter,
    client: httpx.AsyncClient,
    method: str,
    url: Union[httpx.URL, str],
    *options: Option,
) -> None:
    """Asynchronous version of `request` for `httpx.AsyncClient`."""
    __tracebackhide__ = True
    t.helper()

    prepared = _prepare(t, client, method, url, options)
    if prepared is None:
        return
    o, req = prepared

    try:
        _raise_for_context(o)
        response = await client.send(req, stream=True)
    except (ContextError, httpx.HTTPError) as e:
        t.fatal(_transport_message(method, url, o, e))
        return

    try:
        if not _check_head(t, method, url, o, response):
            return

        if o.expected_response is not None:
            await reader_content_equal_async(
                t, response.aiter_bytes(COMPARE_CHUNK_SIZE), o.expected_response
            )
            return

        if not _needs_body(o):
            return

        try:
            content = await response.aread()
        except httpx.HTTPError as e:
            t.fatal(f"read response body: {e}")
            return

        _check_content(t, o, content)
    finally:
        await response.aclose()


def _prepare(
    t: Reporter,
    client: Union[httpx.Client, httpx.AsyncClient],
    method: str,
    url: Union[httpx.URL, str],
    options: tuple[Option, ...],
) -> Optional[tuple[Options, httpx.Request]]:
    __tracebackhide__ = True
    try:
        o = apply_options(options)
    except OptionError as e:
        t.fatal(str(e))
        return None

    timeout = o.context.remaining() if o.context is not None else None
    try:
        content = read_body(o.request_body) if o.request_body is not None else None
        req = client.build_request(
            method,
            url,
            content=content,
            headers=o.request_headers,
            timeout=timeout if timeout is not None else httpx.USE_CLIENT_DEFAULT,
        )
    except (httpx.HTTPError, httpx.InvalidURL, OSError, TypeError, ValueError) as e:
        t.fatal(f"build request: {e}")
        return None

    logger.debug(f"Request: {req.method} {req.url}")
    logger.debug(f"HEADERS: {req.headers}")
    return o, req


def _raise_for_context(o: Options) -> None:
    if o.context is not None:
        err = o.context.err()
        if err is not None:
            raise err


def _transport_message(
    method: str, url: Union[httpx.URL, str], o: Options, error: Exception
) -> str:
    # A timeout past the context deadline is the context expiring.
    if isinstance(error, httpx.TimeoutException) and o.context is not None:
        context_error = o.context.err()
        if context_error is not None:
            error = context_error
    return f"{method} {str(url)!r}: {error}"


def _check_head(
    t: Reporter,
    method: str,
    url: Union[httpx.URL, str],
    o: Options,
    response: httpx.Response,
) -> bool:
    """Validate status code and headers.

    Returns False if a fatal error was reported.
    """
    __tracebackhide__ = True
    logger.debug(f"Response: {response.status_code} {response.reason_phrase}")

    # A deadline passing after the response arrived does not void it.
    if o.context is not None and o.context.cancelled:
        t.fatal(f"{method} {str(url)!r}: {ContextCancelledError()}")
        return False

    if o.response_code != 0 and response.status_code != o.response_code:
        t.error(
            f"got response status {response.status_code} {response.reason_phrase}, "
            f"want {o.response_code} {httpx.codes.get_reason_phrase(o.response_code)}"
        )

    if o.response_headers is not None:
        seen: set[str] = set()
        encoding = o.response_headers.encoding
        for raw_key, raw_value in o.response_headers.raw:
            key = raw_key.decode(encoding)
            if key.lower() in seen:
                continue
            seen.add(key.lower())
            want = raw_value.decode(encoding)
            values = response.headers.get_list(key)
            got = values[0] if values else ""
            if got != want:
                t.error(f"got header {key!r} value {got!r}, want {want!r}")

    return True


def _needs_body(o: Options) -> bool:
    return (
        o.expect_json_response
        or o.unmarshal_response is not None
        or o.response_body is not None
        or o.no_response_body
    )


def _check_content(t: Reporter, o: Options, content: bytes) -> None:
    """Run the first configured body check against the read body."""
    __tracebackhide__ = True
    if o.expect_json_response:
        got = content.strip()
        try:
            want = encode_json(o.expected_json_response)
        except (TypeError, ValueError) as e:
            t.fatal(f"json encode expected response: {e}")
            return
        if got != want:
            t.error(
                f"got json response {got.decode('utf-8', 'replace')!r}, "
                f"want {want.decode('utf-8', 'replace')!r}"
            )
        return

    if o.unmarshal_response is not None:
        try:
            decode_json_into(content, o.unmarshal_response)
        except (TypeError, ValueError) as e:
            t.fatal(f"json decode response body: {e}")
        return

    if o.response_body is not None:
        o.response_body[:] = content
        return

    if o.no_response_body and content:
        t.error(f"got response body {content.decode('utf-8', 'replace')!r}, want none")
