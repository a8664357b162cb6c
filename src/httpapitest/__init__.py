"""Helpers for testing HTTP responses.

A test calls `request` with a client, a method, a URL and options that
configure the request and declare what the response must look like:

```python
from httpapitest import expect_status, request, with_request_header


def test_index(api_reporter, client):
    request(
        api_reporter,
        client,
        "GET",
        "/",
        with_request_header("Accept", "application/json"),
        expect_status(200),
    )
```

Mismatches are recorded through the reporter and the test continues;
failures that make further checks meaningless abort the test.
"""

from ._compare import reader_content_equal, reader_content_equal_async
from ._context import Context
from ._options import (
    Option,
    Options,
    expect_no_response_body,
    expect_response_header,
    expect_status,
    expected_json_response,
    expected_response,
    put_response_body,
    unmarshal_json_response,
    with_context,
    with_json_request_body,
    with_multipart_request,
    with_request_body,
    with_request_header,
    with_request_headers,
)
from ._reporting import PytestReporter, Reporter
from ._request import request, request_async
from ._utils._json import JSONCapture
from .models import (
    ContextCancelledError,
    ContextError,
    DeadlineExceededError,
    HttpApiTestError,
    JSONStatusResponse,
    OptionError,
    respond_json,
)

__all__ = [
    "Context",
    "ContextCancelledError",
    "ContextError",
    "DeadlineExceededError",
    "HttpApiTestError",
    "JSONCapture",
    "JSONStatusResponse",
    "Option",
    "OptionError",
    "Options",
    "PytestReporter",
    "Reporter",
    "expect_no_response_body",
    "expect_response_header",
    "expect_status",
    "expected_json_response",
    "expected_response",
    "put_response_body",
    "reader_content_equal",
    "reader_content_equal_async",
    "request",
    "request_async",
    "respond_json",
    "unmarshal_json_response",
    "with_context",
    "with_json_request_body",
    "with_multipart_request",
    "with_request_body",
    "with_request_header",
    "with_request_headers",
]
