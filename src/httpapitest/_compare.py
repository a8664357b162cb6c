from typing import AsyncIterator, Iterator

import httpx

from ._options import Readable
from ._reporting import Reporter
from ._utils.constants import COMPARE_CHUNK_SIZE

_READ_ERRORS = (httpx.HTTPError, OSError, ValueError)


def _chunks_differ(
    t: Reporter, cursor: int, got: bytes, want: bytes, chunk_size: int
) -> bool:
    if got == want:
        return False
    t.error(
        f"data not equal at position {cursor}: "
        f"got {got[:chunk_size]!r}, want {want[:chunk_size]!r}"
    )
    return True


def reader_content_equal(
    t: Reporter,
    actual: Iterator[bytes],
    expected: Readable,
    chunk_size: int = COMPARE_CHUNK_SIZE,
) -> bool:
    """Compare a chunked body against a reader without buffering either.

    Chunks are read pairwise at the same offset. The first difference is
    reported as a non-fatal error and ends the comparison. Reading stops
    once the expected reader is exhausted; a body that ends early shows up
    as an empty chunk that differs from the expected one.

    Returns:
        bool: True if no difference was found.
    """
    __tracebackhide__ = True
    t.helper()

    cursor = 0
    while True:
        try:
            got = next(actual, b"")
        except _READ_ERRORS as e:
            t.fatal(f"read input data at position {cursor}: {e}")
            return False
        try:
            want = expected.read(chunk_size)
        except _READ_ERRORS as e:
            t.fatal(f"read validation data at position {cursor}: {e}")
            return False

        if _chunks_differ(t, cursor, got, want, chunk_size):
            return False
        if not want:
            return True

        cursor += len(got)


async def reader_content_equal_async(
    t: Reporter,
    actual: AsyncIterator[bytes],
    expected: Readable,
    chunk_size: int = COMPARE_CHUNK_SIZE,
) -> bool:
    """Asynchronous version of `reader_content_equal` for async bodies."""
    __tracebackhide__ = True
    t.helper()

    cursor = 0
    while True:
        try:
            got = await anext(actual, b"")
        except _READ_ERRORS as e:
            t.fatal(f"read input data at position {cursor}: {e}")
            return False
        try:
            want = expected.read(chunk_size)
        except _READ_ERRORS as e:
            t.fatal(f"read validation data at position {cursor}: {e}")
            return False

        if _chunks_differ(t, cursor, got, want, chunk_size):
            return False
        if not want:
            return True

        cursor += len(got)
