from typing import Generator

import httpx
import pytest

from httpapitest.plugin import api_reporter  # noqa: F401
from tests.utils.mock_reporter import MockReporter

ENDPOINT = "https://test_url"


@pytest.fixture
def endpoint() -> str:
    return ENDPOINT


@pytest.fixture
def reporter() -> MockReporter:
    """Provide a reporter that records errors instead of failing the test."""
    return MockReporter()


@pytest.fixture
def client() -> Generator[httpx.Client, None, None]:
    with httpx.Client() as c:
        yield c


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
