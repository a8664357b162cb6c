"""pytest plugin exposing a reporter fixture for `request`."""

from typing import Generator

import pytest

from ._reporting import PytestReporter


@pytest.fixture
def api_reporter() -> Generator[PytestReporter, None, None]:
    """Provide a reporter that fails the test with every recorded error."""
    reporter = PytestReporter()
    yield reporter
    reporter.check()
