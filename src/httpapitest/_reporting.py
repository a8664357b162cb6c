from logging import getLogger
from typing import NoReturn, Protocol, runtime_checkable

import pytest

from ._utils.constants import LOGGER_NAME

logger = getLogger(LOGGER_NAME)


@runtime_checkable
class Reporter(Protocol):
    """Failure reporting hooks of a test framework.

    `error` records a failure and lets the test continue. `fatal` records a
    failure and stops the test; implementations are expected to raise.
    `helper` marks the calling function as a test helper so that failures
    are attributed to its caller.
    """

    def helper(self) -> None: ...

    def error(self, message: str) -> None: ...

    def fatal(self, message: str) -> None: ...


class PytestReporter:
    """Reports failures through pytest.

    Non-fatal errors are collected and raised together by `check()`, fatal
    errors fail the test immediately with `pytest.fail`. The `api_reporter`
    fixture calls `check()` when the test finishes.
    """

    __test__ = False

    def __init__(self) -> None:
        self.errors: list[str] = []

    def helper(self) -> None:
        # pytest hides helper frames through __tracebackhide__ instead.
        pass

    def error(self, message: str) -> None:
        logger.debug(f"Recorded failure: {message}")
        self.errors.append(message)

    def fatal(self, message: str) -> NoReturn:
        __tracebackhide__ = True
        logger.debug(f"Fatal failure: {message}")
        pytest.fail(message, pytrace=False)

    @property
    def failed(self) -> bool:
        return bool(self.errors)

    def check(self) -> None:
        """Fail the current test if any error was recorded."""
        __tracebackhide__ = True
        if self.errors:
            errors, self.errors = self.errors, []
            pytest.fail("\n".join(errors), pytrace=False)
