from typing import NoReturn


class FatalError(Exception):
    """Raised by MockReporter.fatal to stop the code under test."""


class MockReporter:
    """Reporter that records what a test framework would be told.

    Like a real framework it keeps going after `error` and stops on `fatal`,
    here by raising FatalError.
    """

    def __init__(self) -> None:
        self.is_helper = False
        self.errors: list[str] = []
        self.fatals: list[str] = []

    def helper(self) -> None:
        self.is_helper = True

    def error(self, message: str) -> None:
        self.errors.append(message)

    def fatal(self, message: str) -> NoReturn:
        self.fatals.append(message)
        raise FatalError(message)

    @property
    def got_error(self) -> str:
        return self.errors[-1] if self.errors else ""

    @property
    def got_fatal(self) -> str:
        return self.fatals[-1] if self.fatals else ""


def assert_reported(m: MockReporter, error: str = "", fatal: str = "") -> None:
    """Check that the helper under test marked itself and reported as expected."""
    __tracebackhide__ = True
    assert m.is_helper, "not a helper function"
    assert m.got_error == error
    assert m.got_fatal == fatal
