import logging

import pytest

from httpapitest import PytestReporter, Reporter


class TestPytestReporter:
    def test_is_a_reporter(self) -> None:
        assert isinstance(PytestReporter(), Reporter)

    def test_errors_are_collected(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="httpapitest")
        reporter = PytestReporter()

        reporter.helper()
        reporter.error("first")
        reporter.error("second")

        assert reporter.failed
        assert reporter.errors == ["first", "second"]
        assert "Recorded failure: first" in caplog.text

    def test_check_fails_with_all_errors(self) -> None:
        reporter = PytestReporter()
        reporter.error("first")
        reporter.error("second")

        with pytest.raises(pytest.fail.Exception, match="first\nsecond"):
            reporter.check()

        assert not reporter.failed

    def test_check_passes_without_errors(self) -> None:
        PytestReporter().check()

    def test_fatal_fails_immediately(self) -> None:
        reporter = PytestReporter()

        with pytest.raises(pytest.fail.Exception, match="boom"):
            reporter.fatal("boom")
