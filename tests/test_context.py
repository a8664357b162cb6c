import time

from httpapitest import Context, ContextCancelledError, DeadlineExceededError


class TestContext:
    def test_new_context_is_live(self) -> None:
        ctx = Context()

        assert not ctx.cancelled
        assert ctx.deadline is None
        assert ctx.remaining() is None
        assert ctx.err() is None

    def test_cancel(self) -> None:
        ctx = Context()
        ctx.cancel()

        assert ctx.cancelled
        err = ctx.err()
        assert isinstance(err, ContextCancelledError)
        assert str(err) == "context canceled"

    def test_deadline_exceeded(self) -> None:
        ctx = Context.with_timeout(0)

        assert ctx.expired()
        assert ctx.remaining() == 0.0
        err = ctx.err()
        assert isinstance(err, DeadlineExceededError)
        assert str(err) == "context deadline exceeded"

    def test_remaining(self) -> None:
        ctx = Context(timeout=60)

        remaining = ctx.remaining()
        assert remaining is not None
        assert 0 < remaining <= 60
        assert ctx.deadline is not None
        assert ctx.deadline > time.monotonic()
        assert ctx.err() is None

    def test_cancel_wins_over_deadline(self) -> None:
        ctx = Context.with_timeout(0)
        ctx.cancel()

        assert isinstance(ctx.err(), ContextCancelledError)
