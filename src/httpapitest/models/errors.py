class HttpApiTestError(Exception):
    """Base class for errors raised by httpapitest."""


class OptionError(HttpApiTestError):
    """Raised when an option cannot be applied to the request configuration.

    The request executor reports this error fatally before any request is
    built or sent.
    """


class ContextError(HttpApiTestError):
    """Raised when a request context is no longer usable."""


class ContextCancelledError(ContextError):
    def __init__(self, message="context canceled"):
        self.message = message
        super().__init__(self.message)


class DeadlineExceededError(ContextError):
    def __init__(self, message="context deadline exceeded"):
        self.message = message
        super().__init__(self.message)
