from .errors import (
    ContextCancelledError,
    ContextError,
    DeadlineExceededError,
    HttpApiTestError,
    OptionError,
)
from .responses import JSONStatusResponse, respond_json

__all__ = [
    "ContextCancelledError",
    "ContextError",
    "DeadlineExceededError",
    "HttpApiTestError",
    "JSONStatusResponse",
    "OptionError",
    "respond_json",
]
