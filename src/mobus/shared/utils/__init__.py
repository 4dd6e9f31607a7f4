from .http_response import (
    api_response,
    error_response,
    handle_exception,
    is_known_error,
    success_response,
)
from .logger import get_logger

__all__ = [
    "api_response",
    "success_response",
    "error_response",
    "handle_exception",
    "is_known_error",
    "get_logger",
]
