from .exceptions import (
    BaseApplicationError,
    TransportError,
    NetworkError,
    HTTPStatusError,
    ResponseDecodeError,
    BackendError,
)
from .http import Transport, HttpTransport, get_http, set_http, reset_http

__all__ = [
    "BaseApplicationError",
    "TransportError",
    "NetworkError",
    "HTTPStatusError",
    "ResponseDecodeError",
    "BackendError",
    "Transport",
    "HttpTransport",
    "get_http",
    "set_http",
    "reset_http",
]
