"""REST client package"""
from .api_client import ApiClient
from .errors import (
    ApiError,
    ApiTransportError,
    ApiHttpError,
    ApiApplicationError,
    SessionNotFoundError,
)

__all__ = [
    "ApiClient",
    "ApiError",
    "ApiTransportError",
    "ApiHttpError",
    "ApiApplicationError",
    "SessionNotFoundError",
]
