"""
API Client Errors
"""
from typing import Optional


class ApiError(Exception):
    """Base class for every failure surfaced by the API client."""
    
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ApiTransportError(ApiError):
    """No HTTP response was obtained (DNS, refused connection, timeout...)."""


class ApiHttpError(ApiError):
    """The backend answered with a non-2xx status."""
    
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ApiApplicationError(ApiError):
    """2xx response whose envelope lacks what the call required."""


class SessionNotFoundError(ApiApplicationError):
    """The session lookup succeeded but carried no session."""
