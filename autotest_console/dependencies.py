"""
FastAPI dependencies for the objects owned by the application
"""
from fastapi import Request

from .client import ApiClient
from .runner import RunCoordinator


def get_api_client(request: Request) -> ApiClient:
    """API client created at startup."""
    return request.app.state.api_client


def get_coordinator(request: Request) -> RunCoordinator:
    """The process-wide run coordinator."""
    return request.app.state.coordinator
