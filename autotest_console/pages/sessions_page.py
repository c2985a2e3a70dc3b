"""
Sessions page - paginated run history
"""
import math
from dataclasses import dataclass

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from ..client import ApiClient, ApiError
from ..config import settings
from ..dependencies import get_api_client
from .rendering import templates

router = APIRouter()


@dataclass(frozen=True)
class Pagination:
    """Index arithmetic over a server-side page cursor."""
    
    page: int
    size: int
    total: int
    
    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(self.total / self.size))
    
    @property
    def has_prev(self) -> bool:
        return self.page > 0
    
    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.total_pages
    
    @property
    def prev_page(self) -> int:
        return self.page - 1
    
    @property
    def next_page(self) -> int:
        return self.page + 1


@router.get("/sessions", response_class=HTMLResponse)
async def sessions_page(
    request: Request,
    page: int = 0,
    client: ApiClient = Depends(get_api_client),
):
    """
    Render one page of the session history, newest first.
    
    Every page change is a fresh backend request.
    """
    page = max(page, 0)
    size = settings.SESSIONS_PAGE_SIZE
    sessions = []
    pagination = Pagination(page=page, size=size, total=0)
    error = None
    status_code = 200
    
    try:
        result = await client.list_sessions(page, size)
        sessions = result.items
        pagination = Pagination(page=page, size=size, total=result.total)
    except ApiError as e:
        error = e.message
        status_code = 502
    
    context = {
        "sessions": sessions,
        "pagination": pagination,
        "error": error,
    }
    return templates.TemplateResponse(request, "sessions.html", context, status_code=status_code)
