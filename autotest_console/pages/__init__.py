"""Pages package"""
from .local_files import router as local_files_router, to_viewable_url
from .run_page import router as run_router
from .sessions_page import Pagination, router as sessions_router
from .session_detail_page import SessionDetailLoader, router as session_detail_router

__all__ = [
    "local_files_router",
    "to_viewable_url",
    "run_router",
    "Pagination",
    "sessions_router",
    "SessionDetailLoader",
    "session_detail_router",
]
