"""
Session detail page - one session and its step logs
"""
import asyncio
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, Response

from ..client import ApiClient, ApiError, ApiHttpError, SessionNotFoundError
from ..dependencies import get_api_client
from ..models import LogEntry, SessionDetail, visible_log_entries
from .rendering import templates

logger = logging.getLogger(__name__)

router = APIRouter()

DISCONNECT_POLL_INTERVAL = 0.5  # seconds


class SessionDetailLoader:
    """
    Loads a session and its logs together.
    
    After cancel() the loader ignores results that arrive late; the
    requests themselves keep running.
    """
    
    def __init__(self, client: ApiClient):
        self.client = client
        self.session: Optional[SessionDetail] = None
        self.logs: List[LogEntry] = []
        self.failure: Optional[ApiError] = None
        self.loading = True
        self._stale = False
        
    @property
    def stale(self) -> bool:
        return self._stale
    
    @property
    def error(self) -> Optional[str]:
        return self.failure.message if self.failure else None
        
    def cancel(self):
        self._stale = True
        
    async def load(self, session_id: str):
        """
        Fetch session and logs concurrently; state is written once both settle.
        
        Args:
            session_id: Session to load
        """
        try:
            session, logs = await asyncio.gather(
                self.client.get_session(session_id),
                self.client.list_logs(session_id),
            )
        except ApiError as e:
            if not self._stale:
                self.failure = e
            logger.warning(f"Loading session {session_id} failed: {e.message}")
        else:
            if not self._stale:
                self.session = session
                self.logs = visible_log_entries(logs)
        finally:
            if not self._stale:
                self.loading = False


async def cancel_on_disconnect(request: Request, loader: SessionDetailLoader, interval: float = DISCONNECT_POLL_INTERVAL):
    """
    Mark the loader stale once the browser goes away while it is loading.
    
    Args:
        request: Incoming page request
        loader: Loader serving that request
        interval: Seconds between disconnect checks
    """
    while loader.loading and not loader.stale:
        if await request.is_disconnected():
            logger.info("Client left before the session finished loading")
            loader.cancel()
            return
        await asyncio.sleep(interval)


def _status_code(failure: Optional[ApiError]) -> int:
    if failure is None:
        return 200
    if isinstance(failure, SessionNotFoundError):
        return 404
    if isinstance(failure, ApiHttpError) and failure.status_code == 404:
        return 404
    return 502


@router.get("/sessions/{session_id}", response_class=HTMLResponse)
async def session_detail_page(
    request: Request,
    session_id: str,
    client: ApiClient = Depends(get_api_client),
):
    """Render a session with its executed steps."""
    loader = SessionDetailLoader(client)
    watcher = asyncio.create_task(cancel_on_disconnect(request, loader))
    try:
        await loader.load(session_id)
    finally:
        watcher.cancel()
    if loader.stale:
        # nobody is left to render for
        return Response(status_code=204)
    
    context = {
        "session": loader.session,
        "logs": loader.logs,
        "error": loader.error,
    }
    return templates.TemplateResponse(
        request, "session_detail.html", context, status_code=_status_code(loader.failure)
    )
