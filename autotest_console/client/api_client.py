"""
API Client - httpx-based access to the test-execution backend
"""
import logging
from typing import Any, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ..config import settings
from ..models import (
    BaseResponse,
    ExecutionProfile,
    LogEntry,
    RunRequest,
    SessionDetail,
    SessionPage,
    SessionSummary,
    visible_log_entries,
)
from .errors import ApiHttpError, ApiTransportError, SessionNotFoundError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ApiClient:
    """
    Stateless request/response mapping over the backend's JSON REST API.

    Every endpoint answers with the {status, message, data, metadata}
    envelope. Non-2xx answers raise ApiHttpError; missing transport raises
    ApiTransportError; malformed data is tolerated and yields empty results.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        run_timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Backend root; may be empty only with an http_client that has its own base_url
            timeout: Timeout in seconds for read-only calls
            run_timeout: Timeout in seconds for run submission, None waits indefinitely
            http_client: Pre-built client to share; not closed by aclose()
            transport: Transport for an owned client (tests use httpx.MockTransport)

        Raises:
            ValueError: base_url is empty and no http_client was given
        """
        if base_url is None:
            base_url = settings.API_BASE_URL
        self.base_url = base_url.rstrip("/")
        if not self.base_url and http_client is None:
            raise ValueError("base_url is required unless an http_client with its own base_url is given")
        self.run_timeout = run_timeout if run_timeout is not None else settings.RUN_REQUEST_TIMEOUT

        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=timeout if timeout is not None else settings.REQUEST_TIMEOUT,
            transport=transport,
        )

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self):
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._http.aclose()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}" if self.base_url else path

    async def _send(self, method: str, path: str, **kwargs) -> BaseResponse:
        """
        Issue a request and return its normalized envelope.

        Raises:
            ApiTransportError: No response was obtained
            ApiHttpError: The response status is not 2xx
        """
        url = self._url(path)
        logger.debug(f"{method} {url}")
        try:
            response = await self._http.request(method, url, **kwargs)
        except httpx.RequestError as e:
            logger.warning(f"{method} {url} failed: {e!r}")
            raise ApiTransportError(str(e) or "Network error") from e

        envelope = parse_envelope(response)
        if not response.is_success:
            message = envelope.message if envelope.message is not None else f"Failed ({response.status_code})"
            logger.warning(f"{method} {url} -> HTTP {response.status_code}: {message}")
            raise ApiHttpError(message, status_code=response.status_code)
        return envelope

    async def list_profiles(self) -> List[ExecutionProfile]:
        """Fetch all execution profiles."""
        envelope = await self._send("GET", "/v1/profiles")
        return _validate_list(envelope.data, ExecutionProfile)

    async def list_sessions(self, page: int = 0, size: Optional[int] = None) -> SessionPage:
        """
        Fetch one page of sessions, newest first.

        Args:
            page: 0-based page index
            size: Page size, defaults to SESSIONS_PAGE_SIZE

        Returns:
            The page items and the server-side total
        """
        params = {
            "page": page,
            "size": size or settings.SESSIONS_PAGE_SIZE,
            "sortBy": "createdDate",
            "sortDir": "desc",
        }
        envelope = await self._send("GET", "/v1/sessions", params=params)
        return SessionPage(
            items=_validate_list(envelope.data, SessionSummary),
            total=envelope.total,
        )

    async def get_session(self, session_id: str) -> SessionDetail:
        """
        Fetch a single session.

        Raises:
            SessionNotFoundError: The envelope carried no session
        """
        envelope = await self._send("GET", f"/v1/sessions/{session_id}")
        if not envelope.data:
            raise SessionNotFoundError("Session not found")
        try:
            return SessionDetail.model_validate(envelope.data)
        except ValidationError as e:
            logger.warning(f"Unreadable session {session_id}: {e}")
            raise SessionNotFoundError("Session not found") from e

    async def list_logs(self, session_id: str) -> List[LogEntry]:
        """
        Fetch the step logs of a session in execution order.

        A single request bounded by LOG_FETCH_LIMIT; sentinel rows are removed.
        """
        params = {
            "sessionId": session_id,
            "page": 0,
            "size": settings.LOG_FETCH_LIMIT,
            "sortBy": "createdDate",
            "sortDir": "asc",
        }
        envelope = await self._send("GET", "/v1/logs", params=params)
        return visible_log_entries(_validate_list(envelope.data, LogEntry))

    async def submit_run(self, request: RunRequest) -> BaseResponse:
        """
        Post a run as multipart form data.

        The envelope is returned as-is, including non-SUCCESS statuses;
        only transport failures and non-2xx answers raise.
        """
        data, files = request.to_multipart()
        logger.info(
            f"Submitting run: profile={request.profile_id} sheet={request.sheet_name} "
            f"rows={request.start_row}-{request.end_row} login_once={request.login_one_time}"
        )
        return await self._send(
            "POST",
            "/v1/sessions/run",
            data=data,
            files=files,
            timeout=self.run_timeout,
        )


def parse_envelope(response: httpx.Response) -> BaseResponse:
    """
    Normalize a response body into an envelope.

    Bodies that are not a JSON object become a FAILED envelope whose message
    is the body text, or "HTTP <code>" when the body is empty.
    """
    content_type = response.headers.get("content-type", "")
    if "application/json" in content_type:
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict):
            try:
                return BaseResponse.model_validate(payload)
            except ValidationError as e:
                logger.warning(f"Malformed response envelope: {e}")
    return BaseResponse.failed(response.text or f"HTTP {response.status_code}")


def _validate_list(data: Any, model: Type[ModelT]) -> List[ModelT]:
    """Validate a list payload item by item, skipping unreadable items."""
    if not isinstance(data, list):
        return []
    items = []
    for raw in data:
        try:
            items.append(model.model_validate(raw))
        except ValidationError as e:
            logger.warning(f"Skipping malformed {model.__name__}: {e}")
    return items
