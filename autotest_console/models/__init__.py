"""Models package"""
from .envelope import BaseResponse, ResponseMetadata, STATUS_SUCCESS, STATUS_FAILED
from .profile import ExecutionProfile
from .session import SessionSummary, SessionDetail, SessionPage
from .log_entry import LogEntry, visible_log_entries
from .run_result import BatchRunResult, SingleRunResult, RunSessionResult, resolve_run_result
from .run_request import (
    FILE_FIELDS,
    RunFormError,
    RunMode,
    RunRequest,
    UploadedFile,
    build_run_request,
)

__all__ = [
    "BaseResponse",
    "ResponseMetadata",
    "STATUS_SUCCESS",
    "STATUS_FAILED",
    "ExecutionProfile",
    "SessionSummary",
    "SessionDetail",
    "SessionPage",
    "LogEntry",
    "visible_log_entries",
    "BatchRunResult",
    "SingleRunResult",
    "RunSessionResult",
    "resolve_run_result",
    "FILE_FIELDS",
    "RunFormError",
    "RunMode",
    "RunRequest",
    "UploadedFile",
    "build_run_request",
]
