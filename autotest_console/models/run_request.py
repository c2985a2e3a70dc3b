"""
Run Request Data Model

A run request lives only long enough to be validated and posted as a
multipart body.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


class RunMode(str, Enum):
    """How the backend walks the data sheet."""
    
    SEQUENTIAL = "sequential"
    LIMITED = "limited"
    LIMITED_LOGIN = "limited-login"
    
    @property
    def label(self) -> str:
        return RUN_MODE_LABELS[self]
    
    @property
    def uses_row_bounds(self) -> bool:
        return self in (RunMode.LIMITED, RunMode.LIMITED_LOGIN)
    
    @property
    def login_one_time(self) -> bool:
        return self is RunMode.LIMITED_LOGIN


RUN_MODE_LABELS = {
    RunMode.SEQUENTIAL: "Run Sequential Test Cases",
    RunMode.LIMITED: "Run Sequential Test Cases (Limited Rows)",
    RunMode.LIMITED_LOGIN: "Run Sequential Test Cases (Limited Rows) – Login One Time",
}

# multipart field name -> form label
FILE_FIELDS = {
    "dictionaryFile": "Upload Dictionary File",
    "actionFile": "Upload Action File",
    "dataTestFile": "Upload Data File",
}


class RunFormError(ValueError):
    """The run form is incomplete or inconsistent."""


@dataclass(frozen=True)
class UploadedFile:
    """A spreadsheet chosen by the operator."""
    
    filename: str
    content: bytes
    content_type: str = "application/octet-stream"


@dataclass(frozen=True)
class RunRequest:
    """Validated payload for ``POST /v1/sessions/run``."""
    
    profile_id: str
    dictionary_file: UploadedFile
    action_file: UploadedFile
    data_test_file: UploadedFile
    sheet_name: str
    start_row: Optional[str] = None
    end_row: Optional[str] = None
    login_one_time: bool = False
    
    def to_multipart(self) -> Tuple[Dict[str, str], Dict[str, Tuple[str, bytes, str]]]:
        """
        Split the request into httpx ``data`` and ``files`` arguments.
        
        Returns:
            Tuple of (form fields, file parts)
        """
        data = {
            "profileId": self.profile_id,
            "sheetName": self.sheet_name,
        }
        if self.start_row:
            data["startRow"] = self.start_row
        if self.end_row:
            data["endRow"] = self.end_row
        if self.login_one_time:
            data["loginOneTime"] = "true"
        
        files = {}
        for field, upload in (
            ("dictionaryFile", self.dictionary_file),
            ("actionFile", self.action_file),
            ("dataTestFile", self.data_test_file),
        ):
            files[field] = (upload.filename, upload.content, upload.content_type)
        return data, files


def _trimmed_or_none(raw: Optional[str]) -> Optional[str]:
    text = (raw or "").strip()
    return text or None


def build_run_request(
    profile_id: Optional[str],
    files: Dict[str, Optional[UploadedFile]],
    sheet_name: Optional[str],
    mode: RunMode = RunMode.SEQUENTIAL,
    start_row: Optional[str] = None,
    end_row: Optional[str] = None,
) -> RunRequest:
    """
    Validate raw form input and build a run request.
    
    Row bounds are only honoured in the limited modes and are forwarded as
    typed (trimmed); the backend interprets them. The login-once flag is only
    set in limited-login mode.
    
    Args:
        profile_id: Selected execution profile
        files: Uploads keyed by multipart field name (see FILE_FIELDS)
        sheet_name: Sheet to execute, surrounding whitespace ignored
        mode: Run mode chosen on the form
        start_row: Optional first data row, as typed
        end_row: Optional last data row, as typed
        
    Returns:
        A request ready to submit
        
    Raises:
        RunFormError: When a required field is missing
    """
    if not profile_id:
        raise RunFormError("Select a profile")
    
    missing = [label for field, label in FILE_FIELDS.items() if not files.get(field)]
    if missing:
        raise RunFormError("Missing file: " + ", ".join(missing))
    
    trimmed_sheet = (sheet_name or "").strip()
    if not trimmed_sheet:
        raise RunFormError("Sheet name is required")
    
    first_row = last_row = None
    if mode.uses_row_bounds:
        first_row = _trimmed_or_none(start_row)
        last_row = _trimmed_or_none(end_row)
    
    return RunRequest(
        profile_id=profile_id,
        dictionary_file=files["dictionaryFile"],
        action_file=files["actionFile"],
        data_test_file=files["dataTestFile"],
        sheet_name=trimmed_sheet,
        start_row=first_row,
        end_row=last_row,
        login_one_time=mode.login_one_time,
    )
