"""
Run page - submission form and log console
"""
import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse

from ..client import ApiClient, ApiError
from ..dependencies import get_api_client, get_coordinator
from ..models import (
    FILE_FIELDS,
    ExecutionProfile,
    RunFormError,
    RunMode,
    UploadedFile,
    build_run_request,
)
from ..runner import RunCoordinator
from .rendering import templates

logger = logging.getLogger(__name__)

router = APIRouter()


async def _load_profiles(client: ApiClient) -> List[ExecutionProfile]:
    try:
        return await client.list_profiles()
    except ApiError as e:
        logger.warning(f"Could not load profiles: {e.message}")
        return []


async def _read_upload(upload: Optional[UploadFile]) -> Optional[UploadedFile]:
    # browsers send an unnamed empty part for an untouched file input
    if upload is None or not upload.filename:
        return None
    content = await upload.read()
    return UploadedFile(
        filename=upload.filename,
        content=content,
        content_type=upload.content_type or "application/octet-stream",
    )


def _render(
    request: Request,
    coordinator: RunCoordinator,
    profiles: List[ExecutionProfile],
    mode: RunMode,
    values: Optional[Dict[str, str]] = None,
    form_error: Optional[str] = None,
    status_code: int = 200,
) -> HTMLResponse:
    values = values or {}
    selected = values.get("profile_id") or (profiles[0].id if profiles else "")
    context = {
        "profiles": profiles,
        "selected_profile": selected,
        "mode": mode,
        "modes": list(RunMode),
        "file_fields": FILE_FIELDS,
        "values": values,
        "form_error": form_error,
        "submitting": coordinator.submitting,
        "transcript": coordinator.transcript,
    }
    return templates.TemplateResponse(request, "run.html", context, status_code=status_code)


@router.get("/run", response_class=HTMLResponse)
async def run_page(
    request: Request,
    mode: RunMode = RunMode.SEQUENTIAL,
    client: ApiClient = Depends(get_api_client),
    coordinator: RunCoordinator = Depends(get_coordinator),
):
    """Render the submission form and the current transcript."""
    profiles = await _load_profiles(client)
    return _render(request, coordinator, profiles, mode)


@router.post("/run", response_class=HTMLResponse)
async def submit_run(
    request: Request,
    mode: RunMode = Form(RunMode.SEQUENTIAL),
    profile_id: str = Form("", alias="profileId"),
    sheet_name: str = Form("", alias="sheetName"),
    start_row: str = Form("", alias="startRow"),
    end_row: str = Form("", alias="endRow"),
    dictionary_file: Optional[UploadFile] = File(None, alias="dictionaryFile"),
    action_file: Optional[UploadFile] = File(None, alias="actionFile"),
    data_test_file: Optional[UploadFile] = File(None, alias="dataTestFile"),
    client: ApiClient = Depends(get_api_client),
    coordinator: RunCoordinator = Depends(get_coordinator),
):
    """
    Validate the form and hand the run to the coordinator.
    
    Invalid input re-renders the form with status 400 and never reaches the
    backend.
    """
    files = {
        "dictionaryFile": await _read_upload(dictionary_file),
        "actionFile": await _read_upload(action_file),
        "dataTestFile": await _read_upload(data_test_file),
    }
    try:
        run_request = build_run_request(
            profile_id=profile_id,
            files=files,
            sheet_name=sheet_name,
            mode=mode,
            start_row=start_row,
            end_row=end_row,
        )
    except RunFormError as e:
        profiles = await _load_profiles(client)
        values = {
            "profile_id": profile_id,
            "sheet_name": sheet_name,
            "start_row": start_row,
            "end_row": end_row,
        }
        return _render(request, coordinator, profiles, mode, values, form_error=str(e), status_code=400)
    
    coordinator.start_run(run_request)
    return RedirectResponse(url=f"/run?mode={mode.value}", status_code=303)


@router.post("/run/clear")
async def clear_transcript(
    mode: RunMode = Form(RunMode.SEQUENTIAL),
    coordinator: RunCoordinator = Depends(get_coordinator),
):
    coordinator.clear_transcript()
    return RedirectResponse(url=f"/run?mode={mode.value}", status_code=303)


@router.get("/api/run")
async def run_state(coordinator: RunCoordinator = Depends(get_coordinator)):
    """Submitting flag and transcript as JSON."""
    return JSONResponse(coordinator.snapshot())
