"""
Local file bridge - serves screenshots referenced by absolute paths on this host
"""
import re
from pathlib import Path
from typing import Optional
from urllib.parse import urlsplit

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from ..config import settings


LOCAL_FILE_PREFIX = "/local-file/"
FILE_URL_PREFIX = "file:///"

MEDIA_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".svg": "image/svg+xml",
    ".bmp": "image/bmp",
}
DEFAULT_MEDIA_TYPE = "application/octet-stream"

LINKABLE_SCHEMES = ("", "http", "https")

_DRIVE_PATH_RE = re.compile(r"^[A-Za-z]:[/\\]")


def require_local_file_viewer():
    """Hide the bridge unless LOCAL_FILE_VIEWER_ENABLED is set."""
    if not settings.LOCAL_FILE_VIEWER_ENABLED:
        raise HTTPException(status_code=404, detail="Not found")


router = APIRouter(dependencies=[Depends(require_local_file_viewer)])


def to_viewable_url(raw_url: Optional[str]) -> Optional[str]:
    """
    Rewrite a local screenshot reference into a URL the browser can open.
    
    ``file:///...`` URLs and drive-letter paths (``C:\\...`` or ``C:/...``)
    are routed through the local file bridge. http(s) and relative URLs are
    returned unchanged; any other scheme (javascript:, data:, ...) gives None.
    
    Args:
        raw_url: Screenshot reference as stored by the backend
        
    Returns:
        A browser-viewable URL, or None when the reference must not be linked
    """
    raw_url = (raw_url or "").strip()
    if not raw_url:
        return None
    if raw_url.startswith(FILE_URL_PREFIX):
        return LOCAL_FILE_PREFIX + raw_url[len(FILE_URL_PREFIX):]
    if _DRIVE_PATH_RE.match(raw_url):
        return LOCAL_FILE_PREFIX + raw_url.replace("\\", "/")
    if urlsplit(raw_url).scheme.lower() not in LINKABLE_SCHEMES:
        return None
    return raw_url


def media_type_for(path: Path) -> str:
    return MEDIA_TYPES.get(path.suffix.lower(), DEFAULT_MEDIA_TYPE)


def resolve_local_path(file_path: str) -> Path:
    """Absolute path for the part of the URL after the bridge prefix."""
    if _DRIVE_PATH_RE.match(file_path):
        return Path(file_path)
    # file:///home/... loses its leading slash in the rewritten URL
    return Path("/" + file_path.lstrip("/"))


@router.get("/local-file/{file_path:path}")
async def serve_local_file(file_path: str):
    """
    Stream a file from the local filesystem.
    """
    path = resolve_local_path(file_path)
    if not path.is_file():
        raise HTTPException(status_code=404, detail="Not found")
    return FileResponse(str(path), media_type=media_type_for(path))
