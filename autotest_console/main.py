"""
FastAPI Main Application - Autotest Console
"""
import logging
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles

from .config import settings
from .client import ApiClient
from .runner import RunCoordinator
from .pages import (
    local_files_router,
    run_router,
    session_detail_router,
    sessions_router,
)


logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Own one API client and one run coordinator for the process."""
    api_client = ApiClient()
    app.state.api_client = api_client
    app.state.coordinator = RunCoordinator(api_client)
    logger.info(f"Backend at {settings.API_BASE_URL}")
    try:
        yield
    finally:
        await api_client.aclose()


app = FastAPI(
    title=settings.APP_NAME,
    description="Control panel for automated UI-test runs",
    version="1.0.0",
    debug=settings.DEBUG,
    lifespan=lifespan,
)

if settings.STATIC_DIR.exists():
    app.mount("/static", StaticFiles(directory=str(settings.STATIC_DIR)), name="static")

app.include_router(run_router)
app.include_router(sessions_router)
app.include_router(session_detail_router)
app.include_router(local_files_router)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "timestamp": datetime.now().isoformat()}


@app.get("/")
async def root():
    return RedirectResponse(url="/run")


@app.get("/{path:path}", include_in_schema=False)
async def fallback(path: str):
    """Unknown pages land on the run page."""
    return RedirectResponse(url="/run")
