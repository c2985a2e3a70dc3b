"""Route tests for the console pages."""
import pytest
from fastapi.testclient import TestClient

from autotest_console.client import ApiHttpError, ApiTransportError, SessionNotFoundError
from autotest_console.config import settings
from autotest_console.dependencies import get_api_client, get_coordinator
from autotest_console.main import app
from autotest_console.models import ExecutionProfile, LogEntry, SessionDetail, SessionPage, SessionSummary
from autotest_console.pages import to_viewable_url
from autotest_console.runner import RunCoordinator


class FakeApiClient:
    """Canned backend answers for page rendering."""

    def __init__(self):
        self.profiles = [
            ExecutionProfile(id="p1", browser="chromium", viewport_width=1280, viewport_height=720),
            ExecutionProfile(id="p2", browser="webkit", viewport_width=390, viewport_height=844),
        ]
        self.profiles_error = None
        self.sessions_error = None
        self.session_pages = {}
        self.total = 0
        self.session = None
        self.logs = []
        self.requested_pages = []

    async def list_profiles(self):
        if self.profiles_error:
            raise self.profiles_error
        return self.profiles

    async def list_sessions(self, page=0, size=20):
        self.requested_pages.append((page, size))
        if self.sessions_error:
            raise self.sessions_error
        return SessionPage(items=self.session_pages.get(page, []), total=self.total)

    async def get_session(self, session_id):
        if self.session is None:
            raise SessionNotFoundError("Session not found")
        return self.session

    async def list_logs(self, session_id):
        return self.logs


class RecordingCoordinator(RunCoordinator):
    """Captures accepted requests instead of dispatching them."""

    def __init__(self):
        super().__init__(client=None)
        self.started = []

    def start_run(self, request):
        self.started.append(request)
        return None


@pytest.fixture
def fake_api():
    return FakeApiClient()


@pytest.fixture
def coordinator():
    return RecordingCoordinator()


@pytest.fixture
def client(fake_api, coordinator):
    app.dependency_overrides[get_api_client] = lambda: fake_api
    app.dependency_overrides[get_coordinator] = lambda: coordinator
    yield TestClient(app)
    app.dependency_overrides.clear()


def upload_files():
    xlsx = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    return {
        "dictionaryFile": ("dictionary.xlsx", b"dict", xlsx),
        "actionFile": ("action.xlsx", b"act", xlsx),
        "dataTestFile": ("data.xlsx", b"data", xlsx),
    }


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.parametrize("path", ["/", "/nowhere/at/all"])
def test_unknown_paths_redirect_to_run(client, path):
    response = client.get(path, follow_redirects=False)
    assert response.status_code in (302, 307)
    assert response.headers["location"] == "/run"


class TestRunPage:

    def test_lists_profiles(self, client):
        response = client.get("/run")
        assert response.status_code == 200
        assert "chromium – 1280 × 720" in response.text
        assert "webkit – 390 × 844" in response.text
        assert "Logs will appear here after you run" in response.text
        assert 'name="startRow"' not in response.text

    def test_limited_mode_shows_row_bounds(self, client):
        response = client.get("/run", params={"mode": "limited"})
        assert 'name="startRow"' in response.text
        assert 'name="endRow"' in response.text

    def test_profile_failure_shows_hint(self, client, fake_api):
        fake_api.profiles_error = ApiTransportError("Connection refused")
        response = client.get("/run")
        assert response.status_code == 200
        assert "No profiles found" in response.text

    def test_transcript_is_rendered(self, client, coordinator):
        coordinator._push("hello operator")
        response = client.get("/run")
        assert "hello operator" in response.text

    def test_submit_starts_run(self, client, coordinator):
        response = client.post(
            "/run",
            data={
                "mode": "limited-login",
                "profileId": "p2",
                "sheetName": "  NEW ",
                "startRow": "2",
                "endRow": "40",
            },
            files=upload_files(),
            follow_redirects=False,
        )
        assert response.status_code == 303
        assert response.headers["location"] == "/run?mode=limited-login"

        assert len(coordinator.started) == 1
        request = coordinator.started[0]
        assert request.profile_id == "p2"
        assert request.sheet_name == "NEW"
        assert (request.start_row, request.end_row) == ("2", "40")
        assert request.login_one_time
        assert request.dictionary_file.filename == "dictionary.xlsx"
        assert request.data_test_file.content == b"data"

    def test_missing_file_never_reaches_coordinator(self, client, coordinator):
        files = upload_files()
        del files["actionFile"]
        response = client.post(
            "/run",
            data={"profileId": "p1", "sheetName": "NEW"},
            files=files,
        )
        assert response.status_code == 400
        assert "Missing file: Upload Action File" in response.text
        assert coordinator.started == []

    def test_blank_sheet_is_rejected(self, client, coordinator):
        response = client.post(
            "/run",
            data={"profileId": "p1", "sheetName": "   "},
            files=upload_files(),
        )
        assert response.status_code == 400
        assert "Sheet name is required" in response.text
        assert coordinator.started == []

    def test_clear_transcript(self, client, coordinator):
        coordinator._push("old line")
        response = client.post("/run/clear", data={"mode": "limited"}, follow_redirects=False)
        assert response.status_code == 303
        assert response.headers["location"] == "/run?mode=limited"
        assert coordinator.transcript == []

    def test_state_endpoint(self, client, coordinator):
        coordinator._push("line")
        body = client.get("/api/run").json()
        assert body["submitting"] is False
        assert body["transcript"][0].endswith("line")


class TestSessionsPage:

    def test_last_page(self, client, fake_api):
        fake_api.total = 45
        fake_api.session_pages[2] = [
            SessionSummary(id="s41", status="RUNNING", scenario_name="Checkout", created_at="2026-01-05T09:00:00"),
        ]
        response = client.get("/sessions", params={"page": 2})

        assert response.status_code == 200
        assert fake_api.requested_pages == [(2, 20)]
        assert "Page 3 / 3 (45 total)" in response.text
        assert 'href="/sessions?page=1"' in response.text
        assert 'href="/sessions?page=3"' not in response.text
        assert "Checkout" in response.text
        assert "2026-01-05 09:00:00" in response.text
        assert "badge-running" in response.text
        assert 'href="/sessions/s41"' in response.text

    def test_first_page_has_no_prev(self, client, fake_api):
        fake_api.total = 45
        fake_api.session_pages[0] = [SessionSummary(id="s1")]
        response = client.get("/sessions")

        assert 'href="/sessions?page=-1"' not in response.text
        assert 'href="/sessions?page=1"' in response.text
        assert "badge-unknown" in response.text

    def test_empty(self, client):
        response = client.get("/sessions")
        assert "No sessions found." in response.text

    def test_error_panel(self, client, fake_api):
        fake_api.sessions_error = ApiHttpError("Failed (500)", status_code=500)
        response = client.get("/sessions")
        assert response.status_code == 502
        assert "Failed (500)" in response.text


class TestSessionDetailPage:

    def test_renders_session_and_logs(self, client, fake_api):
        fake_api.session = SessionDetail(
            id="s1", status="FAILED",
            created_at="2026-01-05T10:00:00", ended_at="2026-01-05T10:02:00",
        )
        fake_api.logs = [
            LogEntry(no=0, action="header-row"),
            LogEntry(no=1, action="open", message="opened"),
            LogEntry(no=2, action="click", url="C:\\shots\\2.png"),
        ]
        response = client.get("/sessions/s1")

        assert response.status_code == 200
        assert "Logs (2)" in response.text
        assert "header-row" not in response.text
        assert 'href="/local-file/C:/shots/2.png"' in response.text
        assert "2m 0s" in response.text
        assert "badge-failed" in response.text

    def test_unsafe_screenshot_url_is_not_linked(self, client, fake_api):
        fake_api.session = SessionDetail(id="s1", status="SUCCESS")
        fake_api.logs = [LogEntry(no=1, action="open", url="javascript:alert(1)")]
        response = client.get("/sessions/s1")

        assert response.status_code == 200
        assert "javascript:" not in response.text
        assert "🖼 View" not in response.text

    def test_not_found(self, client):
        response = client.get("/sessions/missing")
        assert response.status_code == 404
        assert "Session not found" in response.text


class TestLocalFileBridge:

    @pytest.fixture
    def viewer_enabled(self, monkeypatch):
        monkeypatch.setattr(settings, "LOCAL_FILE_VIEWER_ENABLED", True)

    def test_disabled_by_default(self, client, tmp_path):
        secret = tmp_path / "secret.txt"
        secret.write_text("root:x:0:0")
        assert settings.LOCAL_FILE_VIEWER_ENABLED is False
        response = client.get(f"/local-file{secret}")
        assert response.status_code == 404
        assert "root:x" not in response.text

    def test_serves_image(self, client, viewer_enabled, tmp_path):
        image = tmp_path / "shot.PNG"
        image.write_bytes(b"\x89PNG fake")
        response = client.get(to_viewable_url(f"file://{image}"))
        assert response.status_code == 200
        assert response.headers["content-type"] == "image/png"
        assert response.content == b"\x89PNG fake"

    def test_unknown_extension_is_octet_stream(self, client, viewer_enabled, tmp_path):
        blob = tmp_path / "trace.zip"
        blob.write_bytes(b"zip")
        response = client.get(f"/local-file{blob}")
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/octet-stream"

    def test_missing_file(self, client, viewer_enabled, tmp_path):
        response = client.get(f"/local-file{tmp_path / 'nope.png'}")
        assert response.status_code == 404
