"""Shared fixtures for the console tests."""
from datetime import datetime

import pytest

from autotest_console.models import RunRequest, UploadedFile


XLSX = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@pytest.fixture
def fixed_clock():
    return lambda: datetime(2026, 1, 5, 10, 20, 30)


@pytest.fixture
def make_run_request():
    def _make(**overrides) -> RunRequest:
        fields = {
            "profile_id": "p-1",
            "dictionary_file": UploadedFile("dictionary.xlsx", b"dict", XLSX),
            "action_file": UploadedFile("action.xlsx", b"act", XLSX),
            "data_test_file": UploadedFile("data.xlsx", b"data", XLSX),
            "sheet_name": "NEW",
        }
        fields.update(overrides)
        return RunRequest(**fields)
    return _make
