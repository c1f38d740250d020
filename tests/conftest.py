"""Shared fixtures: isolate tests from the caller's environment and working directory."""

import pytest

from greeting_service import Settings


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Run each test in an empty directory without settings env vars."""
    for field_name in Settings.model_fields:
        monkeypatch.delenv(field_name.upper(), raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
