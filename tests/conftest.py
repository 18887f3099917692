"""Shared test fixtures for the blog build orchestrator."""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Ensure src is importable
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.common.config import BuildSettings, Settings, StackbitSettings
from src.build_orchestrator.commands import ContentPuller, SiteBuilder
from src.build_orchestrator.webhooks import WebhookClient


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Provide Settings pointing at a temporary site directory."""
    return Settings(
        stackbit=StackbitSettings(
            project_id="test-project",
            api_base_url="https://api.example.test",
        ),
        build=BuildSettings(site_dir=str(tmp_path)),
    )


@pytest.fixture
def clean_env(monkeypatch):
    """Remove environment variables that change orchestrator behavior."""
    for name in (
        "STACKBIT_API_KEY",
        "STACKBIT_PROJECT_ID",
        "STACKBIT_API_URL",
        "SSG_BUILD_COMMAND",
        "SITE_DIR",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def collaborators():
    """Mocked webhook client, puller and builder sharing one call log.

    Returns (calls, webhooks, puller, builder); ``calls.mock_calls`` lists
    every external call in the order it happened.
    """
    calls = MagicMock()
    webhooks = MagicMock(spec=WebhookClient)
    puller = MagicMock(spec=ContentPuller)
    builder = MagicMock(spec=SiteBuilder)
    calls.attach_mock(webhooks.notify, "notify")
    calls.attach_mock(puller.pull, "pull")
    calls.attach_mock(builder.build, "build")
    return calls, webhooks, puller, builder


@pytest.fixture
def ok_response() -> MagicMock:
    """A successful HTTP response mock."""
    resp = MagicMock()
    resp.status_code = 200
    resp.raise_for_status = MagicMock()
    return resp
