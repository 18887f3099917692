"""Project configuration and paths.

Loads settings from config/settings.yaml and environment variables.
"""

from __future__ import annotations

import os
import shlex
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# === Paths ===
# Resolved against the working directory: the CI checkout the build runs in,
# not the installed package.
CONFIG_DIR_NAME = "config"
SETTINGS_FILE_NAME = "settings.yaml"


def project_root() -> Path:
    """Return the site checkout the build runs in (the working directory)."""
    return Path.cwd()


def default_settings_path() -> Path:
    return project_root() / CONFIG_DIR_NAME / SETTINGS_FILE_NAME


# Load .env from the site checkout
load_dotenv(project_root() / ".env")

STACKBIT_API_KEY_ENV = "STACKBIT_API_KEY"


class StackbitSettings(BaseModel):
    """Settings for the Stackbit project webhooks and content pull."""
    project_id: str = "5da72ce2a08759001ca46f1c"
    api_base_url: str = "https://api.stackbit.com"
    pull_package: str = "@stackbit/stackbit-pull"
    npx_command: str = "npx"

    @property
    def webhook_base_url(self) -> str:
        return f"{self.api_base_url.rstrip('/')}/project/{self.project_id}/webhook/build"

    @property
    def pull_api_url(self) -> str:
        return f"{self.api_base_url.rstrip('/')}/pull/{self.project_id}"


class BuildSettings(BaseModel):
    """Static-site build command settings."""
    command: list[str] = Field(default_factory=lambda: ["gatsby", "build"])
    site_dir: str = Field(default_factory=lambda: str(project_root()))


class HTTPSettings(BaseModel):
    """HTTP client settings. A timeout of None waits indefinitely."""
    timeout: Optional[float] = None


class Settings(BaseModel):
    """Top-level application settings."""
    stackbit: StackbitSettings = Field(default_factory=StackbitSettings)
    build: BuildSettings = Field(default_factory=BuildSettings)
    http: HTTPSettings = Field(default_factory=HTTPSettings)

    @classmethod
    def load(cls, settings_path: Path | None = None) -> Settings:
        """Load settings from config/settings.yaml, falling back to defaults.

        Environment variables override values from the file.
        """
        settings_path = settings_path or default_settings_path()
        data: dict = {}
        if settings_path.exists():
            with open(settings_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        settings = cls(**data)
        settings.apply_env_overrides()
        return settings

    def apply_env_overrides(self) -> None:
        """Apply overrides from environment variables."""
        if project_id := os.getenv("STACKBIT_PROJECT_ID"):
            self.stackbit.project_id = project_id
        if url := os.getenv("STACKBIT_API_URL"):
            self.stackbit.api_base_url = url
        if command := os.getenv("SSG_BUILD_COMMAND"):
            self.build.command = shlex.split(command)
        if site_dir := os.getenv("SITE_DIR"):
            self.build.site_dir = site_dir


def get_stackbit_api_key() -> str | None:
    """Get the Stackbit API key from environment, or None if unset or empty."""
    key = os.getenv(STACKBIT_API_KEY_ENV, "")
    return key or None


def get_log_level() -> str:
    """Get the log level name from environment."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


# Singleton settings instance
settings = Settings.load()
