# Common utilities and shared modules
"""
Shared components used by the build orchestrator:
- Logging configuration
- Project configuration
"""

from .config import settings, project_root, get_stackbit_api_key
from .logging import setup_logging

__all__ = [
    "settings",
    "project_root",
    "get_stackbit_api_key",
    "setup_logging",
]
