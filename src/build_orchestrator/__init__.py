# Build Orchestrator: webhook notifications, content pull and static-site build
"""
Build orchestrator for the blog.

Sequences the Stackbit lifecycle webhooks, the optional remote content
pull, and the Gatsby build. The first failing step aborts the run.
"""

from .commands import CommandRunner, ContentPuller, SiteBuilder
from .models import BuildPhase, BuildReport, StepResult, StepStatus
from .runner import BuildOrchestrator
from .steps import BuildStep, default_steps
from .webhooks import WebhookClient

__all__ = [
    "BuildOrchestrator",
    "BuildPhase",
    "BuildReport",
    "BuildStep",
    "CommandRunner",
    "ContentPuller",
    "SiteBuilder",
    "StepResult",
    "StepStatus",
    "WebhookClient",
    "default_steps",
]
