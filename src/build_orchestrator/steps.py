"""The ordered build steps.

Each step wraps one external call. A step returns SUCCESS or SKIPPED and
raises on failure; the runner decides what a failure means.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from src.common.config import STACKBIT_API_KEY_ENV
from src.common.logging import setup_logging

from .commands import ContentPuller, SiteBuilder
from .models import BuildPhase, StepStatus
from .webhooks import WebhookClient

logger = setup_logging(module_name="build_orchestrator.steps")

SKIP_PULL_WARNING = (
    f"No {STACKBIT_API_KEY_ENV} environment variable set, skipping stackbit-pull"
)


@dataclass
class BuildStep:
    """A named, fallible unit of work."""
    name: str
    action: Callable[[], StepStatus]

    def __call__(self) -> StepStatus:
        return self.action()


def notify_step(webhooks: WebhookClient, phase: BuildPhase) -> BuildStep:
    """Step that reports a lifecycle phase to the project webhook."""

    def action() -> StepStatus:
        webhooks.notify(phase)
        return StepStatus.SUCCESS

    return BuildStep(name=f"notify_{phase.value}", action=action)


def pull_step(
    puller: ContentPuller,
    get_api_key: Callable[[], Optional[str]],
) -> BuildStep:
    """Step that pulls remote content when an API key is available."""

    def action() -> StepStatus:
        api_key = get_api_key()
        if not api_key:
            logger.warning(SKIP_PULL_WARNING)
            return StepStatus.SKIPPED
        puller.pull(api_key)
        return StepStatus.SUCCESS

    return BuildStep(name="stackbit_pull", action=action)


def build_step(builder: SiteBuilder) -> BuildStep:
    """Step that runs the static-site build."""

    def action() -> StepStatus:
        builder.build()
        return StepStatus.SUCCESS

    return BuildStep(name="ssg_build", action=action)


def default_steps(
    webhooks: WebhookClient,
    puller: ContentPuller,
    builder: SiteBuilder,
    get_api_key: Callable[[], Optional[str]],
) -> list[BuildStep]:
    """Return the build steps in execution order."""
    return [
        notify_step(webhooks, BuildPhase.PULL),
        pull_step(puller, get_api_key),
        notify_step(webhooks, BuildPhase.SSG_BUILD),
        build_step(builder),
        notify_step(webhooks, BuildPhase.PUBLISH),
    ]
