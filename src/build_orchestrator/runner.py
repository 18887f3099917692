"""Fail-fast runner for the build steps.

Usage:
    with BuildOrchestrator() as orchestrator:
        report = orchestrator.run()
    sys.exit(report.exit_code)
"""

from __future__ import annotations

import subprocess
import time
from datetime import datetime
from typing import Callable, Optional

import requests

from src.common.config import Settings, get_stackbit_api_key, settings as default_settings
from src.common.logging import setup_logging

from .commands import COMMAND_NOT_FOUND, ContentPuller, SiteBuilder
from .models import BuildReport, StepResult, StepStatus
from .steps import BuildStep, default_steps
from .webhooks import WebhookClient

logger = setup_logging(module_name="build_orchestrator.runner")

# Exit status a shell reports for a command killed by a signal: 128 + signal
SIGNAL_EXIT_BASE = 128


def shell_exit_code(returncode: int) -> int:
    """Map a subprocess return code to the status a shell would report."""
    if returncode < 0:
        return SIGNAL_EXIT_BASE - returncode
    return returncode


class BuildOrchestrator:
    """Runs the build steps in order and stops at the first failure.

    Steps:
    1. Notify the "pull" webhook
    2. Pull remote content (skipped without an API key)
    3. Notify the "ssgbuild" webhook
    4. Run the static-site build
    5. Notify the "publish" webhook
    """

    def __init__(
        self,
        config: Settings | None = None,
        webhooks: WebhookClient | None = None,
        puller: ContentPuller | None = None,
        builder: SiteBuilder | None = None,
        get_api_key: Callable[[], Optional[str]] = get_stackbit_api_key,
    ) -> None:
        self.config = config or default_settings
        self.webhooks = webhooks or WebhookClient(self.config)
        self.puller = puller or ContentPuller(self.config)
        self.builder = builder or SiteBuilder(self.config)
        self.get_api_key = get_api_key

    def steps(self) -> list[BuildStep]:
        return default_steps(self.webhooks, self.puller, self.builder, self.get_api_key)

    def run(self) -> BuildReport:
        """Execute every step until one fails.

        Returns:
            BuildReport; steps after a failure remain PENDING.
        """
        steps = self.steps()
        report = BuildReport(
            steps=[StepResult(name=step.name) for step in steps],
            started_at=datetime.now().isoformat(),
        )

        for step, result in zip(steps, report.steps):
            logger.info("Step %s...", step.name)
            if not self._run_step(step, result):
                logger.error(
                    "Build aborted at step %s (exit code %d): %s",
                    step.name, result.return_code, result.error,
                )
                break

        report.completed_at = datetime.now().isoformat()
        if report.success:
            logger.info("Build complete: %d steps", len(report.steps))
        return report

    def _run_step(self, step: BuildStep, result: StepResult) -> bool:
        """Run one step, recording its outcome. Returns False on failure."""
        start = time.monotonic()
        try:
            result.status = step()
        except subprocess.CalledProcessError as e:
            result.status = StepStatus.FAILED
            result.return_code = shell_exit_code(e.returncode)
            if e.returncode < 0:
                result.error = f"command killed by signal {-e.returncode}: {e.cmd}"
            else:
                result.error = f"command exited with status {e.returncode}: {e.cmd}"
        except FileNotFoundError as e:
            result.status = StepStatus.FAILED
            if e.filename is not None and str(e.filename) == str(self.config.build.site_dir):
                result.return_code = 1
                result.error = f"site directory not found: {e.filename}"
            else:
                result.return_code = COMMAND_NOT_FOUND
                result.error = f"command not found: {e.filename or e}"
        except requests.RequestException as e:
            result.status = StepStatus.FAILED
            result.return_code = 1
            result.error = str(e)
        finally:
            result.duration_seconds = time.monotonic() - start

        if result.status == StepStatus.SKIPPED:
            logger.info("Step %s skipped", step.name)
        elif not result.failed:
            logger.info("Step %s done (%.1fs)", step.name, result.duration_seconds)
        return not result.failed

    def close(self) -> None:
        self.webhooks.close()

    def __enter__(self) -> BuildOrchestrator:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
