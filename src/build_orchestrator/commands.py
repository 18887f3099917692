"""External commands run during a build: the content pull and the site build."""

from __future__ import annotations

import os
import shlex
import subprocess
from typing import Mapping, Sequence

from src.common.config import STACKBIT_API_KEY_ENV, Settings, settings as default_settings
from src.common.logging import setup_logging

logger = setup_logging(module_name="build_orchestrator.commands")

# Exit status a shell reports for a command it cannot find
COMMAND_NOT_FOUND = 127


class CommandRunner:
    """Runs a command to completion, raising on a non-zero exit.

    Output is not captured so the generator's own progress stays visible
    on the console.
    """

    def __init__(self, cwd: str | None = None) -> None:
        self.cwd = cwd

    def run(
        self,
        args: Sequence[str],
        extra_env: Mapping[str, str] | None = None,
    ) -> int:
        """Run a command.

        Args:
            args: Command and arguments.
            extra_env: Variables added to the inherited environment.

        Returns:
            The command's exit code (always 0).

        Raises:
            subprocess.CalledProcessError: If the command exits non-zero.
            FileNotFoundError: If the executable does not exist.
        """
        logger.info("$ %s", shlex.join(args))
        env = None
        if extra_env:
            env = {**os.environ, **extra_env}
        result = subprocess.run(list(args), cwd=self.cwd, env=env, check=True)
        return result.returncode


class ContentPuller:
    """Pulls remote content configuration with the stackbit-pull tool."""

    def __init__(
        self,
        config: Settings | None = None,
        runner: CommandRunner | None = None,
    ) -> None:
        self.config = config or default_settings
        self.runner = runner or CommandRunner(cwd=self.config.build.site_dir)

    def command(self) -> list[str]:
        stackbit = self.config.stackbit
        return [
            stackbit.npx_command,
            stackbit.pull_package,
            f"--stackbit-pull-api-url={stackbit.pull_api_url}",
        ]

    def pull(self, api_key: str) -> int:
        """Run the pull command with the API key in its environment."""
        if not api_key:
            raise ValueError(f"{STACKBIT_API_KEY_ENV} must be non-empty to pull content")
        return self.runner.run(self.command(), extra_env={STACKBIT_API_KEY_ENV: api_key})


class SiteBuilder:
    """Invokes the static-site generator's build command."""

    def __init__(
        self,
        config: Settings | None = None,
        runner: CommandRunner | None = None,
    ) -> None:
        self.config = config or default_settings
        self.runner = runner or CommandRunner(cwd=self.config.build.site_dir)

    def command(self) -> list[str]:
        return list(self.config.build.command)

    def build(self) -> int:
        return self.runner.run(self.command())
