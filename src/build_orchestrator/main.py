"""CLI entry point for the blog build.

Usage:
    blog-build
    python -m src.build_orchestrator.main
"""

from __future__ import annotations

import argparse
import sys

from src.common.config import get_log_level
from src.common.logging import resolve_level, set_level, setup_logging

from .runner import BuildOrchestrator

logger = setup_logging(module_name="build_orchestrator.main")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description=(
            "Notify the Stackbit build webhooks, pull remote content when "
            "STACKBIT_API_KEY is set, and build the site"
        ),
    )
    parser.parse_args(argv)

    level_name = get_log_level()
    level, known = resolve_level(level_name)
    set_level(level)
    if not known:
        logger.warning("Unknown LOG_LEVEL %r, using INFO", level_name)

    with BuildOrchestrator() as orchestrator:
        report = orchestrator.run()
    logger.debug("Build report: %s", report.to_dict())

    return report.exit_code


if __name__ == "__main__":
    sys.exit(main())
