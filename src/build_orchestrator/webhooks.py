"""HTTP client for the Stackbit build lifecycle webhooks.

Each notification is a bare POST whose response body is discarded. Transport
errors and HTTP error statuses are raised to the caller; there are no retries.
"""

from __future__ import annotations

import requests

from src.common.config import Settings, settings as default_settings
from src.common.logging import setup_logging

from .models import BuildPhase

logger = setup_logging(module_name="build_orchestrator.webhooks")


class WebhookClient:
    """Sends build lifecycle notifications for one Stackbit project."""

    def __init__(
        self,
        config: Settings | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.config = config or default_settings
        self._session = session or requests.Session()

    def url_for(self, phase: BuildPhase) -> str:
        """Return the webhook URL for a lifecycle phase."""
        return f"{self.config.stackbit.webhook_base_url}/{BuildPhase(phase).value}"

    def notify(self, phase: BuildPhase) -> int:
        """POST a lifecycle notification.

        Args:
            phase: Lifecycle phase to report.

        Returns:
            HTTP status code of the response.

        Raises:
            requests.RequestException: On network failure or an error status.
        """
        phase = BuildPhase(phase)
        url = self.url_for(phase)
        logger.info("POST %s", url)
        resp = self._session.post(url, timeout=self.config.http.timeout)
        resp.raise_for_status()
        logger.debug("Webhook %s answered %d", phase.value, resp.status_code)
        return resp.status_code

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()

    def __enter__(self) -> WebhookClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
