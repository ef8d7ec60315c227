"""Domain probe for external user API requests.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to calls against the third-party API.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class ExternalApiProbe(Protocol):
    """Domain probe for external user API requests."""

    def request_started(self, url: str) -> None:
        """Record that a request is about to be sent."""
        ...

    def request_succeeded(
        self, url: str, status_code: int, elapsed_ms: float
    ) -> None:
        """Record that a request returned a usable body."""
        ...

    def request_failed(
        self, url: str, reason: str, status_code: int | None = None
    ) -> None:
        """Record that a request failed or returned an unusable body."""
        ...


class DefaultExternalApiProbe:
    """Default implementation of ExternalApiProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def request_started(self, url: str) -> None:
        """Record that a request is about to be sent."""
        self._logger.debug(
            "external_api_request_started",
            url=url,
        )

    def request_succeeded(
        self, url: str, status_code: int, elapsed_ms: float
    ) -> None:
        """Record that a request returned a usable body."""
        self._logger.info(
            "external_api_request_succeeded",
            url=url,
            status_code=status_code,
            elapsed_ms=elapsed_ms,
        )

    def request_failed(
        self, url: str, reason: str, status_code: int | None = None
    ) -> None:
        """Record that a request failed or returned an unusable body."""
        self._logger.error(
            "external_api_request_failed",
            url=url,
            reason=reason,
            status_code=status_code,
        )
