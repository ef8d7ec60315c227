"""Domain probes for the External application layer."""

from __future__ import annotations

from typing import Protocol

import structlog


class ExternalUserServiceProbe(Protocol):
    """Domain probe for external user retrieval."""

    def external_users_fetched(self, count: int, user_id: str | None = None) -> None:
        """Record that external users were fetched and translated."""
        ...

    def external_fetch_failed(self, error: str, user_id: str | None = None) -> None:
        """Record that fetching external users failed."""
        ...


class DefaultExternalUserServiceProbe:
    """Default implementation using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def external_users_fetched(self, count: int, user_id: str | None = None) -> None:
        self._logger.info(
            "external_users_fetched",
            count=count,
            user_id=user_id,
        )

    def external_fetch_failed(self, error: str, user_id: str | None = None) -> None:
        self._logger.error(
            "external_fetch_failed",
            error=error,
            user_id=user_id,
        )
