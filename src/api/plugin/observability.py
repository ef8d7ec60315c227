"""Domain probe for the plugin's gRPC server."""

from __future__ import annotations

from typing import Protocol

import structlog


class PluginServerProbe(Protocol):
    """Domain probe for server lifecycle and rejected calls."""

    def server_started(self, address: str, port: int, max_workers: int) -> None:
        """Record that the gRPC server is accepting calls."""
        ...

    def server_stopping(self, grace_seconds: float) -> None:
        """Record that the server is shutting down."""
        ...

    def rpc_aborted(self, method: str, status: str, details: str) -> None:
        """Record that a call ended with a non-OK status."""
        ...


class DefaultPluginServerProbe:
    """Default implementation using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def server_started(self, address: str, port: int, max_workers: int) -> None:
        self._logger.info(
            "plugin_server_started",
            address=address,
            port=port,
            max_workers=max_workers,
        )

    def server_stopping(self, grace_seconds: float) -> None:
        self._logger.info(
            "plugin_server_stopping",
            grace_seconds=grace_seconds,
        )

    def rpc_aborted(self, method: str, status: str, details: str) -> None:
        self._logger.warning(
            "plugin_rpc_aborted",
            method=method,
            status=status,
            details=details,
        )
