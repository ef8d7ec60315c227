"""Unit tests for the plugin server probe."""

from unittest.mock import MagicMock

import structlog

from plugin.observability import DefaultPluginServerProbe


class TestDefaultPluginServerProbe:
    def test_server_started_logs_info(self):
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultPluginServerProbe(logger=mock_logger)

        probe.server_started(address="127.0.0.1", port=50051, max_workers=10)

        mock_logger.info.assert_called_once_with(
            "plugin_server_started", address="127.0.0.1", port=50051, max_workers=10
        )

    def test_server_stopping_logs_info(self):
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultPluginServerProbe(logger=mock_logger)

        probe.server_stopping(grace_seconds=5.0)

        mock_logger.info.assert_called_once_with(
            "plugin_server_stopping", grace_seconds=5.0
        )

    def test_rpc_aborted_logs_warning(self):
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultPluginServerProbe(logger=mock_logger)

        probe.rpc_aborted(method="QueryExternalUser", status="UNAVAILABLE", details="x")

        mock_logger.warning.assert_called_once_with(
            "plugin_rpc_aborted",
            method="QueryExternalUser",
            status="UNAVAILABLE",
            details="x",
        )
