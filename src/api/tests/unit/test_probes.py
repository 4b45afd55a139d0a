"""Unit tests for infrastructure domain probes."""

from unittest.mock import Mock

from authorization.infrastructure.observability import DefaultAuthorizationStoreProbe
from infrastructure.observability import DefaultConnectionProbe, ObservationContext


class TestConnectionProbe:
    """Tests for DefaultConnectionProbe."""

    def test_default_probe_creates_with_default_logger(self):
        probe = DefaultConnectionProbe()
        assert probe._logger is not None

    def test_engine_created_logs_info(self):
        logger = Mock()
        probe = DefaultConnectionProbe(logger=logger)

        probe.engine_created(
            role="read", target="postgresql+asyncpg://warden@db:5432/warden", pool_size=10
        )

        logger.info.assert_called_once()
        assert logger.info.call_args[0][0] == "database_engine_created"
        assert logger.info.call_args[1]["role"] == "read"
        assert logger.info.call_args[1]["pool_size"] == 10

    def test_engine_disposed_logs_info(self):
        logger = Mock()
        probe = DefaultConnectionProbe(logger=logger)

        probe.engine_disposed(role="write")

        assert logger.info.call_args[0][0] == "database_engine_disposed"
        assert logger.info.call_args[1]["role"] == "write"

    def test_with_context_keeps_logger(self):
        logger = Mock()
        probe = DefaultConnectionProbe(logger=logger).with_context(
            ObservationContext(request_id="req-9")
        )

        probe.engine_disposed(role="read")

        assert logger.info.call_args[1]["request_id"] == "req-9"


class TestAuthorizationStoreProbe:
    """Tests for DefaultAuthorizationStoreProbe."""

    def test_read_failed_logs_error(self):
        logger = Mock()
        probe = DefaultAuthorizationStoreProbe(logger=logger)

        probe.read_failed("find_resource_owner", ConnectionError("refused"))

        logger.error.assert_called_once()
        assert logger.error.call_args[0][0] == "authorization_store_read_failed"
        assert logger.error.call_args[1]["operation"] == "find_resource_owner"

    def test_edge_checked_logs_result(self):
        logger = Mock()
        probe = DefaultAuthorizationStoreProbe(logger=logger)

        probe.edge_checked(1, 3, "assigned_to", True)

        assert logger.debug.call_args[0][0] == "relationship_edge_checked"
