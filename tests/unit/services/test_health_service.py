"""Tests for HealthService."""

import unittest
from unittest.mock import patch

from django.db.utils import OperationalError

from notifications.enums import HealthStatus
from notifications.services.health_service import HealthService


class TestHealthService(unittest.TestCase):
    """Test cases for HealthService."""

    def setUp(self):
        """Set up a service with caching disabled."""
        self.service = HealthService(cache_ttl_seconds=0)

    def test_liveness_is_always_alive(self):
        """Test liveness does not depend on the database."""
        self.assertEqual(self.service.get_liveness_status().status, "alive")

    @patch("notifications.services.health_service.connection")
    def test_readiness_ready_when_database_up(self, mock_connection):
        """Test readiness reports ready with a healthy database."""
        readiness = self.service.get_readiness_status()

        mock_connection.ensure_connection.assert_called_once()
        self.assertTrue(readiness.ready)
        self.assertFalse(readiness.degraded)
        self.assertEqual(readiness.status, "ready")
        self.assertEqual(
            readiness.dependencies["database"].status, HealthStatus.HEALTHY
        )

    @patch("notifications.services.health_service.connection")
    def test_readiness_degraded_when_database_down(self, mock_connection):
        """Test readiness stays ready but degraded when the database is down."""
        mock_connection.ensure_connection.side_effect = OperationalError("refused")

        readiness = self.service.get_readiness_status()

        self.assertTrue(readiness.ready)
        self.assertTrue(readiness.degraded)
        self.assertEqual(readiness.status, "degraded")
        database = readiness.dependencies["database"]
        self.assertFalse(database.healthy)
        self.assertEqual(database.status, HealthStatus.UNHEALTHY)
        self.assertIn("refused", database.message)

    @patch("notifications.services.health_service.connection")
    def test_unexpected_error_reports_error_status(self, mock_connection):
        """Test non-operational failures are reported as errors."""
        mock_connection.ensure_connection.side_effect = RuntimeError("boom")

        database = self.service.check_database_health()

        self.assertEqual(database.status, HealthStatus.ERROR)

    @patch("notifications.services.health_service.connection")
    def test_result_is_cached(self, mock_connection):
        """Test repeated checks within the TTL reuse the cached result."""
        service = HealthService(cache_ttl_seconds=60)

        service.check_database_health()
        service.check_database_health()

        mock_connection.ensure_connection.assert_called_once()
