"""Unit tests for the health probe views.

These tests call the views directly, without the full HTTP cycle.
"""

import unittest
from unittest.mock import Mock, patch

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.views import APIView

from notifications.schemas import DependencyHealth, ReadinessResponse
from notifications.views import LivenessCheckView, ReadinessCheckView


class TestLivenessCheckView(unittest.TestCase):
    """Unit tests for LivenessCheckView."""

    def setUp(self):
        """Set up test fixtures."""
        self.view = LivenessCheckView()

    def test_view_inherits_from_apiview(self):
        """Test that LivenessCheckView inherits from APIView."""
        self.assertIsInstance(self.view, APIView)

    def test_view_is_exempt_from_authentication(self):
        """Test that probes need no credentials."""
        self.assertEqual(tuple(LivenessCheckView.authentication_classes), ())
        self.assertEqual(tuple(LivenessCheckView.permission_classes), (AllowAny,))

    def test_get_returns_alive(self):
        """Test that get returns 200 with status alive."""
        response = self.view.get(Mock())

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {"status": "alive"})


class TestReadinessCheckView(unittest.TestCase):
    """Unit tests for ReadinessCheckView."""

    @patch("notifications.views.health_service")
    def test_get_returns_readiness_payload(self, mock_health_service):
        """Test that readiness is dumped with camelCase keys."""
        mock_health_service.get_readiness_status.return_value = ReadinessResponse(
            ready=True,
            status="degraded",
            degraded=True,
            dependencies={
                "database": DependencyHealth(
                    healthy=False,
                    status="unhealthy",
                    message="Database connection failed: refused",
                    response_time_ms=1.5,
                )
            },
        )

        response = ReadinessCheckView().get(Mock())

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data["degraded"])
        database = response.data["dependencies"]["database"]
        self.assertEqual(database["status"], "unhealthy")
        self.assertEqual(database["responseTimeMs"], 1.5)
