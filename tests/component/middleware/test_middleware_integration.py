"""Component tests for middleware integration with Django/DRF."""

import uuid

from django.test import Client, TestCase

from notifications.constants import (
    PROCESS_TIME_HEADER,
    REQUEST_ID_HEADER,
    SECURITY_HEADERS,
)


class TestMiddlewareIntegration(TestCase):
    """Test middleware integration with actual HTTP requests."""

    def setUp(self):
        """Set up test client."""
        self.client = Client()

    def test_request_id_generated(self):
        """Test that responses carry a generated request id."""
        response = self.client.get("/health/live")

        uuid.UUID(response[REQUEST_ID_HEADER])

    def test_request_id_propagated_to_error_body(self):
        """Test that error bodies carry the same request id as the header."""
        response = self.client.get(
            "/api/notifications/student-inbox", HTTP_X_REQUEST_ID="trace-42"
        )

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response[REQUEST_ID_HEADER], "trace-42")
        self.assertEqual(response.json()["request_id"], "trace-42")

    def test_security_headers_added(self):
        """Test that security headers are added to responses."""
        response = self.client.get("/health/live")

        for header, expected_value in SECURITY_HEADERS.items():
            self.assertEqual(response[header], expected_value)

    def test_process_time_header_added(self):
        """Test that responses report their processing time."""
        response = self.client.get("/health/live")

        self.assertGreaterEqual(float(response[PROCESS_TIME_HEADER]), 0.0)

    def test_api_error_responses_are_not_stored(self):
        """Test that API responses, including 401s, are marked no-store."""
        response = self.client.get("/api/notifications/student-inbox")

        self.assertIn("no-store", response["Cache-Control"])
        self.assertIn("Authorization", response["Vary"])

    def test_probe_responses_carry_no_cache_directives(self):
        """Test that health probes keep only the security headers."""
        response = self.client.get("/health/live")

        self.assertNotIn("Cache-Control", response)
