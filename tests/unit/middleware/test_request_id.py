"""Unit tests for RequestIDMiddleware."""

import unittest
import uuid

from django.http import HttpRequest, HttpResponse

from notifications.constants import REQUEST_ID_HEADER
from notifications.logging.context import bind_caller, get_caller_fields, get_request_id
from notifications.middleware import RequestIDMiddleware


class TestRequestIDMiddleware(unittest.TestCase):
    """Test cases for RequestIDMiddleware."""

    def setUp(self):
        """Set up test fixtures."""
        self.seen_request_ids = []

        def get_response(request):
            self.seen_request_ids.append(get_request_id())
            return HttpResponse("OK")

        self.middleware = RequestIDMiddleware(get_response)

    def _create_request(self, headers=None):
        """Helper to create a test request."""
        request = HttpRequest()
        request.method = "GET"
        request.path = "/api/notifications/student-inbox"
        for key, value in (headers or {}).items():
            request.META[f"HTTP_{key.upper().replace('-', '_')}"] = value
        return request

    def test_generates_uuid_when_not_present(self):
        """Test that a UUID is generated when no request ID is sent."""
        request = self._create_request()
        response = self.middleware(request)

        uuid.UUID(request.request_id)
        self.assertEqual(response[REQUEST_ID_HEADER], request.request_id)

    def test_reuses_incoming_request_id(self):
        """Test that an incoming X-Request-ID is echoed back."""
        request = self._create_request({REQUEST_ID_HEADER: "client-abc"})

        response = self.middleware(request)

        self.assertEqual(request.request_id, "client-abc")
        self.assertEqual(response[REQUEST_ID_HEADER], "client-abc")

    def test_request_id_visible_during_request(self):
        """Test that downstream code sees the id through thread-local storage."""
        request = self._create_request({REQUEST_ID_HEADER: "trace-1"})

        self.middleware(request)

        self.assertEqual(self.seen_request_ids, ["trace-1"])

    def test_request_id_cleared_after_request(self):
        """Test that thread-local storage is cleared when the request ends."""
        self.middleware(self._create_request())

        self.assertIsNone(get_request_id())

    def test_bound_caller_cleared_after_request(self):
        """Test the caller bound during authentication does not leak."""

        def authenticated_get_response(request):
            bind_caller("stu-1", "Student")
            return HttpResponse("OK")

        RequestIDMiddleware(authenticated_get_response)(self._create_request())

        self.assertEqual(get_caller_fields(), {})

    def test_request_id_cleared_when_view_raises(self):
        """Test that the id is cleared even if the view fails."""

        def failing_get_response(request):
            raise RuntimeError("view failed")

        middleware = RequestIDMiddleware(failing_get_response)

        with self.assertRaises(RuntimeError):
            middleware(self._create_request())
        self.assertIsNone(get_request_id())
