"""Tests for CallerAuthentication."""

from django.test import SimpleTestCase, override_settings

from rest_framework.exceptions import AuthenticationFailed
from rest_framework.test import APIRequestFactory

from notifications.auth import Caller, CallerAuthentication
from notifications.enums import Role
from notifications.logging.context import clear_request_context, get_caller_fields
from tests.auth_tokens import make_token


class TestCallerAuthentication(SimpleTestCase):
    """Test cases for session token authentication."""

    def setUp(self):
        """Set up test fixtures."""
        self.factory = APIRequestFactory()
        self.authentication = CallerAuthentication()

    def tearDown(self):
        """Forget any caller bound to the log context."""
        clear_request_context()

    def test_no_credentials_returns_none(self):
        """Test requests without a token are left unauthenticated."""
        request = self.factory.get("/api/notifications/student-inbox")

        self.assertIsNone(self.authentication.authenticate(request))

    def test_bearer_token_authenticates(self):
        """Test a valid Bearer token yields a Caller."""
        token = make_token("u1", "STUDENT", name="Asha")
        request = self.factory.get("/", HTTP_AUTHORIZATION=f"Bearer {token}")

        caller, returned_token = self.authentication.authenticate(request)

        self.assertEqual(caller, Caller(id="u1", role=Role.STUDENT, name="Asha"))
        self.assertEqual(returned_token, token)

    def test_authenticated_caller_is_bound_to_log_context(self):
        """Test later log events of the request name the caller."""
        token = make_token("fac-1", "FACULTY")
        request = self.factory.get("/", HTTP_AUTHORIZATION=f"Bearer {token}")

        self.authentication.authenticate(request)

        self.assertEqual(
            get_caller_fields(), {"user_id": "fac-1", "caller_role": "Faculty"}
        )

    def test_cookie_token_authenticates(self):
        """Test the login cookie is accepted when no header is sent."""
        request = self.factory.get("/")
        request.COOKIES["token"] = make_token("fac-1", "FACULTY")

        caller, _ = self.authentication.authenticate(request)

        self.assertEqual(caller.role, Role.FACULTY)

    @override_settings(AUTH_COOKIE_NAME="session")
    def test_cookie_name_is_configurable(self):
        """Test the cookie name comes from settings."""
        request = self.factory.get("/")
        request.COOKIES["session"] = make_token("a1", "ADMIN")

        caller, _ = self.authentication.authenticate(request)

        self.assertEqual(caller.id, "a1")

    def test_expired_token_fails(self):
        """Test expired tokens are rejected."""
        token = make_token(expires_in=-60)
        request = self.factory.get("/", HTTP_AUTHORIZATION=f"Bearer {token}")

        with self.assertRaisesMessage(AuthenticationFailed, "Session expired"):
            self.authentication.authenticate(request)

    def test_token_with_wrong_signature_fails(self):
        """Test tokens signed with another secret are rejected."""
        with self.settings(JWT_SECRET="another-secret-of-sufficient-length-here"):
            token = make_token()
        request = self.factory.get("/", HTTP_AUTHORIZATION=f"Bearer {token}")

        with self.assertRaisesMessage(AuthenticationFailed, "Invalid token"):
            self.authentication.authenticate(request)

    def test_unknown_role_fails(self):
        """Test tokens with an unknown role are rejected."""
        token = make_token(role="PARENT")
        request = self.factory.get("/", HTTP_AUTHORIZATION=f"Bearer {token}")

        with self.assertRaises(AuthenticationFailed):
            self.authentication.authenticate(request)

    def test_non_string_name_fails_without_binding(self):
        """Test a token whose name is not a string is rejected."""
        token = make_token("a1", "ADMIN", name=12345)
        request = self.factory.get("/", HTTP_AUTHORIZATION=f"Bearer {token}")

        with self.assertRaisesMessage(AuthenticationFailed, "name must be a string"):
            self.authentication.authenticate(request)
        self.assertEqual(get_caller_fields(), {})

    def test_malformed_header_fails(self):
        """Test a non-Bearer Authorization header is rejected."""
        request = self.factory.get("/", HTTP_AUTHORIZATION="Basic dXNlcjpwYXNz")

        with self.assertRaisesMessage(
            AuthenticationFailed, "Invalid authorization header format"
        ):
            self.authentication.authenticate(request)

    def test_authenticate_header(self):
        """Test the WWW-Authenticate challenge."""
        self.assertEqual(
            self.authentication.authenticate_header(None), 'Bearer realm="api"'
        )
