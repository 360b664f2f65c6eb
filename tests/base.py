"""Base test classes for different test types."""

from django.test import Client, TestCase

from notifications.auth import Caller
from notifications.enums import Role
from tests.auth_tokens import auth_header


class BaseComponentTest(TestCase):
    """Base class for endpoint tests.

    Requests go through the full Django stack with real session tokens and
    the SQLite in-memory database.
    """

    def setUp(self):
        """Set up test client and callers."""
        self.client = Client()
        self.admin = Caller(id="admin-1", role=Role.ADMIN, name="Administrator")
        self.faculty = Caller(id="fac-1", role=Role.FACULTY, name="Dr. Rao")
        self.student = Caller(id="stu-1", role=Role.STUDENT, name="Asha")

    def auth(self, caller):
        """Return Client kwargs authenticating as caller."""
        return auth_header(caller.id, caller.role.value.upper(), name=caller.name)

    def put_json(self, url, data, caller):
        """PUT a JSON body as caller."""
        return self.client.put(
            url, data=data, content_type="application/json", **self.auth(caller)
        )

    def post_json(self, url, data, caller):
        """POST a JSON body as caller."""
        return self.client.post(
            url, data=data, content_type="application/json", **self.auth(caller)
        )
