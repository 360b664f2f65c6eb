"""Pytest configuration and shared fixtures."""

import os

import django
from django.test import Client

import pytest

# Configure Django settings for tests
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "campus_notifications.settings_test")
django.setup()

from notifications.auth import Caller  # noqa: E402
from notifications.enums import Role  # noqa: E402


@pytest.fixture
def api_client():
    """Provide Django test client."""
    return Client()


@pytest.fixture
def admin():
    """Admin caller."""
    return Caller(id="admin-1", role=Role.ADMIN, name="Administrator")


@pytest.fixture
def faculty():
    """Faculty caller."""
    return Caller(id="fac-1", role=Role.FACULTY, name="Dr. Rao")


@pytest.fixture
def student():
    """Student caller."""
    return Caller(id="u1", role=Role.STUDENT, name="Asha")


@pytest.fixture
def other_student():
    """A second student sharing the Student broadcasts."""
    return Caller(id="u2", role=Role.STUDENT, name="Ravi")
