"""Tests for request schemas and request parsing."""

import pytest

from notifications.constants import BROADCAST, MAX_USER_ID_LENGTH
from notifications.enums import Role, Severity
from notifications.exceptions import InvalidRequestError
from notifications.schemas import (
    MarkAllReadRequest,
    SendNotificationRequest,
    parse_request,
)


def payload(**overrides):
    """Build a valid send payload."""
    body = {
        "title": "Exam schedule",
        "message": "Mid-terms start Monday.",
        "recipient": {"role": "Student", "userIds": [BROADCAST]},
    }
    body.update(overrides)
    return body


class TestSendNotificationRequest:
    """Test suite for SendNotificationRequest."""

    def test_valid_broadcast_payload(self):
        """Test a broadcast payload parses with defaults."""
        request = parse_request(SendNotificationRequest, payload())

        assert request.recipient.role is Role.STUDENT
        assert request.recipient.is_broadcast
        assert request.severity is Severity.INFO
        assert request.action_link is None

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Warning", Severity.WARNING),
            ("success", Severity.SUCCESS),
            ("", Severity.INFO),
            ("   ", Severity.INFO),
            (None, Severity.INFO),
        ],
    )
    def test_type_is_case_insensitive(self, raw, expected):
        """Test the wire type field maps onto Severity."""
        request = parse_request(SendNotificationRequest, payload(type=raw))

        assert request.severity is expected

    def test_unknown_type_is_invalid(self):
        """Test unknown severities are rejected."""
        with pytest.raises(InvalidRequestError, match="type"):
            parse_request(SendNotificationRequest, payload(type="Critical"))

    def test_role_is_case_insensitive(self):
        """Test recipient role accepts upper-case names."""
        request = parse_request(
            SendNotificationRequest,
            payload(recipient={"role": "FACULTY", "userIds": ["f1"]}),
        )

        assert request.recipient.role is Role.FACULTY

    def test_unknown_role_is_invalid(self):
        """Test unknown recipient roles are rejected."""
        with pytest.raises(InvalidRequestError, match="recipient.role"):
            parse_request(
                SendNotificationRequest,
                payload(recipient={"role": "Parent", "userIds": ["p1"]}),
            )

    @pytest.mark.parametrize("missing", ["title", "message", "recipient"])
    def test_missing_required_field_is_invalid(self, missing):
        """Test each required field is enforced."""
        body = payload()
        del body[missing]

        with pytest.raises(InvalidRequestError) as exc_info:
            parse_request(SendNotificationRequest, body)

        assert missing in exc_info.value.message
        assert exc_info.value.errors

    def test_blank_title_is_invalid(self):
        """Test whitespace-only titles are rejected after stripping."""
        with pytest.raises(InvalidRequestError, match="title"):
            parse_request(SendNotificationRequest, payload(title="   "))

    def test_empty_user_ids_is_invalid(self):
        """Test a recipient list cannot be empty."""
        with pytest.raises(InvalidRequestError, match="recipient.userIds"):
            parse_request(
                SendNotificationRequest,
                payload(recipient={"role": "Student", "userIds": []}),
            )

    def test_blank_user_id_is_invalid(self):
        """Test blank recipient ids are rejected."""
        with pytest.raises(InvalidRequestError):
            parse_request(
                SendNotificationRequest,
                payload(recipient={"role": "Student", "userIds": ["u1", " "]}),
            )

    def test_user_id_longer_than_column_is_invalid(self):
        """Test recipient ids wider than the stored user id are rejected."""
        too_long = "s" * (MAX_USER_ID_LENGTH + 1)

        with pytest.raises(InvalidRequestError, match="recipient.userIds"):
            parse_request(
                SendNotificationRequest,
                payload(recipient={"role": "Student", "userIds": ["u1", too_long]}),
            )

    def test_user_id_at_column_width_is_accepted(self):
        """Test a recipient id exactly as wide as the column is kept."""
        widest = "s" * MAX_USER_ID_LENGTH

        request = parse_request(
            SendNotificationRequest,
            payload(recipient={"role": "Student", "userIds": [widest]}),
        )

        assert request.recipient.target_ids == [widest]

    def test_broadcast_mixed_with_ids_is_invalid(self):
        """Test BROADCAST cannot be combined with concrete ids."""
        with pytest.raises(InvalidRequestError, match="recipient"):
            parse_request(
                SendNotificationRequest,
                payload(recipient={"role": "Student", "userIds": [BROADCAST, "u1"]}),
            )

    def test_target_ids_are_deduplicated_in_order(self):
        """Test duplicate recipient ids collapse, keeping first occurrence."""
        request = parse_request(
            SendNotificationRequest,
            payload(recipient={"role": "Student", "userIds": ["u2", "u1", "u2"]}),
        )

        assert not request.recipient.is_broadcast
        assert request.recipient.target_ids == ["u2", "u1"]

    def test_optional_fields_are_carried(self):
        """Test action link and metadata are accepted in camelCase."""
        request = parse_request(
            SendNotificationRequest,
            payload(actionLink="/grades", metadata={"course": "CS101"}),
        )

        assert request.action_link == "/grades"
        assert request.metadata == {"course": "CS101"}

    def test_non_object_body_is_invalid(self):
        """Test a JSON list body is rejected."""
        with pytest.raises(InvalidRequestError):
            parse_request(SendNotificationRequest, ["not", "an", "object"])


class TestMarkAllReadRequest:
    """Test suite for MarkAllReadRequest."""

    def test_empty_body(self):
        """Test role is optional."""
        assert parse_request(MarkAllReadRequest, {}).role is None

    def test_role_any_casing(self):
        """Test role accepts any casing."""
        assert parse_request(MarkAllReadRequest, {"role": "student"}).role is Role.STUDENT

    def test_unknown_role_is_invalid(self):
        """Test unknown roles are rejected."""
        with pytest.raises(InvalidRequestError, match="role"):
            parse_request(MarkAllReadRequest, {"role": "Janitor"})
