"""Who-can-message-whom policy.

The messaging matrix is a lookup table keyed by (sender role, target role).
Pairs absent from the table are denied.
"""

from enum import Enum
from typing import NamedTuple

from notifications.enums import Role
from notifications.exceptions.delivery_exceptions import ForbiddenError


class Targeting(str, Enum):
    """How a sender may address a target role."""

    BROADCAST_ONLY = "broadcast_only"
    INDIVIDUAL_ONLY = "individual_only"
    EITHER = "either"
    NONE = "none"

    def permits(self, broadcast: bool) -> bool:
        """Whether a send with the given broadcast flag is permitted."""
        if self is Targeting.EITHER:
            return True
        if self is Targeting.BROADCAST_ONLY:
            return broadcast
        if self is Targeting.INDIVIDUAL_ONLY:
            return not broadcast
        return False


class MessagingRule(NamedTuple):
    """Targeting allowed for one (sender, target) pair and its denial message."""

    targeting: Targeting
    violation_message: str


STUDENT_RULE_MESSAGE = "Students can only send notifications to specific faculty members."

MESSAGING_RULES: dict[tuple[Role, Role], MessagingRule] = {
    (Role.ADMIN, Role.STUDENT): MessagingRule(
        Targeting.BROADCAST_ONLY,
        "Admins can only send broadcast notifications to all students.",
    ),
    (Role.ADMIN, Role.FACULTY): MessagingRule(Targeting.EITHER, ""),
    (Role.FACULTY, Role.STUDENT): MessagingRule(Targeting.EITHER, ""),
    (Role.FACULTY, Role.ADMIN): MessagingRule(
        Targeting.BROADCAST_ONLY,
        "Faculty can only send general notifications to the Admin.",
    ),
    (Role.FACULTY, Role.FACULTY): MessagingRule(
        Targeting.NONE,
        "Faculty cannot send notifications to other faculty members.",
    ),
    (Role.STUDENT, Role.FACULTY): MessagingRule(
        Targeting.INDIVIDUAL_ONLY, STUDENT_RULE_MESSAGE
    ),
    (Role.STUDENT, Role.ADMIN): MessagingRule(Targeting.NONE, STUDENT_RULE_MESSAGE),
    (Role.STUDENT, Role.STUDENT): MessagingRule(Targeting.NONE, STUDENT_RULE_MESSAGE),
}


def resolve_rule(sender_role: Role, target_role: Role) -> MessagingRule:
    """Return the messaging rule for a pair, denying unlisted pairs."""
    rule = MESSAGING_RULES.get((sender_role, target_role))
    if rule is None:
        return MessagingRule(
            Targeting.NONE,
            f"{sender_role.value} users cannot send notifications "
            f"to {target_role.value} users.",
        )
    return rule


def is_send_allowed(sender_role: Role, target_role: Role, broadcast: bool) -> bool:
    """Whether sender_role may message target_role with this targeting."""
    return resolve_rule(sender_role, target_role).targeting.permits(broadcast)


def check_send_allowed(sender_role: Role, target_role: Role, broadcast: bool) -> None:
    """Raise ForbiddenError naming the violated rule if the send is denied.

    Args:
        sender_role: Role of the caller sending the notification.
        target_role: Role the notification is addressed to.
        broadcast: Whether the notification addresses every user of the role.

    Raises:
        ForbiddenError: If the matrix does not permit this send.
    """
    rule = resolve_rule(sender_role, target_role)
    if not rule.targeting.permits(broadcast):
        raise ForbiddenError(rule.violation_message)
