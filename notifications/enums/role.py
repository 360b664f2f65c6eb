"""Campus role enumeration shared by senders, recipients and callers."""

from enum import Enum


class Role(str, Enum):
    """Campus user roles.

    Values match the stored representation of sender and recipient roles.
    Session tokens carry upper-case role claims (``ADMIN``), so lookups
    through :meth:`parse` are case-insensitive.
    """

    ADMIN = "Admin"
    FACULTY = "Faculty"
    STUDENT = "Student"

    @classmethod
    def parse(cls, value: "str | Role") -> "Role":
        """Resolve a role from any casing of its value.

        Args:
            value: Role value or member, e.g. ``"Student"`` or ``"STUDENT"``.

        Returns:
            The matching Role member.

        Raises:
            ValueError: If the value names no known role.
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for role in cls:
            if role.value.lower() == normalized:
                return role
        raise ValueError(f"Unknown role: {value!r}")
