"""Constants used throughout the campus notification service."""

# Reserved recipient key addressing every user of a role
BROADCAST = "BROADCAST"

# HTTP Headers
REQUEST_ID_HEADER = "X-Request-ID"
PROCESS_TIME_HEADER = "X-Process-Time"

# Session-authenticated routes; responses under it are per-user
API_PATH_PREFIX = "/api/"

# Display name cached for admin senders whose token carries no name
DEFAULT_ADMIN_NAME = "Administrator"

# Column widths for user ids (sender, recipient, reader) and sender names
MAX_USER_ID_LENGTH = 64
MAX_SENDER_NAME_LENGTH = 255

# Security Headers
SECURITY_HEADERS = {
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
}
