"""Per-request log context: the request id and the authenticated caller.

RequestIDMiddleware opens the context and clears it once the response is
built. CallerAuthentication binds the caller after the session token
verifies, so every later event of the request names who made it. Nothing
here feeds delivery decisions; services always receive an explicit Caller.
"""

import threading

_request_context = threading.local()


def set_request_id(request_id: str) -> None:
    """Store the id correlating every log line of the current request."""
    _request_context.request_id = request_id


def get_request_id() -> str | None:
    """Return the current request id, or None outside a request."""
    return getattr(_request_context, "request_id", None)


def bind_caller(user_id: str, role: str) -> None:
    """Attach the authenticated caller to the current request's log context.

    Args:
        user_id: Opaque id of the authenticated user.
        role: Role value the user acts as.
    """
    _request_context.caller = {"user_id": user_id, "caller_role": role}


def get_caller_fields() -> dict[str, str]:
    """Return the bound caller as log fields.

    Returns:
        ``{"user_id", "caller_role"}`` for authenticated requests, otherwise
        an empty dict.
    """
    return dict(getattr(_request_context, "caller", {}))


def clear_request_context() -> None:
    """Forget the request id and caller bound for the finished request."""
    _request_context.__dict__.clear()
