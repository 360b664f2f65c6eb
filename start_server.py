"""Production server startup script for the campus notification service.

Entry point for starting the Django application with Gunicorn in container
deployments.
"""

import os
import sys

from gunicorn.app.wsgiapp import run


def main():
    """Start the campus notification service using Gunicorn.

    Binds to 0.0.0.0 on ``PORT`` (default 8000) with ``GUNICORN_WORKERS``
    worker processes (default 4), 2 threads each, and logs to stdout/stderr
    for container log aggregation.
    """
    sys.argv = [
        "gunicorn",
        "campus_notifications.wsgi:application",
        "--bind",
        f"0.0.0.0:{os.getenv('PORT', '8000')}",
        "--workers",
        os.getenv("GUNICORN_WORKERS", "4"),
        "--threads",
        "2",
        "--timeout",
        "60",
        "--access-logfile",
        "-",
        "--error-logfile",
        "-",
    ]
    run()


if __name__ == "__main__":
    main()
