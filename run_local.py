#!/usr/bin/env python
"""Script to run the Django development server."""

import os
import sys

from django.core.management import execute_from_command_line


def main():
    """Apply migrations, then run the Django development server.

    Extra command-line arguments (for example ``0.0.0.0:8001``) are passed
    through to ``runserver``.
    """
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "campus_notifications.settings")
    os.environ.setdefault("DJANGO_DEBUG", "true")
    execute_from_command_line([sys.argv[0], "migrate", "--noinput"])
    execute_from_command_line([sys.argv[0], "runserver", *sys.argv[1:]])


if __name__ == "__main__":
    main()
