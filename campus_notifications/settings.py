"""Django settings for the campus notification service.

Every deployment-specific value is read from the environment. PostgreSQL is
used when ``POSTGRES_HOST`` is set; otherwise a local SQLite file backs the
service for development.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "django-insecure-local-development-key")

DEBUG = _env_bool("DJANGO_DEBUG", default=False)

ALLOWED_HOSTS = [
    host.strip()
    for host in os.getenv("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")
    if host.strip()
]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "notifications",
]

MIDDLEWARE = [
    "notifications.middleware.RequestIDMiddleware",
    "notifications.middleware.ProcessTimeMiddleware",
    "notifications.middleware.SecurityHeadersMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "campus_notifications.urls"

WSGI_APPLICATION = "campus_notifications.wsgi.application"

# Bound on every store call so an unreachable database fails fast
NOTIFICATION_STORE_TIMEOUT_SECONDS = int(
    os.getenv("NOTIFICATION_STORE_TIMEOUT_SECONDS", "5")
)

# Requests slower than this are logged by ProcessTimeMiddleware
SLOW_REQUEST_THRESHOLD_SECONDS = float(
    os.getenv("SLOW_REQUEST_THRESHOLD_SECONDS", "1.0")
)

if os.getenv("POSTGRES_HOST"):
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.postgresql",
            "HOST": os.getenv("POSTGRES_HOST"),
            "PORT": os.getenv("POSTGRES_PORT", "5432"),
            "NAME": os.getenv("POSTGRES_DB", "campus_notifications"),
            "USER": os.getenv("POSTGRES_USER", "postgres"),
            "PASSWORD": os.getenv("POSTGRES_PASSWORD", ""),
            "OPTIONS": {
                "connect_timeout": NOTIFICATION_STORE_TIMEOUT_SECONDS,
                "options": (
                    f"-c statement_timeout={NOTIFICATION_STORE_TIMEOUT_SECONDS * 1000}"
                ),
            },
        }
    }
else:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
            "OPTIONS": {"timeout": NOTIFICATION_STORE_TIMEOUT_SECONDS},
        }
    }

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Session tokens are issued by the campus identity service
JWT_SECRET = os.getenv("JWT_SECRET", SECRET_KEY)
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
AUTH_COOKIE_NAME = os.getenv("AUTH_COOKIE_NAME", "token")

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "notifications.auth.CallerAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.IsAuthenticated",
    ],
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
    ],
    "UNAUTHENTICATED_USER": None,
    "EXCEPTION_HANDLER": "notifications.exceptions.custom_exception_handler",
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "filters": {
        "request_id": {
            "()": "notifications.logging.RequestIDFilter",
        },
    },
    "formatters": {
        "standard": {
            "format": (
                "%(asctime)s [%(levelname)s] [%(request_id)s] [%(user_id)s] "
                "%(name)s: %(message)s"
            ),
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "filters": ["request_id"],
        },
    },
    "root": {
        "handlers": ["console"],
        "level": os.getenv("LOG_LEVEL", "INFO"),
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": "WARNING",
            "propagate": False,
        },
    },
}

TEST_MODE = False
