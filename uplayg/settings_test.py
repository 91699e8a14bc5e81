"""Test-specific Django settings."""

from .settings import *

# Use SQLite for faster tests
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# Disable debug for tests
DEBUG = False

ALLOWED_HOSTS = ["testserver", "localhost"]

# Use local cache for tests
CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
    }
}

# Keep uploaded objects in memory
PUBLIC_MEDIA_BASE_URL = "http://testserver/media/"
STORAGES = {
    "default": {
        "BACKEND": "django.core.files.storage.InMemoryStorage",
        "OPTIONS": {"base_url": PUBLIC_MEDIA_BASE_URL},
    },
    "staticfiles": {
        "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
    },
}

# Store multi-file uploads sequentially
UPLOAD_MAX_WORKERS = 1

# Tokens in tests are signed locally
AUTH_JWT_SECRET = "test-secret-key-with-at-least-32-bytes!!"

RATE_LIMIT_ENABLED = False

# Suppress logs during tests (only show CRITICAL errors)
STRUCTLOG_ENABLED = False
LOGGING_CONFIG = "logging.config.dictConfig"
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "null": {
            "class": "logging.NullHandler",
        },
    },
    "root": {
        "handlers": ["null"],
        "level": "CRITICAL",
    },
    "loggers": {
        "django": {
            "handlers": ["null"],
            "level": "CRITICAL",
            "propagate": False,
        },
        "catalog": {
            "handlers": ["null"],
            "level": "CRITICAL",
            "propagate": False,
        },
    },
}

# Test-specific settings
TEST_MODE = True
