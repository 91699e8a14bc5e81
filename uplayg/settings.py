"""Django settings for the UPlayG API.

All deployment-specific values are read from environment variables so the same
image can run locally, in CI and in production.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name: str, default: bool = False) -> bool:
    return os.getenv(name, str(default)).lower() in {"1", "true", "yes", "on"}


def _env_list(name: str, default: str = "") -> list[str]:
    items = os.getenv(name, default).split(",")
    return [item.strip() for item in items if item.strip()]


SECRET_KEY = os.getenv("SECRET_KEY", "django-insecure-uplayg-local-development-key")

DEBUG = _env_bool("DEBUG", False)

ALLOWED_HOSTS = _env_list("ALLOWED_HOSTS", "localhost,127.0.0.1")

ENVIRONMENT = os.getenv("ENVIRONMENT", "development")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "django.contrib.staticfiles",
    "corsheaders",
    "rest_framework",
    "catalog",
]

MIDDLEWARE = [
    "corsheaders.middleware.CorsMiddleware",
    "catalog.middleware.RequestIDMiddleware",
    "catalog.middleware.RequestLoggingMiddleware",
    "django.middleware.common.CommonMiddleware",
    "catalog.middleware.SecurityHeadersMiddleware",
    "catalog.middleware.RateLimitMiddleware",
    "catalog.middleware.SecurityContextMiddleware",
]

ROOT_URLCONF = "uplayg.urls"

APPEND_SLASH = False

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
            ],
        },
    },
]

WSGI_APPLICATION = "uplayg.wsgi.application"

# Database
# PostgreSQL when DB_NAME is provided, a local SQLite file otherwise.
if os.getenv("DB_NAME"):
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": os.getenv("DB_NAME"),
            "USER": os.getenv("DB_USER", "uplayg"),
            "PASSWORD": os.getenv("DB_PASSWORD", ""),
            "HOST": os.getenv("DB_HOST", "localhost"),
            "PORT": os.getenv("DB_PORT", "5432"),
            "CONN_MAX_AGE": int(os.getenv("DB_CONN_MAX_AGE", "60")),
        }
    }
else:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
        }
    }

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "uplayg-api",
    }
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

STATIC_URL = "static/"

# Object storage
MEDIA_ROOT = os.getenv("MEDIA_ROOT", str(BASE_DIR / "media"))
MEDIA_URL = "/media/"
PUBLIC_MEDIA_BASE_URL = os.getenv(
    "PUBLIC_MEDIA_BASE_URL", "http://localhost:8000/media/"
)

STORAGES = {
    "default": {
        "BACKEND": "django.core.files.storage.FileSystemStorage",
        "OPTIONS": {"location": MEDIA_ROOT, "base_url": PUBLIC_MEDIA_BASE_URL},
    },
    "staticfiles": {
        "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
    },
}

# Uploads are buffered in memory for the duration of the request.
UPLOAD_MAX_FILE_SIZE = int(os.getenv("UPLOAD_MAX_FILE_SIZE", str(5 * 1024 * 1024)))
UPLOAD_MAX_FILES = int(os.getenv("UPLOAD_MAX_FILES", "5"))
UPLOAD_MAX_WORKERS = int(os.getenv("UPLOAD_MAX_WORKERS", "4"))
FILE_UPLOAD_MAX_MEMORY_SIZE = UPLOAD_MAX_FILE_SIZE + 1024
DATA_UPLOAD_MAX_MEMORY_SIZE = 10 * 1024 * 1024

# Django REST Framework
REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
        "rest_framework.parsers.FormParser",
        "rest_framework.parsers.MultiPartParser",
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
    "EXCEPTION_HANDLER": "catalog.exceptions.handlers.custom_exception_handler",
}

# CORS
CORS_ALLOWED_ORIGINS = _env_list(
    "CORS_ALLOWED_ORIGINS",
    "https://uplayg-1.web.app,https://uplayg-1.firebaseapp.com,"
    "https://uplayg.web.app,https://uplayg.firebaseapp.com,"
    "http://localhost:3000,http://localhost:5173",
)
CORS_ALLOW_CREDENTIALS = True

# ID token verification
FIREBASE_PROJECT_ID = os.getenv("FIREBASE_PROJECT_ID", "uplayg-1")
AUTH_JWKS_URL = os.getenv(
    "AUTH_JWKS_URL",
    "https://www.googleapis.com/service_accounts/v1/jwk/"
    "securetoken@system.gserviceaccount.com",
)
AUTH_JWT_ISSUER = os.getenv(
    "AUTH_JWT_ISSUER", f"https://securetoken.google.com/{FIREBASE_PROJECT_ID}"
)
AUTH_JWT_AUDIENCE = os.getenv("AUTH_JWT_AUDIENCE", FIREBASE_PROJECT_ID)
# When set, tokens are verified locally with HS256 instead of the JWKS keys.
AUTH_JWT_SECRET = os.getenv("AUTH_JWT_SECRET", "")
AUTH_ADMIN_CACHE_TTL = int(os.getenv("AUTH_ADMIN_CACHE_TTL", "60"))

# Rate limiting (first matching path prefix wins)
RATE_LIMIT_ENABLED = _env_bool("RATE_LIMIT_ENABLED", True)
RATE_LIMIT_RULES = [
    {"prefix": "/api/uploads", "requests": 50, "window": 60 * 60},
    {"prefix": "/", "requests": 300, "window": 15 * 60},
]

# Logging is configured by catalog.logging.setup_logging() when the app loads.
STRUCTLOG_ENABLED = _env_bool("STRUCTLOG_ENABLED", True)
LOGGING_CONFIG = None

TEST_MODE = False
