"""
Development settings for SourceCodeStore.
"""

import os

from .base import *  # noqa: F403, F401

DEBUG = True

ALLOWED_HOSTS = ["localhost", "127.0.0.1", "0.0.0.0"]

# Database - PostgreSQL from docker-compose, or DB_ENGINE=sqlite for SQLite
if os.environ.get("DB_ENGINE") == "sqlite":
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",  # noqa: F405
        }
    }

# Local memory cache unless Redis is configured
if not os.environ.get("REDIS_URL"):
    CACHES = {
        "default": {
            "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        }
    }

ADMIN_API_SECRET = ADMIN_API_SECRET or "dev-admin-secret"  # noqa: F405
PAYOS_CHECKSUM_KEY = PAYOS_CHECKSUM_KEY or "dev-checksum-key"  # noqa: F405

EMAIL_BACKEND = "django.core.mail.backends.console.EmailBackend"
