"""
Test settings for GroupLicenseService.
"""

from .base import *  # noqa: F403, F401

DEBUG = False

# Use in-memory SQLite for faster tests
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# Password hashers for faster tests
PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

LICENSE_GROUP_DEFAULT_CARDINALITY = "multi"

# Disable logging configuration during tests
LOGGING_CONFIG = None
