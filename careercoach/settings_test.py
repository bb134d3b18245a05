"""
Test settings: in-memory SQLite, local-memory cache, no SSL redirect.
Used by pytest.ini and `manage.py test --settings=careercoach.settings_test`.
"""
import os

os.environ.setdefault("DJANGO_SECRET_KEY", "unit-test-secret-key")
os.environ.setdefault("CLERK_SECRET_KEY", "sk_test_unit")

from .settings import *  # noqa: E402,F401,F403

DEBUG = False
SECURE_SSL_REDIRECT = False
SESSION_COOKIE_SECURE = False
CSRF_COOKIE_SECURE = False

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "careercoach-tests",
    }
}

STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage"},
}

CLERK_API_URL = "https://api.clerk.test"
CLERK_JWKS_URL = "https://clerk.test/.well-known/jwks.json"
OPENAI_API_KEY = "sk-unit-test"

COACH_PROFILE_UPDATE_HOOK = ""
COACH_VERBOSE_UPDATE_LOGGING = False
