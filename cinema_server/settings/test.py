"""
Test settings for cinema_server project.
"""

from .base import *  # noqa: F401,F403

SECRET_KEY = 'test-secret-key-not-for-production'
SIMPLE_JWT['SIGNING_KEY'] = SECRET_KEY

# Use SQLite for testing
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}


# Disable migrations for faster testing
class DisableMigrations:
    def __contains__(self, item):
        return True

    def __getitem__(self, item):
        return None


MIGRATION_MODULES = DisableMigrations()

# Use faster password hasher for testing
PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

# Disable logging during tests
LOGGING_CONFIG = None

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
    }
}

RENTAL_DURATION_HOURS = 24
RENTAL_CURRENCY = 'LAK'
