"""Settings for the test suite.

Provides the values ``config.settings`` refuses to default (``SECRET_KEY``)
and pins the database to an in-memory SQLite instance.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-only-secret-key-do-not-use-in-production")
os.environ.setdefault("DATABASE_URL", "sqlite://:memory:")

from config.settings import *  # noqa: E402,F401,F403

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]
