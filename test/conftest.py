"""Root test configuration.

The database engine and settings are created when ``webeze`` is first
imported, so the test environment is fixed here before anything imports it.
"""

from __future__ import annotations

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["DATABASE_AUTO_CREATE"] = "false"
os.environ["SECRET_KEY"] = "test-secret-key-for-webeze-tests"
os.environ["PASSWORD_HASH_ITERATIONS"] = "1000"
os.environ["ENABLE_FILE_LOGGING"] = "false"
os.environ["LOGFIRE_ENABLED"] = "false"
