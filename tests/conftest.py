"""Test configuration and fixtures."""

import os

# Cheap hashing; must be set before any Settings() is built
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")
os.environ.setdefault("ENVIRONMENT", "test")

import logfire  # noqa: E402

# Keep spans local; instrumentation calls in create_app need a configured logfire
logfire.configure(send_to_logfire=False, console=False)
