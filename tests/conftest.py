"""Test configuration and fixtures."""

import os

import logfire

# Settings are read from the environment when a container resolves them
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("JWT__SECRET_KEY", "test-secret-key-that-is-long-enough-for-hs256")
os.environ.setdefault("JWT__ISSUER", "blog-api")
os.environ.setdefault("JWT__AUDIENCE", "blog-clients")
os.environ.setdefault("AUTH__PASSWORD_HASH_ROUNDS", "4")

logfire.configure(send_to_logfire=False, console=False)
