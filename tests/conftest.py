"""Test configuration and fixtures for the Shopfront API."""

import os
from pathlib import Path

# Must run before anything imports the runtime context
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault(
    "APP_CONFIG_FILE", str(Path(__file__).parent / "config.test.yaml")
)

from tests.fixtures import *  # noqa: E402,F401,F403
