"""
Settings and configuration for the Katsuyou API.

Values come from environment variables with local-development defaults.
The conjugation engine itself reads no configuration.
"""

import os

# Server binding
HOST = os.environ.get("KATSUYOU_HOST", "0.0.0.0")
PORT = int(os.environ.get("KATSUYOU_PORT", "8000"))

# Logging level name for the root logger (DEBUG, INFO, WARNING, ...)
LOG_LEVEL = os.environ.get("KATSUYOU_LOG_LEVEL", "INFO").upper()

# Debug mode enables auto-reload
DEBUG = os.environ.get("KATSUYOU_DEBUG", "").lower() in ("1", "true", "yes")

# Request limits
MAX_READING_LENGTH = 50
MAX_TAGS = 50

VERSION = "0.1.0"
