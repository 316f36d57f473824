"""Local configuration for recordtree."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_DATA_FILE = "example-data.json"
DEFAULT_RESERVED_ID_PREFIX = "__section__"
DEFAULT_CORS_ORIGINS = "http://localhost:3000"
DEFAULT_CLIENT_TIMEOUT_S = 10.0
DEFAULT_CLIENT_MAX_RETRIES = 2
DEFAULT_CLIENT_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "recordtree/0.1"
DEFAULT_LOG_LEVEL = "INFO"

# JSON document holding the persisted tree.
RECORDTREE_DATA_PATH = Path(os.getenv("RECORDTREE_DATA_PATH", DEFAULT_DATA_FILE)).expanduser().resolve()
# IDs with this prefix mark synthetic section-header rows.
RECORDTREE_RESERVED_ID_PREFIX = os.getenv("RECORDTREE_RESERVED_ID_PREFIX", DEFAULT_RESERVED_ID_PREFIX)
RECORDTREE_CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("RECORDTREE_CORS_ORIGINS", DEFAULT_CORS_ORIGINS).split(",")
    if origin.strip()
]
RECORDTREE_CLIENT_TIMEOUT_S = float(os.getenv("RECORDTREE_CLIENT_TIMEOUT_S", str(DEFAULT_CLIENT_TIMEOUT_S)))
RECORDTREE_CLIENT_MAX_RETRIES = int(os.getenv("RECORDTREE_CLIENT_MAX_RETRIES", str(DEFAULT_CLIENT_MAX_RETRIES)))
RECORDTREE_CLIENT_BACKOFF_S = float(os.getenv("RECORDTREE_CLIENT_BACKOFF_S", str(DEFAULT_CLIENT_BACKOFF_S)))
RECORDTREE_USER_AGENT = os.getenv("RECORDTREE_USER_AGENT", DEFAULT_USER_AGENT)
RECORDTREE_LOG_LEVEL = os.getenv("RECORDTREE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
