"""Server configuration."""

from __future__ import annotations

import os

DEFAULT_HOST = "0.0.0.0"  # noqa: S104
DEFAULT_PORT = 4000

HOST = os.getenv("HOST", DEFAULT_HOST)
PORT = int(os.getenv("PORT", str(DEFAULT_PORT)))
RELOAD = os.getenv("RELOAD", "false").lower() == "true"
