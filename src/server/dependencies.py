"""Request dependencies."""

from __future__ import annotations

from fastapi import Request

from recordtree.service import RecordTreeService


def get_service(request: Request) -> RecordTreeService:
    """Return the service attached to the running application."""
    return request.app.state.service
