"""FastAPI application for recordtree."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recordtree.config import RECORDTREE_CORS_ORIGINS, RECORDTREE_DATA_PATH
from recordtree.service import RecordTreeService
from recordtree.storage import JsonFileStore, RecordStore
from server.routers.records import router as records_router


def create_app(store: RecordStore | None = None) -> FastAPI:
    """Build the application around ``store``, defaulting to the configured JSON file."""
    app = FastAPI(title="recordtree", description="Hierarchical record tree API")
    app.state.service = RecordTreeService(store or JsonFileStore(RECORDTREE_DATA_PATH))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=RECORDTREE_CORS_ORIGINS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept"],
    )

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(records_router)
    return app


app = create_app()
