"""Server module entry point for running with python -m server."""

import uvicorn

# Import logging configuration first to intercept all logging
from recordtree.utils.logging_config import get_logger
from recordtree.config import RECORDTREE_DATA_PATH  # noqa: I001
from server.server_config import HOST, PORT, RELOAD

logger = get_logger(__name__)

if __name__ == "__main__":
    logger.info(
        "Starting recordtree server",
        extra={
            "host": HOST,
            "port": PORT,
            "data_path": str(RECORDTREE_DATA_PATH),
        },
    )

    uvicorn.run(
        "server.main:app",
        host=HOST,
        port=PORT,
        reload=RELOAD,
        log_config=None,  # Disable uvicorn's default logging config
    )
