"""Record tree endpoints for the API."""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from recordtree.exceptions import AddressRequiredError, StorageWriteError
from recordtree.schemas import dump_tree
from recordtree.service import RecordTreeService
from server.dependencies import get_service
from server.models import DeleteRequest, DeleteSuccessResponse, ErrorResponse

router = APIRouter()

SAVE_FAILED_MESSAGE = "failed to save data"

DELETE_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_200_OK: {"model": DeleteSuccessResponse, "description": "Record deleted and tree saved"},
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "No address supplied"},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse, "description": "Tree could not be saved"},
}


@router.get("/api/data")
async def api_data(service: RecordTreeService = Depends(get_service)) -> JSONResponse:
    """Return the whole record tree with addresses assigned.

    **Returns**

    - **JSONResponse**: JSON array of records; each carries its ``__path``

    """
    tree = await service.read_tree()
    return JSONResponse(content=dump_tree(tree))


@router.post("/api/delete", responses=DELETE_RESPONSES)
async def api_delete(
    delete_request: Optional[DeleteRequest] = None,  # noqa: FA100 (pydantic)
    service: RecordTreeService = Depends(get_service),
) -> JSONResponse:
    """Delete one record, with its subtree, by address.

    **Parameters**

    - **delete_request** (`DeleteRequest`): body carrying the ``path`` of the record

    **Returns**

    - **JSONResponse**: the re-addressed tree on success, or an error payload with
      **400** when no path is given and **500** when the tree could not be saved

    """
    address = delete_request.path if delete_request else None
    try:
        tree = await service.delete_record(address)
    except AddressRequiredError as exc:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(error=str(exc)).model_dump(),
        )
    except StorageWriteError:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=SAVE_FAILED_MESSAGE).model_dump(),
        )
    return JSONResponse(content=DeleteSuccessResponse(data=dump_tree(tree)).model_dump())
