"""Pydantic models for the record tree API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DeleteRequest(BaseModel):
    """Request model for the /api/delete endpoint.

    Attributes
    ----------
    path : list[str] | None
        Address of the record to delete, as segments or a dot-joined string.
        Integer segments are converted to their decimal string form.

    """

    model_config = ConfigDict(extra="allow")

    path: list[str] | str | None = Field(default=None, description="Address of the record to delete")

    @field_validator("path", mode="before")
    @classmethod
    def normalize_path(cls, v: Any) -> Any:
        """Render integer segments as strings."""
        if isinstance(v, (list, tuple)):
            return [str(segment) for segment in v]
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class DeleteSuccessResponse(BaseModel):
    """Success response model for the /api/delete endpoint.

    Attributes
    ----------
    success : bool
        Always ``True``.
    data : list[dict]
        The saved tree, re-addressed.

    """

    success: bool = Field(default=True, description="Whether the delete was saved")
    data: list[dict[str, Any]] = Field(..., description="Re-addressed record tree")


class ErrorResponse(BaseModel):
    """Error response model for the record tree API.

    Attributes
    ----------
    success : bool
        Always ``False``.
    error : str
        Error message describing what went wrong.

    """

    success: bool = Field(default=False, description="Whether the request succeeded")
    error: str = Field(..., description="Error message")

