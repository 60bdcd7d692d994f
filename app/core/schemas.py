"""Core schema definitions for standardized API responses.

This module provides base schemas for the response envelope shared by
every dashboard endpoint.
"""

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


def total_pages(total_items: int, items_per_page: int) -> int:
    """Number of pages needed for ``total_items``; zero items means zero pages."""
    if items_per_page < 1:
        return 0
    return (total_items + items_per_page - 1) // items_per_page


class CamelModel(BaseModel):
    """Base for payload models: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(BaseModel, Generic[T]):
    """Standard API response envelope.

    Example success response:
        {
            "status": "success",
            "message": "Counts retrieved successfully",
            "data": { ... }
        }

    Errors are rendered by the exception handlers in ``app.core.exceptions``
    as ``{"status": "error", "message": ..., "error": ...}``.
    """

    status: Literal["success", "error"] = "success"
    message: str
    data: T


class ErrorResponse(BaseModel):
    """Standard error response format."""

    status: Literal["error"] = "error"
    message: str = Field(..., description="Human-readable error message")
    error: str | None = Field(None, description="Underlying error text")


class PaginationMeta(CamelModel):
    """Pagination metadata for list responses."""

    current_page: int = Field(..., ge=1, description="Current page number")
    total_pages: int = Field(..., ge=0, description="Total number of pages")
    total_items: int = Field(..., ge=0, description="Total number of items")
    items_per_page: int = Field(..., ge=1, description="Items per page")

    @classmethod
    def from_query(cls, total: int, page: int, limit: int) -> "PaginationMeta":
        """Create pagination meta from query parameters.

        Args:
            total: Total number of items.
            page: Current page number (1-indexed).
            limit: Items per page.

        Returns:
            PaginationMeta instance.
        """
        return cls(
            current_page=page,
            total_pages=total_pages(total, limit),
            total_items=total,
            items_per_page=limit,
        )


def success_response(message: str, data: T) -> ApiResponse[T]:
    """Create a successful API response."""
    return ApiResponse(status="success", message=message, data=data)
