"""
Shared response schemas.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Body of the `detail` field on every domain error response."""

    code: str = Field(description="Machine-readable error code, e.g. NOT_FOUND")
    message: str


class CountResponse(BaseModel):
    count: int
