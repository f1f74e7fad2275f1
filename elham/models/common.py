"""
Common response models.

Acknowledgement bodies shared by several routers.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field


class SuccessResponse(BaseModel):
    """Body returned by login, logout and deletes."""

    success: bool = True


class OkResponse(BaseModel):
    """Body returned by inquiry submission and category/location deletes."""

    ok: bool = True


class ErrorResponse(BaseModel):
    """Error response schema (FastAPI's HTTPException shape)."""

    detail: str = Field(description="Error message")
