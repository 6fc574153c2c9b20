"""Common schemas used across multiple endpoints."""

from typing import Optional

from pydantic import BaseModel


class StatusResponse(BaseModel):
    """Outcome of a mutation; error is set only on failure."""
    success: bool
    error: Optional[str] = None
