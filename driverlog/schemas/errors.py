"""Error response envelope."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """Machine-readable error description."""

    code: str
    message: str
    details: Optional[dict[str, Any]] = None


class ErrorResponse(BaseModel):
    """Uniform error body returned by every exception handler."""

    error: ErrorDetail
    request_id: Optional[str] = None
    timestamp: datetime
