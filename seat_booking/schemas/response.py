"""
Generic response schemas
"""

from pydantic import BaseModel, Field
from typing import Any, Optional, Dict
from datetime import datetime, timezone


class ErrorResponse(BaseModel):
    """Error body produced by the exception handlers"""
    error: str
    code: str
    details: Dict[str, Any] = Field(default_factory=dict)


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    checks: Optional[Dict[str, bool]] = None
    version: Optional[str] = None
