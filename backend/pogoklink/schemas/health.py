"""
Health check response schemas.
"""

from pydantic import BaseModel
from typing import Dict, Any


class HealthResponse(BaseModel):
    """Health check response: overall status, per-check results and calendar counters."""
    status: str
    uptime: str
    checks: Dict[str, Any] = {}
    details: Dict[str, Any] = {}
