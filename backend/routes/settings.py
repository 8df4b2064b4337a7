"""Health check endpoint."""

from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends

from .deps import get_settings

router = APIRouter()


@router.get("/health")
async def health(settings: dict[str, Any] = Depends(get_settings)):
    """Health check for deployment monitoring."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings["environment"],
    }
