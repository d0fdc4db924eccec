"""
Health check API endpoints.
"""

import time
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from .. import __version__
from ..core.indexer import Indexer
from ..models.file_index import IndexStats
from .deps import get_indexer

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str
    timestamp: str
    uptime: float
    version: str
    checks: Dict[str, Any]
    indexed_files: int = 0


class ReadinessResponse(BaseModel):
    """Readiness response model."""
    status: str
    timestamp: str
    project_dir: str
    index: IndexStats


# Track application start time
start_time = time.time()


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


@router.get("/", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Basic health check endpoint."""
    indexer = getattr(request.app.state, "indexer", None)
    
    return HealthResponse(
        status="healthy",
        timestamp=_timestamp(),
        uptime=time.time() - start_time,
        version=__version__,
        checks={
            "api": "healthy",
            "index": "loaded" if indexer is not None else "missing"
        },
        indexed_files=len(indexer.catalog) if indexer is not None else 0
    )


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(indexer: Indexer = Depends(get_indexer)) -> ReadinessResponse:
    """Ready once the project has been indexed."""
    return ReadinessResponse(
        status="ready",
        timestamp=_timestamp(),
        project_dir=indexer.project_dir,
        index=indexer.stats()
    )


@router.get("/live")
async def liveness_check() -> Dict[str, Any]:
    """Liveness check."""
    return {
        "status": "alive",
        "timestamp": _timestamp(),
        "uptime": time.time() - start_time
    }
