"""
Shared dependencies for API routes.
"""

import os

from fastapi import HTTPException, Request

from ..core.indexer import Indexer


def get_indexer(request: Request) -> Indexer:
    """Get the indexer built during application startup."""
    indexer = getattr(request.app.state, "indexer", None)
    if indexer is None:
        raise HTTPException(status_code=503, detail="Index is not available")
    return indexer


def resolve_request_path(indexer: Indexer, file_path: str) -> str:
    """Resolve a relative request path against the project directory."""
    if os.path.isabs(file_path):
        return file_path
    return os.path.join(indexer.project_dir, file_path)
