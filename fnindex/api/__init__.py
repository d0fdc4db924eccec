"""
API routers for the function index service.
"""

from .health import router as health_router
from .files import router as files_router
from .functions import router as functions_router

__all__ = ["health_router", "files_router", "functions_router"]
