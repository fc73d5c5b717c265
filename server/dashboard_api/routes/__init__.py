"""API route modules."""
from .activities import router as activities_router
from .summary import router as summary_router

__all__ = [
    "activities_router",
    "summary_router",
]
