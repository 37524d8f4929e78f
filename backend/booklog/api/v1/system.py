"""
System API Endpoints
Health checks
"""

from fastapi import APIRouter
from booklog.config import get_settings

router = APIRouter(tags=["system"])
settings = get_settings()


@router.get("/health")
def health_check():
    """
    Simple health check endpoint

    Returns:
        Health status
    """
    return {
        "status": "OK",
        "message": "Book Library API is running",
        "version": settings.APP_VERSION
    }
