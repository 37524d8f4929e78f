"""
API v1 Router
Combines all v1 endpoints
"""

from fastapi import APIRouter
from booklog.api.v1 import books, system

api_router = APIRouter()

# Include all routers
api_router.include_router(books.router)
api_router.include_router(system.router)
