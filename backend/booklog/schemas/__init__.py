"""Pydantic Schemas Package"""

from booklog.schemas.book import (
    BookFields,
    BookCreate,
    BookUpdate,
    BookResponse,
    MessageResponse,
    BookStats
)

__all__ = [
    "BookFields",
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    "MessageResponse",
    "BookStats",
]
