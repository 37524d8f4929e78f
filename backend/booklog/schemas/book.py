"""
Book Pydantic Schemas
Request and response records for the books API
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime

from booklog.models.book import BookStatus


# ============================================================================
# Book Creation and Update Schemas
# ============================================================================

class BookFields(BaseModel):
    """Mutable book fields; empty strings are treated as absent"""

    title: Optional[str] = None
    author: Optional[str] = None
    isbn: Optional[str] = None
    genre: Optional[str] = None
    year_published: Optional[int] = None
    status: Optional[str] = None
    rating: Optional[int] = None
    notes: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def empty_to_none(cls, value):
        if isinstance(value, str) and value == "":
            return None
        return value


class BookCreate(BookFields):
    """Schema for creating a book; title and author are checked by the service"""


class BookUpdate(BookFields):
    """Schema for a full replacement of a book's mutable fields"""

    status: Optional[str] = Field(BookStatus.TO_READ.value, description="read, reading or to-read")


# ============================================================================
# Book Response Schemas
# ============================================================================

class BookResponse(BaseModel):
    """Schema for book response"""

    id: int
    title: str
    author: str
    isbn: Optional[str] = None
    genre: Optional[str] = None
    year_published: Optional[int] = None
    status: str = BookStatus.TO_READ.value
    rating: Optional[int] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class MessageResponse(BaseModel):
    """Schema for confirmation messages"""

    message: str


# ============================================================================
# Library Stats Schema
# ============================================================================

class BookStats(BaseModel):
    """Schema for reading statistics over the whole library"""

    total_books: int = 0
    books_read: int = 0
    books_reading: int = 0
    books_to_read: int = 0
    average_rating: Optional[float] = None
