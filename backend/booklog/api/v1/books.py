"""
Books API Endpoints
CRUD and reading statistics for the personal library
"""

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional
from booklog.database import get_db
from booklog.schemas.book import (
    BookCreate,
    BookUpdate,
    BookResponse,
    BookStats,
    MessageResponse
)
from booklog.services.book_service import BookService
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/books", tags=["books"])


def get_book_service(db: Session = Depends(get_db)) -> BookService:
    """Service bound to the request's database session"""
    return BookService(db)


# ============================================================================
# STATISTICS
# ============================================================================

@router.get("/stats/overview", response_model=BookStats)
def get_stats(service: BookService = Depends(get_book_service)):
    """
    Get library statistics: total, per-status counts and average rating
    """
    return service.get_stats()


# ============================================================================
# LIBRARY
# ============================================================================

@router.get("", response_model=List[BookResponse])
def list_books(service: BookService = Depends(get_book_service)):
    """
    Get all books, newest first
    """
    return service.list_books()


@router.get("/{book_id}", response_model=BookResponse)
def get_book(book_id: int, service: BookService = Depends(get_book_service)):
    """
    Get a single book
    """
    return service.get_book(book_id)


@router.post("", response_model=BookResponse, status_code=status.HTTP_201_CREATED)
def create_book(
    data: Optional[BookCreate] = Body(None),
    service: BookService = Depends(get_book_service)
):
    """
    Add a book to the library (title and author are required)
    """
    return service.create_book(data)


# ============================================================================
# UPDATE & DELETE
# ============================================================================

@router.put("/{book_id}", response_model=BookResponse)
def update_book(
    book_id: int,
    data: BookUpdate,
    service: BookService = Depends(get_book_service)
):
    """
    Replace all editable fields of a book
    """
    return service.update_book(book_id, data)


@router.delete("/{book_id}", response_model=MessageResponse)
def delete_book(book_id: int, service: BookService = Depends(get_book_service)):
    """
    Delete book from library
    """
    service.delete_book(book_id)
    return {"message": "Book deleted successfully"}
