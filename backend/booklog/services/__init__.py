"""
Services Package
Business logic over the books table
"""

from .book_service import BookService

__all__ = [
    'BookService',
]
