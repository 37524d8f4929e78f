"""Database Models Package"""

from booklog.models.book import Book, BookStatus

__all__ = ["Book", "BookStatus"]
