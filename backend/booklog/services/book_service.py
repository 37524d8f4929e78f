"""
Book Service
CRUD and statistics operations over the books table.
Each operation maps to one storage statement (plus a re-read after writes).
"""

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import case, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from booklog.core.exceptions import NotFound, StorageError, ValidationError
from booklog.models.book import Book, BookStatus
from booklog.schemas.book import BookCreate, BookStats, BookUpdate

logger = logging.getLogger(__name__)


class BookService:
    """
    Stateless request handler for books

    Translates each operation into a query against the session it is given
    and converts database failures into StorageError.
    """

    def __init__(self, db: Session):
        self.db = db

    def _storage_error(self, action: str, exc: SQLAlchemyError) -> StorageError:
        self.db.rollback()
        logger.error(f"Storage error while {action}: {exc}")
        return StorageError(str(exc))

    def _fetch(self, book_id: int) -> Book:
        book = self.db.query(Book).filter(Book.id == book_id).first()
        if not book:
            raise NotFound()
        return book

    def list_books(self) -> List[Book]:
        """All books, newest first"""
        try:
            return self.db.query(Book).order_by(Book.created_at.desc(), Book.id.desc()).all()
        except SQLAlchemyError as e:
            raise self._storage_error("listing books", e)

    def get_book(self, book_id: int) -> Book:
        try:
            return self._fetch(book_id)
        except SQLAlchemyError as e:
            raise self._storage_error(f"reading book {book_id}", e)

    def create_book(self, data: Optional[BookCreate]) -> Book:
        """
        Insert a new book and re-read it by its assigned id

        Raises:
            ValidationError: title or author missing (nothing is written)
            StorageError: insert rejected, e.g. duplicate ISBN or rating out of range
        """
        if data is None or not data.title or not data.author:
            raise ValidationError("Title and author are required")

        values = data.model_dump()
        if values["status"] is None:
            values["status"] = BookStatus.TO_READ.value

        try:
            book = Book(**values)
            self.db.add(book)
            self.db.commit()
            book_id = book.id
            self.db.expire_all()
            created = self._fetch(book_id)
        except SQLAlchemyError as e:
            raise self._storage_error("creating book", e)

        logger.info(f"Created book {created.id}: {created.title}")
        return created

    def update_book(self, book_id: int, data: BookUpdate) -> Book:
        """
        Replace every mutable field of a book

        Title and author are not checked here; a null value is left to the
        NOT NULL constraint and surfaces as StorageError.
        """
        values = data.model_dump()
        if values["status"] is None:
            values["status"] = BookStatus.TO_READ.value
        values["updated_at"] = datetime.utcnow()

        try:
            affected = (
                self.db.query(Book)
                .filter(Book.id == book_id)
                .update(values, synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._storage_error(f"updating book {book_id}", e)

        if affected == 0:
            raise NotFound()

        try:
            self.db.expire_all()
            updated = self._fetch(book_id)
        except SQLAlchemyError as e:
            raise self._storage_error(f"reading book {book_id}", e)

        logger.info(f"Updated book {book_id}")
        return updated

    def delete_book(self, book_id: int) -> None:
        try:
            affected = (
                self.db.query(Book)
                .filter(Book.id == book_id)
                .delete(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._storage_error(f"deleting book {book_id}", e)

        if affected == 0:
            raise NotFound()

        logger.info(f"Deleted book {book_id}")

    def get_stats(self) -> BookStats:
        """Total, per-status counts and average rating in a single query"""
        try:
            row = self.db.query(
                func.count(Book.id),
                func.count(case((Book.status == BookStatus.READ.value, 1))),
                func.count(case((Book.status == BookStatus.READING.value, 1))),
                func.count(case((Book.status == BookStatus.TO_READ.value, 1))),
                func.avg(Book.rating),
            ).one()
        except SQLAlchemyError as e:
            raise self._storage_error("computing statistics", e)

        total, read, reading, to_read, average = row
        return BookStats(
            total_books=total or 0,
            books_read=read or 0,
            books_reading=reading or 0,
            books_to_read=to_read or 0,
            average_rating=float(average) if average is not None else None
        )
