"""
Sample Library Data
Starter books inserted by scripts/seed_books.py
"""

import logging
from sqlalchemy.orm import Session

from booklog.models.book import Book

logger = logging.getLogger(__name__)

SAMPLE_BOOKS = [
    {
        "title": "The Great Gatsby",
        "author": "F. Scott Fitzgerald",
        "isbn": "9780743273565",
        "genre": "Fiction",
        "year_published": 1925,
        "status": "read",
        "rating": 5,
        "notes": "A classic American novel",
    },
    {
        "title": "1984",
        "author": "George Orwell",
        "isbn": "9780451524935",
        "genre": "Dystopian",
        "year_published": 1949,
        "status": "read",
        "rating": 5,
        "notes": "Thought-provoking dystopian masterpiece",
    },
    {
        "title": "To Kill a Mockingbird",
        "author": "Harper Lee",
        "isbn": "9780061120084",
        "genre": "Fiction",
        "year_published": 1960,
        "status": "reading",
        "rating": None,
        "notes": "Currently reading",
    },
]


def seed_sample_books(db: Session) -> int:
    """
    Insert the sample books whose ISBN is not in the table yet

    Returns:
        Number of books inserted
    """
    existing = {isbn for (isbn,) in db.query(Book.isbn).filter(Book.isbn.isnot(None))}
    added = 0
    for data in SAMPLE_BOOKS:
        if data["isbn"] in existing:
            logger.debug(f"Skipping {data['title']} (already in library)")
            continue
        db.add(Book(**data))
        added += 1

    db.commit()
    logger.info(f"Seeded {added} sample books")
    return added
