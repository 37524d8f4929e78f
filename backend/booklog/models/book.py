"""
Book Model
Represents one tracked title in the personal library
"""

import enum
from sqlalchemy import Column, Integer, String, DateTime, Text, CheckConstraint
from datetime import datetime
from booklog.database import Base


class BookStatus(str, enum.Enum):
    """Reading status values accepted by the books table"""

    READ = "read"
    READING = "reading"
    TO_READ = "to-read"


class Book(Base):
    """Book model for storing a title, its reading status and rating"""

    __tablename__ = "books"
    __table_args__ = (
        CheckConstraint("status IN ('read', 'reading', 'to-read')", name="ck_books_status"),
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_books_rating"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, index=True)

    # Basic info
    title = Column(String(255), nullable=False)
    author = Column(String(255), nullable=False)
    isbn = Column(String(20), unique=True)  # NULLs never collide
    genre = Column(String(100))
    year_published = Column(Integer)

    # Reading progress
    status = Column(String(20), default=BookStatus.TO_READ.value)
    rating = Column(Integer)  # 1-5 stars
    notes = Column(Text)

    # System fields
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<Book(id={self.id}, title='{self.title}', status='{self.status}')>"
