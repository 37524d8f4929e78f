"""
Book List Rendering
Builds the markup for the book cards, statistics and notices.
All book-supplied text passes through escape_html before insertion.
"""

import html
from typing import Optional, Sequence

from booklog.models.book import BookStatus
from booklog.schemas.book import BookResponse, BookStats

STATUS_LABELS = {
    BookStatus.READ.value: "Read",
    BookStatus.READING.value: "Currently Reading",
    BookStatus.TO_READ.value: "To Read",
}

EMPTY_STATE_HTML = (
    '<div class="empty-state">'
    '<i class="fas fa-book"></i>'
    '<h3>No books found</h3>'
    '<p>Add your first book to get started!</p>'
    '</div>'
)

LOADING_HTML = '<div class="loading"><div class="spinner"></div></div>'


def escape_html(text: Optional[str]) -> str:
    """Escape & < > " ' for safe insertion into markup; None becomes ''"""
    if not text:
        return ""
    return html.escape(str(text), quote=True)


def format_status(status: Optional[str]) -> str:
    """Human-readable label, or the raw value when unknown"""
    return STATUS_LABELS.get(status, status or "")


def generate_stars(rating: int) -> str:
    """Five star icons, filled up to the rating"""
    stars = []
    for position in range(1, 6):
        if position <= rating:
            stars.append('<i class="fas fa-star"></i>')
        else:
            stars.append('<i class="far fa-star"></i>')
    return "".join(stars)


def render_book_card(book: BookResponse) -> str:
    metadata = []
    if book.genre:
        metadata.append(f'<span><i class="fas fa-tag"></i> {escape_html(book.genre)}</span>')
    if book.year_published is not None:
        metadata.append(f'<span><i class="fas fa-calendar"></i> {book.year_published}</span>')
    if book.isbn:
        metadata.append(f'<span><i class="fas fa-barcode"></i> {escape_html(book.isbn)}</span>')

    rating = f'<span class="rating">{generate_stars(book.rating)}</span>' if book.rating else ''
    notes = f'<p class="notes">{escape_html(book.notes)}</p>' if book.notes else ''

    return (
        '<div class="book-card">'
        f'<h3>{escape_html(book.title)}</h3>'
        f'<p class="author">by {escape_html(book.author)}</p>'
        f'<div class="metadata">{"".join(metadata)}</div>'
        '<div>'
        f'<span class="status-badge status-{escape_html(book.status)}">'
        f'{escape_html(format_status(book.status))}</span>'
        f'{rating}'
        '</div>'
        f'{notes}'
        '<div class="book-actions">'
        f'<button class="btn btn-edit" data-action="edit" data-book-id="{book.id}">'
        '<i class="fas fa-edit"></i> Edit</button>'
        f'<button class="btn btn-delete" data-action="delete" data-book-id="{book.id}">'
        '<i class="fas fa-trash"></i> Delete</button>'
        '</div>'
        '</div>'
    )


def render_books(filtered_books: Sequence[BookResponse]) -> str:
    """One card per book, or the empty-state placeholder when there are none"""
    if not filtered_books:
        return EMPTY_STATE_HTML
    return "".join(render_book_card(book) for book in filtered_books)


def render_error(message: str) -> str:
    return f'<div class="error-state"><p>{escape_html(message)}</p></div>'


def render_stats(stats: BookStats) -> dict:
    """Statistics card values keyed by element id; missing figures show as 0"""
    return {
        "totalBooks": stats.total_books or 0,
        "booksRead": stats.books_read or 0,
        "booksReading": stats.books_reading or 0,
        "booksToRead": stats.books_to_read or 0,
    }
