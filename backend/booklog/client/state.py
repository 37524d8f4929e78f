"""
Library State
The client's in-memory copy of the book set and the subset on display
"""

from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple

from booklog.schemas.book import BookResponse


@dataclass(frozen=True)
class LibraryState:
    """
    Books last fetched from the API plus the current search/filter view

    filtered_books is always books narrowed by search_query (title or author,
    case-insensitive) and then by status_filter ("" means all statuses).
    """
    books: Tuple[BookResponse, ...] = ()
    filtered_books: Tuple[BookResponse, ...] = ()
    search_query: str = ""
    status_filter: str = ""

    def find(self, book_id: int) -> Optional[BookResponse]:
        """Cached book with this id, if any"""
        for book in self.books:
            if book.id == book_id:
                return book
        return None


def _matches_query(book: BookResponse, query: str) -> bool:
    return query in book.title.lower() or query in book.author.lower()


def _compute_view(books: Sequence[BookResponse], query: str, status: str) -> Tuple[BookResponse, ...]:
    term = query.lower()
    searched = [book for book in books if _matches_query(book, term)]
    if status:
        searched = [book for book in searched if book.status == status]
    return tuple(searched)


def with_books(state: LibraryState, books: Sequence[BookResponse]) -> LibraryState:
    """Replace the cached book set and recompute the view over it"""
    books = tuple(books)
    return replace(
        state,
        books=books,
        filtered_books=_compute_view(books, state.search_query, state.status_filter)
    )


def search(state: LibraryState, query: str) -> LibraryState:
    """Narrow books to title/author matches, keeping the current status filter"""
    return replace(
        state,
        search_query=query,
        filtered_books=_compute_view(state.books, query, state.status_filter)
    )


def filter_by_status(state: LibraryState, status: Optional[str]) -> LibraryState:
    """Intersect the search results with a status; empty or None selects all"""
    status = status or ""
    return replace(
        state,
        status_filter=status,
        filtered_books=_compute_view(state.books, state.search_query, status)
    )
