"""
Library Client Application
Drives the book list view: loading, search/filter and the add/edit/delete flows.

The UI toolkit is reached through two callbacks:
- notify(level, message): show a user-visible notice ("success" or "error")
- confirm(prompt): ask the user to confirm, returning True to proceed
"""

import logging
from typing import Callable, Dict, Optional

from pydantic import ValidationError as PayloadError

from booklog.client import render
from booklog.client.api import BookApiClient
from booklog.client.state import LibraryState, filter_by_status, search, with_books
from booklog.core.exceptions import NetworkError
from booklog.models.book import BookStatus
from booklog.schemas.book import BookCreate, BookUpdate

logger = logging.getLogger(__name__)

DELETE_PROMPT = "Are you sure you want to delete this book?"

FORM_FIELDS = ("title", "author", "isbn", "genre", "year_published", "status", "rating", "notes")


def _log_notice(level: str, message: str):
    if level == "error":
        logger.warning(message)
    else:
        logger.info(message)


class LibraryApp:
    """
    Client-side controller for one library view

    Holds the explicit LibraryState, the rendered list markup (view_html),
    the statistics card values (stats) and the add/edit form contents.
    State only changes after a successful response; failures leave it as is.
    """

    def __init__(
        self,
        api: Optional[BookApiClient] = None,
        notify: Optional[Callable[[str, str], None]] = None,
        confirm: Optional[Callable[[str], bool]] = None
    ):
        self.api = api or BookApiClient()
        self.notify = notify or _log_notice
        self.confirm = confirm
        self.state = LibraryState()
        self.view_html = ""
        self.stats: Dict[str, int] = {}
        self.add_form: Dict[str, str] = {}
        self.edit_form: Optional[Dict[str, str]] = None

    # ========================================================================
    # LOADING
    # ========================================================================

    def start(self):
        """Initial load: book list and statistics, fetched independently"""
        self.load_books()
        self.load_statistics()

    def load_books(self) -> bool:
        self.view_html = render.LOADING_HTML
        try:
            books = self.api.list_books()
        except NetworkError as e:
            logger.error(f"Error loading books: {e}")
            self.view_html = render.render_error("Failed to load books")
            self.notify("error", "Failed to load books")
            return False

        self.state = with_books(self.state, books)
        self.render()
        return True

    def load_statistics(self) -> bool:
        try:
            stats = self.api.get_stats()
        except NetworkError as e:
            # Statistics are not critical; nothing is shown to the user
            logger.error(f"Error loading statistics: {e}")
            return False

        self.stats = render.render_stats(stats)
        return True

    def refresh(self):
        self.load_books()
        self.load_statistics()

    # ========================================================================
    # SEARCH & FILTER
    # ========================================================================

    def render(self) -> str:
        self.view_html = render.render_books(self.state.filtered_books)
        return self.view_html

    def handle_search(self, query: str) -> str:
        self.state = search(self.state, query)
        return self.render()

    def handle_filter(self, status: Optional[str]) -> str:
        self.state = filter_by_status(self.state, status)
        return self.render()

    # ========================================================================
    # ADD
    # ========================================================================

    def submit_add_form(self, form: Optional[Dict[str, str]] = None) -> bool:
        """
        Create a book from the add form

        Empty fields are sent as null. On success the list and statistics are
        reloaded and the form cleared; on failure the form keeps its contents.
        """
        if form is not None:
            self.add_form = dict(form)

        try:
            data = BookCreate.model_validate(
                {key: value for key, value in self.add_form.items() if key in FORM_FIELDS}
            )
            self.api.create_book(data)
        except (NetworkError, PayloadError) as e:
            logger.error(f"Error adding book: {e}")
            self.notify("error", "Failed to add book")
            return False

        self.refresh()
        self.add_form = {}
        self.notify("success", "Book added successfully!")
        return True

    # ========================================================================
    # EDIT
    # ========================================================================

    def open_edit(self, book_id: int) -> bool:
        """Fill the edit form from the cached book; no request is made"""
        book = self.state.find(book_id)
        if not book:
            return False

        self.edit_form = {
            "id": str(book.id),
            "title": book.title or "",
            "author": book.author or "",
            "isbn": book.isbn or "",
            "genre": book.genre or "",
            "year_published": str(book.year_published) if book.year_published is not None else "",
            "status": book.status or BookStatus.TO_READ.value,
            "rating": str(book.rating) if book.rating is not None else "",
            "notes": book.notes or "",
        }
        return True

    def close_edit(self):
        """Dismiss the edit surface, discarding its contents"""
        self.edit_form = None

    def submit_edit(self) -> bool:
        """Send every field of the edit form as a full update"""
        if self.edit_form is None:
            return False

        try:
            book_id = int(self.edit_form["id"])
            data = BookUpdate.model_validate(
                {key: self.edit_form.get(key, "") for key in FORM_FIELDS}
            )
            self.api.update_book(book_id, data)
        except (NetworkError, PayloadError, KeyError, ValueError) as e:
            logger.error(f"Error updating book: {e}")
            self.notify("error", "Failed to update book")
            return False

        self.refresh()
        self.edit_form = None
        self.notify("success", "Book updated successfully!")
        return True

    # ========================================================================
    # DELETE
    # ========================================================================

    def delete_book(self, book_id: int) -> bool:
        """Delete after explicit confirmation"""
        if self.confirm is None or not self.confirm(DELETE_PROMPT):
            return False

        try:
            self.api.delete_book(book_id)
        except NetworkError as e:
            logger.error(f"Error deleting book: {e}")
            self.notify("error", "Failed to delete book")
            return False

        self.refresh()
        self.notify("success", "Book deleted successfully!")
        return True
