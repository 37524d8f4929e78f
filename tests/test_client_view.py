from datetime import datetime

from booklog.client.render import (
    EMPTY_STATE_HTML,
    escape_html,
    format_status,
    generate_stars,
    render_books,
    render_stats,
)
from booklog.client.state import LibraryState, filter_by_status, search, with_books
from booklog.schemas.book import BookResponse, BookStats


def make_book(id, title, author, status="to-read", **fields):
    now = datetime(2024, 1, 1, 12, 0, 0)
    return BookResponse(
        id=id, title=title, author=author, status=status,
        created_at=now, updated_at=now, **fields
    )


BOOKS = [
    make_book(1, "1984", "George Orwell", "read", rating=5),
    make_book(2, "Animal Farm", "George Orwell", "to-read"),
    make_book(3, "Emma", "Jane Austen", "reading"),
    make_book(4, "Brave New World", "Aldous Huxley", "read"),
]


def loaded():
    return with_books(LibraryState(), BOOKS)


def ids(state):
    return [book.id for book in state.filtered_books]


def test_with_books_shows_everything():
    state = loaded()
    assert ids(state) == [1, 2, 3, 4]


def test_search_is_case_insensitive_on_title_and_author():
    assert ids(search(loaded(), "ORWELL")) == [1, 2]
    assert ids(search(loaded(), "emma")) == [3]
    assert ids(search(loaded(), "")) == [1, 2, 3, 4]


def test_search_keeps_status_filter():
    state = filter_by_status(loaded(), "read")
    state = search(state, "orwell")
    assert ids(state) == [1]


def test_filter_intersects_search_results():
    state = search(loaded(), "orwell")
    assert ids(filter_by_status(state, "to-read")) == [2]
    assert ids(filter_by_status(state, "reading")) == []
    assert ids(filter_by_status(state, "")) == [1, 2]


def test_switching_status_uses_search_results_not_previous_filter():
    state = filter_by_status(loaded(), "read")
    state = filter_by_status(state, "reading")
    assert ids(state) == [3]


def test_operations_return_new_state():
    state = loaded()
    narrowed = search(state, "huxley")
    assert ids(state) == [1, 2, 3, 4]
    assert ids(narrowed) == [4]
    assert narrowed.books == state.books


def test_reload_reapplies_search():
    state = search(loaded(), "austen")
    state = with_books(state, BOOKS[:3])
    assert ids(state) == [3]


def test_find():
    assert loaded().find(3).title == "Emma"
    assert loaded().find(99) is None


def test_render_empty_state():
    markup = render_books([])
    assert markup == EMPTY_STATE_HTML
    assert "book-card" not in markup


def test_render_escapes_book_text():
    book = make_book(7, "<script>alert('x')</script>", "A & B", notes='"quoted"')
    markup = render_books([book])
    assert "<script>" not in markup
    assert "&lt;script&gt;" in markup
    assert "A &amp; B" in markup
    assert "&quot;quoted&quot;" in markup


def test_render_card_contents():
    markup = render_books([make_book(1, "1984", "George Orwell", "read", rating=3, genre="Dystopian",
                                     year_published=1949, isbn="9780451524935")])
    assert markup.count('class="book-card"') == 1
    assert "by George Orwell" in markup
    assert "Dystopian" in markup
    assert "1949" in markup
    assert "9780451524935" in markup
    assert "status-read" in markup
    assert markup.count('<i class="fas fa-star"></i>') == 3
    assert markup.count('<i class="far fa-star"></i>') == 2
    assert 'data-book-id="1"' in markup


def test_render_without_rating_has_no_stars():
    markup = render_books([make_book(1, "Emma", "Jane Austen")])
    assert "fa-star" not in markup
    assert 'class="notes"' not in markup


def test_escape_html():
    assert escape_html(None) == ""
    assert escape_html("") == ""
    escaped = escape_html("& < > \" '")
    for char in "<>\"'":
        assert char not in escaped


def test_format_status():
    assert format_status("read") == "Read"
    assert format_status("reading") == "Currently Reading"
    assert format_status("to-read") == "To Read"
    assert format_status("other") == "other"


def test_generate_stars():
    assert generate_stars(5).count("fas fa-star") == 5
    assert generate_stars(1).count("far fa-star") == 4


def test_render_stats():
    assert render_stats(BookStats(total_books=4, books_read=2, books_reading=1, books_to_read=1)) == {
        "totalBooks": 4,
        "booksRead": 2,
        "booksReading": 1,
        "booksToRead": 1,
    }
