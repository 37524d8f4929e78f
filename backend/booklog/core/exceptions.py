"""
Domain Exceptions
Error taxonomy shared by the API service and the client
"""

from typing import Optional


class BooklogError(Exception):
    """Base error carrying a human-readable message and an HTTP status"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(BooklogError):
    """Required input missing, detected before any storage call"""

    status_code = 400


class NotFound(BooklogError):
    """Operation targeted a book id that does not exist"""

    status_code = 404

    def __init__(self, message: str = "Book not found"):
        super().__init__(message)


class StorageError(BooklogError):
    """The database failed or is unreachable"""

    status_code = 500


class NetworkError(BooklogError):
    """Client-side: a request could not be completed"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        # None when no response was received at all
        self.status_code = status_code
