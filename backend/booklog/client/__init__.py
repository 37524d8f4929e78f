"""
Client Package
API client, view state and rendering for the book list
"""

from .api import BookApiClient
from .state import LibraryState
from .app import LibraryApp

__all__ = [
    'BookApiClient',
    'LibraryState',
    'LibraryApp',
]
