"""
Books API Client
HTTP client for the /api/books endpoints
"""

import requests
import logging
from typing import Any, Callable, Dict, List, Optional

from booklog.config import get_settings
from booklog.core.exceptions import NetworkError
from booklog.schemas.book import BookCreate, BookResponse, BookStats, BookUpdate

logger = logging.getLogger(__name__)


class BookApiClient:
    """
    Client for the books API

    Every failure (connection error, timeout, non-2xx status, unreadable body)
    is raised as NetworkError.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None
    ):
        """
        Initialize client

        Args:
            base_url: API root, e.g. http://localhost:3000/api
            session: Optional preconfigured requests session
            timeout: Seconds to wait for each response
        """
        settings = get_settings()
        self.base_url = (base_url or settings.CLIENT_API_URL).rstrip('/')
        self.timeout = timeout if timeout is not None else settings.CLIENT_TIMEOUT
        self.session = session or requests.Session()
        self.session.headers.update({
            'Accept': 'application/json',
        })

    def _request(
        self,
        method: str,
        path: str,
        parse: Callable[[Any], Any],
        payload: Optional[Dict] = None
    ):
        url = f"{self.base_url}/books{path}"
        try:
            response = self.session.request(method, url, json=payload, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.debug(f"{method} {url} failed: {e}")
            raise NetworkError(f"{method} {url} failed: {e}") from e

        if not response.ok:
            detail = None
            try:
                detail = response.json().get('detail')
            except (ValueError, AttributeError):
                pass
            raise NetworkError(
                f"{method} {url} returned {response.status_code}: {detail or response.reason}",
                status_code=response.status_code
            )

        try:
            body = response.json()
        except ValueError as e:
            raise NetworkError(f"{method} {url} returned invalid JSON") from e

        # pydantic.ValidationError is a ValueError
        try:
            return parse(body)
        except (ValueError, TypeError, AttributeError) as e:
            logger.debug(f"{method} {url} returned an unexpected body: {body!r}")
            raise NetworkError(f"{method} {url} returned an unexpected body: {e}") from e

    def list_books(self) -> List[BookResponse]:
        return self._request('GET', '', _parse_book_list)

    def get_book(self, book_id: int) -> BookResponse:
        return self._request('GET', f'/{book_id}', BookResponse.model_validate)

    def create_book(self, data: BookCreate) -> BookResponse:
        payload = data.model_dump(mode='json')
        return self._request('POST', '', BookResponse.model_validate, payload)

    def update_book(self, book_id: int, data: BookUpdate) -> BookResponse:
        payload = data.model_dump(mode='json')
        return self._request('PUT', f'/{book_id}', BookResponse.model_validate, payload)

    def delete_book(self, book_id: int) -> str:
        return self._request('DELETE', f'/{book_id}', lambda body: body.get('message', ''))

    def get_stats(self) -> BookStats:
        return self._request('GET', '/stats/overview', BookStats.model_validate)


def _parse_book_list(body) -> List[BookResponse]:
    if not isinstance(body, list):
        raise TypeError(f"expected a list of books, got {type(body).__name__}")
    return [BookResponse.model_validate(item) for item in body]
