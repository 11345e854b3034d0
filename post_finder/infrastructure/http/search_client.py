"""HTTP client for the search endpoint."""

from typing import Optional
import requests

from ...domain.entities import PagedResult, SearchResultItem
from ...config import API_BASE_URL, API_PREFIX, API_TIMEOUT
from ...exceptions import SearchRequestError
from ...logging_config import get_logger

logger = get_logger(__name__)


class SearchApiClient:
    """Calls ``GET {prefix}/search`` and decodes the paged response.

    Instances are callable with ``(term, page)`` so they can be handed to a
    ``SearchSession`` as its fetcher.
    """

    def __init__(self,
                 base_url: str = API_BASE_URL,
                 prefix: str = API_PREFIX,
                 timeout: float = API_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip('/')
        self.search_url = f"{self.base_url}{prefix}/search"
        self.timeout = timeout
        self._http = session or requests.Session()

    def __call__(self, term: str, page: int) -> PagedResult:
        return self.search(term, page)

    def search(self, term: str = "", page: int = 1, per_page: Optional[int] = None) -> PagedResult:
        params = {"search": term, "page": page}
        if per_page is not None:
            params["per_page"] = per_page

        try:
            response = self._http.get(self.search_url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise SearchRequestError(
                message=f"Network error calling search API: {e}",
                details={"url": self.search_url, "error": str(e)}
            ) from e

        if response.status_code != 200:
            raise SearchRequestError(
                message=f"Search API error: {response.status_code}",
                details={"status_code": response.status_code, "response": response.text}
            )

        try:
            data = response.json()
            return PagedResult(
                items=[SearchResultItem(id=p["id"], title=p["title"], url=p["url"]) for p in data["posts"]],
                total=data["total"],
                page_count=data["pages"],
            )
        except (ValueError, KeyError, TypeError) as e:
            raise SearchRequestError(
                message=f"Invalid response from search API: {e}",
                details={"error": str(e)}
            ) from e
