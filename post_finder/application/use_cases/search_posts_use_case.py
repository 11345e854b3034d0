"""Search posts use case implementation."""

from typing import Any, Dict, Optional

from ...domain.services import SearchService


class SearchPostsUseCase:
    """Use case behind the search endpoint."""

    def __init__(self, search_service: SearchService, default_per_page: int = 10):
        self._search_service = search_service
        self._default_per_page = default_per_page

    def execute(self, search: Optional[str] = None, page: Optional[int] = None,
                per_page: Optional[int] = None) -> Dict[str, Any]:
        """Run a search and return the API response shape ``{posts, total, pages}``."""
        result = self._search_service.search(
            term=search or "",
            page=1 if page is None else page,
            per_page=self._default_per_page if per_page is None else per_page,
        )
        return result.to_dict()
