"""Editor-side search session.

Models the block editor's search panel: recent posts on mount, term
searches that reset to page 1, and page changes that keep the term.
Every request is numbered and only the newest one may update the session,
so a slow response to an older request never overwrites fresher results.
"""

from __future__ import annotations
from enum import Enum
from typing import Callable, List, Optional

from ...domain.entities import PagedResult, Reference, SearchResultItem
from ...error_handler import log_error

SearchFetcher = Callable[[str, int], PagedResult]


class SessionState(Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    RESULTS = "results"
    NO_RESULTS = "no_results"
    ERROR = "error"


class SearchSession:
    """State machine for one editor search panel."""

    def __init__(self, fetch: SearchFetcher):
        self._fetch = fetch
        self._latest_request = 0
        self.state = SessionState.IDLE
        self.term = ""
        self.page = 1
        self.page_count = 0
        self.total = 0
        self.results: List[SearchResultItem] = []
        self.showing_recent = True
        self.selected: Optional[SearchResultItem] = None
        self.error: Optional[Exception] = None

    def load_recent(self) -> SessionState:
        """Populate the panel with the most recent posts."""
        return self._run("", 1, recent=True)

    def submit(self, term: str) -> SessionState:
        """Search for ``term`` from page 1. A blank term is ignored."""
        if not term.strip():
            return self.state
        self.term = term
        return self._run(term, 1, recent=False)

    def change_page(self, page: int) -> SessionState:
        """Fetch another page of the current term."""
        return self._run(self.term, page, recent=self.showing_recent)

    def select(self, item: SearchResultItem) -> Reference:
        self.selected = item
        return Reference(document_id=item.id)

    def begin(self, page: int) -> int:
        """Start a request and return its number."""
        self._latest_request += 1
        self.page = page
        self.state = SessionState.SEARCHING
        self.error = None
        return self._latest_request

    def complete(self, request_id: int, result: PagedResult, recent: bool = False) -> bool:
        """Apply a response; stale responses are dropped and return False."""
        if request_id != self._latest_request:
            return False
        self.results = list(result.items)
        self.total = result.total
        self.page_count = result.page_count
        self.showing_recent = recent
        self.state = SessionState.RESULTS if self.results else SessionState.NO_RESULTS
        return True

    def fail(self, request_id: int, error: Exception) -> bool:
        if request_id != self._latest_request:
            return False
        log_error(error, "Error searching posts", {"term": self.term, "page": self.page})
        self.error = error
        self.state = SessionState.ERROR
        return True

    def _run(self, term: str, page: int, recent: bool) -> SessionState:
        request_id = self.begin(page)
        try:
            result = self._fetch(term, page)
        except Exception as e:
            self.fail(request_id, e)
        else:
            self.complete(request_id, result, recent=recent)
        return self.state
