"""Search domain service."""

import re
from typing import Optional

from ..entities import MAX_DOCUMENT_ID, PagedResult, SearchQuery, page_count_for
from ..repositories import DocumentRepository
from .result_formatter import ResultFormatter
from ...exceptions import InvalidArgument
from ...logging_config import get_logger

logger = get_logger(__name__)

_POST_ID_RE = re.compile(r'^\d+$', re.ASCII)
_TAG_RE = re.compile(r'<[^>]*>')
_WHITESPACE_RE = re.compile(r'\s+')


def sanitize_term(term: Optional[str]) -> str:
    """Strip tags and collapse whitespace, as for a single-line text field."""
    if not term:
        return ""
    return _WHITESPACE_RE.sub(" ", _TAG_RE.sub("", term)).strip()


class SearchService:
    """Resolve an id or free-text term into one page of published posts."""

    def __init__(self, document_repository: DocumentRepository, formatter: ResultFormatter):
        self._document_repo = document_repository
        self._formatter = formatter

    def search(self, term: Optional[str] = None, page: int = 1, per_page: int = 10) -> PagedResult:
        """Search published posts.

        A term made only of digits is first tried as a post id; a published
        hit is returned alone (``total=1``, ``page_count=1``) whatever the
        paging. Otherwise, and for every other term, the store is queried
        for published posts matching the term, newest first. Asking for a
        page past the end yields no items but keeps the totals.

        Raises:
            InvalidArgument: if ``page`` or ``per_page`` is below 1.
        """
        if page < 1 or per_page < 1:
            raise InvalidArgument(
                message="page and per_page must be positive integers",
                details={"page": page, "per_page": per_page}
            )
        query = SearchQuery(term=term, page=page, per_page=per_page)

        exact = self._find_by_id(query.term)
        if exact is not None:
            return exact

        text = sanitize_term(query.term)
        documents, total = self._document_repo.search_published(
            text, limit=query.per_page, offset=query.offset
        )
        result = PagedResult(
            items=[self._formatter.format(document) for document in documents],
            total=total,
            page_count=page_count_for(total, query.per_page),
        )
        logger.info(
            f"Search term={text!r} page={query.page}/{result.page_count} "
            f"returned {len(result.items)} of {result.total}"
        )
        return result

    def _find_by_id(self, term: Optional[str]) -> Optional[PagedResult]:
        if term is None or not _POST_ID_RE.match(term.strip()):
            return None
        post_id = int(term.strip())
        if post_id > MAX_DOCUMENT_ID:
            logger.debug(f"Term {term.strip()} is beyond the id range, searching as text")
            return None
        document = self._document_repo.get_document(post_id)
        if document is None or not document.is_published:
            logger.debug(f"No published post with id {term.strip()}, falling back to text search")
            return None
        logger.info(f"Search term matched post id {document.id}")
        return PagedResult.single(self._formatter.format(document))
