"""Domain entities package."""

from .document import Document, PostStatus, MAX_DOCUMENT_ID
from .marker import Marker
from .query import SearchQuery, SearchResultItem, PagedResult, ScanWindow, page_count_for
from .reference import Reference, RenderedFragment

__all__ = [
    'Document',
    'PostStatus',
    'MAX_DOCUMENT_ID',
    'Marker',
    'SearchQuery',
    'SearchResultItem',
    'PagedResult',
    'ScanWindow',
    'page_count_for',
    'Reference',
    'RenderedFragment'
]
