"""Use cases package."""

from .search_posts_use_case import SearchPostsUseCase
from .find_marked_posts_use_case import FindMarkedPostsUseCase, parse_scan_date
from .search_session import SearchSession, SessionState

__all__ = [
    'SearchPostsUseCase',
    'FindMarkedPostsUseCase',
    'parse_scan_date',
    'SearchSession',
    'SessionState'
]
