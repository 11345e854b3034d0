"""HTTP client infrastructure module."""

from .search_client import SearchApiClient

__all__ = ['SearchApiClient']
