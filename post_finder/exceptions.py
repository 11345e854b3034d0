"""Custom exceptions for the Post Finder application."""

from typing import Optional


class PostFinderError(Exception):
    """Base exception for all Post Finder errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class InvalidArgument(PostFinderError):
    """Raised when paging or scan parameters are malformed."""
    pass


class StoreUnavailable(PostFinderError):
    """Raised when the document store cannot be reached or queried."""
    pass


class ConfigurationError(PostFinderError):
    """Raised when configuration is invalid."""
    pass


class SearchRequestError(PostFinderError):
    """Raised when a remote search request fails."""
    pass
