"""Infrastructure layer module."""

from . import storage
from . import http

__all__ = ['storage', 'http']
