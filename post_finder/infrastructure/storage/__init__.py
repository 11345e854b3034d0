"""Storage infrastructure module."""

from .sqlite_document_store import SqliteDocumentStore

__all__ = ['SqliteDocumentStore']
