"""Document repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from ..entities import Document, ScanWindow


class DocumentRepository(ABC):
    """Abstract interface for the document store.

    Implementations raise ``StoreUnavailable`` when the underlying storage
    cannot be queried. Missing documents are ``None``, never an error.
    """

    @abstractmethod
    def get_document(self, document_id: int) -> Optional[Document]:
        """Get document by ID, whatever its status."""
        pass

    @abstractmethod
    def search_published(self, term: str, limit: int, offset: int) -> Tuple[List[Document], int]:
        """Return one page of published documents matching ``term`` and the full match count.

        An empty term matches every published document. Results are ordered
        by publish time descending, ties broken by id descending.
        """
        pass

    @abstractmethod
    def find_published_ids_containing(self, window: ScanWindow, needle: str) -> List[int]:
        """Ids of published documents in ``window`` whose content contains ``needle``.

        The containment test runs inside the store. Ids ascend.
        """
        pass

    @abstractmethod
    def list_published_in_window(self, window: ScanWindow, limit: int, after_id: int = 0) -> List[Document]:
        """Up to ``limit`` published documents in ``window`` with id above ``after_id``, ids ascending."""
        pass

    @abstractmethod
    def save_document(self, document: Document) -> int:
        """Insert or replace a document and return its ID."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Total number of stored documents."""
        pass

    @abstractmethod
    def reset(self) -> None:
        """Remove every stored document."""
        pass
