"""Reference entities."""

from __future__ import annotations
from dataclasses import dataclass

from .document import MAX_DOCUMENT_ID


@dataclass(frozen=True)
class Reference:
    """Stored pointer from a content item to a published post. 0 means unset."""
    document_id: int = 0

    @property
    def is_set(self) -> bool:
        """Ids outside the store's range cannot point at any post."""
        return 0 < self.document_id <= MAX_DOCUMENT_ID


@dataclass(frozen=True)
class RenderedFragment:
    """Resolved reference data. Values are raw; the renderer escapes them."""
    title: str
    url: str
