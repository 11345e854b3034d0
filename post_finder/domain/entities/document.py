"""Domain entities for stored posts."""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

# Largest id the store can hold (signed 64-bit INTEGER)
MAX_DOCUMENT_ID = 2 ** 63 - 1


class PostStatus(Enum):
    """Publication status of a post."""
    DRAFT = "draft"
    PUBLISHED = "publish"
    OTHER = "other"

    @classmethod
    def from_value(cls, value: str) -> "PostStatus":
        """Map a raw stored status onto the enum; unknown values become OTHER."""
        for status in cls:
            if status.value == value:
                return status
        return cls.OTHER


@dataclass(frozen=True)
class Document:
    """A post as held by the document store. Read-only for the core."""
    id: int
    title: str
    content: str
    status: PostStatus
    published_at: datetime

    def __post_init__(self) -> None:
        if self.id <= 0:
            raise ValueError("Document ID must be a positive integer")
        if self.id > MAX_DOCUMENT_ID:
            raise ValueError(f"Document ID must not exceed {MAX_DOCUMENT_ID}")

    @property
    def is_published(self) -> bool:
        return self.status is PostStatus.PUBLISHED
