"""Search and scan value objects."""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from typing import Any, Dict, List, Optional


@dataclass
class SearchQuery:
    """A single search request from the editor or the HTTP API."""
    term: Optional[str] = None
    page: int = 1
    per_page: int = 10

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("page must be >= 1")
        if self.per_page < 1:
            raise ValueError("per_page must be >= 1")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page


@dataclass(frozen=True)
class SearchResultItem:
    """Minimal public shape of a post."""
    id: int
    title: str
    url: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "title": self.title, "url": self.url}


def page_count_for(total: int, per_page: int) -> int:
    """Number of pages needed for ``total`` items, ``per_page`` at a time."""
    if per_page < 1:
        raise ValueError("per_page must be >= 1")
    return -(-total // per_page)


@dataclass
class PagedResult:
    """One page of search results plus totals across all pages."""
    items: List[SearchResultItem] = field(default_factory=list)
    total: int = 0
    page_count: int = 0

    def __post_init__(self) -> None:
        if self.total < 0 or self.page_count < 0:
            raise ValueError("total and page_count must be non-negative")
        if (self.total == 0) != (self.page_count == 0):
            raise ValueError("page_count must be 0 exactly when total is 0")

    @classmethod
    def single(cls, item: SearchResultItem) -> "PagedResult":
        return cls(items=[item], total=1, page_count=1)

    def to_dict(self) -> Dict[str, Any]:
        """JSON shape returned by the search endpoint."""
        return {
            "posts": [item.to_dict() for item in self.items],
            "total": self.total,
            "pages": self.page_count,
        }


@dataclass(frozen=True)
class ScanWindow:
    """Publication date range, inclusive on both ends."""
    after: date
    before: date

    @classmethod
    def last_days(cls, days: int, today: Optional[date] = None) -> "ScanWindow":
        today = today or date.today()
        return cls(after=today - timedelta(days=days), before=today)

    @property
    def is_empty(self) -> bool:
        return self.after > self.before

    @property
    def start(self) -> datetime:
        """First instant inside the window."""
        return datetime.combine(self.after, time.min)

    @property
    def end(self) -> datetime:
        """First instant after the window (the whole ``before`` day is inside)."""
        return datetime.combine(self.before + timedelta(days=1), time.min)
