"""Test configuration and fixtures."""

import os
import tempfile

# Keep test runs away from the real data directory and log files.
os.environ.setdefault("DATA_DIR", tempfile.mkdtemp(prefix="post_finder_test_"))
os.environ["LOG_TO_FILE"] = "false"
os.environ["SITE_URL"] = "https://example.test"

from datetime import date, datetime, time, timedelta
from typing import Generator, List, Optional, Tuple

import pytest

from post_finder.container import Container
from post_finder.domain.entities import Document, Marker, PostStatus, ScanWindow
from post_finder.domain.repositories import DocumentRepository
from post_finder.domain.services import ResultFormatter, SearchService, ReferenceResolver
from post_finder.infrastructure.storage import SqliteDocumentStore

TODAY = date(2024, 6, 30)
BLOCK = "dmg/post-finder"


def make_document(
    id: int,
    days_ago: int = 0,
    title: Optional[str] = None,
    content: str = "",
    status: PostStatus = PostStatus.PUBLISHED,
    at: time = time(12, 0),
) -> Document:
    return Document(
        id=id,
        title=title if title is not None else f"Post {id}",
        content=content,
        status=status,
        published_at=datetime.combine(TODAY - timedelta(days=days_ago), at),
    )


def marker_block(post_id: int = 1) -> str:
    return f'<!-- wp:{BLOCK} {{"postId":{post_id}}} /-->'


class MockDocumentRepository(DocumentRepository):
    """In-memory DocumentRepository for testing."""

    def __init__(self, documents: Optional[List[Document]] = None):
        self._documents = {doc.id: doc for doc in documents or []}
        self.calls: List[str] = []

    def get_document(self, document_id: int) -> Optional[Document]:
        self.calls.append("get_document")
        return self._documents.get(document_id)

    def search_published(self, term: str, limit: int, offset: int) -> Tuple[List[Document], int]:
        self.calls.append("search_published")
        words = [w.lower() for w in term.split()]
        matches = [
            doc for doc in self._documents.values()
            if doc.is_published and all(
                w in doc.title.lower() or w in doc.content.lower() for w in words
            )
        ]
        matches.sort(key=lambda d: (d.published_at, d.id), reverse=True)
        return matches[offset:offset + limit], len(matches)

    def _in_window(self, window: ScanWindow) -> List[Document]:
        return sorted(
            (doc for doc in self._documents.values()
             if doc.is_published and window.start <= doc.published_at < window.end),
            key=lambda d: d.id,
        )

    def find_published_ids_containing(self, window: ScanWindow, needle: str) -> List[int]:
        self.calls.append("find_published_ids_containing")
        return [doc.id for doc in self._in_window(window) if needle in doc.content]

    def list_published_in_window(self, window: ScanWindow, limit: int, after_id: int = 0) -> List[Document]:
        self.calls.append("list_published_in_window")
        return [doc for doc in self._in_window(window) if doc.id > after_id][:limit]

    def save_document(self, document: Document) -> int:
        self._documents[document.id] = document
        return document.id

    def count(self) -> int:
        return len(self._documents)

    def reset(self) -> None:
        self._documents.clear()


@pytest.fixture
def formatter() -> ResultFormatter:
    return ResultFormatter("https://example.test")


@pytest.fixture
def marker() -> Marker:
    return Marker(BLOCK)


@pytest.fixture
def mock_document_repository() -> MockDocumentRepository:
    return MockDocumentRepository()


@pytest.fixture
def search_service(mock_document_repository, formatter) -> SearchService:
    return SearchService(mock_document_repository, formatter)


@pytest.fixture
def reference_resolver(mock_document_repository, formatter) -> ReferenceResolver:
    return ReferenceResolver(mock_document_repository, formatter)


@pytest.fixture
def temp_storage_dir() -> Generator[str, None, None]:
    """Provide temporary directory for storage tests."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield temp_dir


@pytest.fixture
def sqlite_store(temp_storage_dir) -> Generator[SqliteDocumentStore, None, None]:
    store = SqliteDocumentStore(os.path.join(temp_storage_dir, "posts.db"))
    yield store
    store.close()


@pytest.fixture
def test_container(temp_storage_dir) -> Generator[Container, None, None]:
    """Container wired to a throwaway SQLite database."""
    container = Container(db_path=os.path.join(temp_storage_dir, "container.db"))
    yield container
    if container._document_repository is not None:
        container._document_repository.close()
