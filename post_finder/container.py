"""Dependency injection container for Clean Architecture."""

from typing import Dict, Optional

from .domain.entities import Marker
from .domain.repositories import DocumentRepository
from .domain.services import (
    ResultFormatter, SearchService, MarkerScanner, ReferenceResolver, ScanStrategy, create_marker_scanner
)
from .infrastructure.storage import SqliteDocumentStore
from .application.use_cases import SearchPostsUseCase, FindMarkedPostsUseCase
from .config import (
    DB_PATH, SITE_URL, PERMALINK_TEMPLATE, MARKER_BLOCK_NAME,
    SCAN_STRATEGY, SCAN_BATCH_SIZE, SCAN_DEFAULT_DAYS, DEFAULT_PER_PAGE
)
from .logging_config import get_logger

logger = get_logger(__name__)


class Container:
    """Dependency injection container."""

    def __init__(self, db_path: Optional[str] = None):
        self._db_path = db_path or DB_PATH
        self._document_repository: Optional[DocumentRepository] = None
        self._result_formatter: Optional[ResultFormatter] = None
        self._search_service: Optional[SearchService] = None
        self._marker_scanners: Dict[str, MarkerScanner] = {}
        self._reference_resolver: Optional[ReferenceResolver] = None
        self._search_posts_use_case: Optional[SearchPostsUseCase] = None

    def document_repository(self) -> DocumentRepository:
        """Get document repository instance."""
        if self._document_repository is None:
            logger.info(f"Creating SqliteDocumentStore with path: {self._db_path}")
            self._document_repository = SqliteDocumentStore(self._db_path)
        return self._document_repository

    def result_formatter(self) -> ResultFormatter:
        if self._result_formatter is None:
            self._result_formatter = ResultFormatter(SITE_URL, PERMALINK_TEMPLATE)
        return self._result_formatter

    def search_service(self) -> SearchService:
        """Get search service instance."""
        if self._search_service is None:
            self._search_service = SearchService(
                document_repository=self.document_repository(),
                formatter=self.result_formatter()
            )
        return self._search_service

    def marker_scanner(self, strategy=None) -> MarkerScanner:
        """Get the scanner for ``strategy``, defaulting to the configured one."""
        strategy = strategy or SCAN_STRATEGY
        key = strategy.value if isinstance(strategy, ScanStrategy) else str(strategy).lower()
        if key not in self._marker_scanners:
            scanner = create_marker_scanner(key, self.document_repository(), batch_size=SCAN_BATCH_SIZE)
            logger.info(f"Creating {scanner.__class__.__name__}")
            self._marker_scanners[key] = scanner
        return self._marker_scanners[key]

    def marker(self) -> Marker:
        return Marker(MARKER_BLOCK_NAME)

    def reference_resolver(self) -> ReferenceResolver:
        """Get reference resolver instance."""
        if self._reference_resolver is None:
            self._reference_resolver = ReferenceResolver(
                document_repository=self.document_repository(),
                formatter=self.result_formatter()
            )
        return self._reference_resolver

    def search_posts_use_case(self) -> SearchPostsUseCase:
        """Get search posts use case instance."""
        if self._search_posts_use_case is None:
            self._search_posts_use_case = SearchPostsUseCase(
                search_service=self.search_service(),
                default_per_page=DEFAULT_PER_PAGE
            )
        return self._search_posts_use_case

    def find_marked_posts_use_case(self, strategy=None) -> FindMarkedPostsUseCase:
        return FindMarkedPostsUseCase(
            scanner=self.marker_scanner(strategy),
            marker=self.marker(),
            default_days=SCAN_DEFAULT_DAYS
        )

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._document_repository = None
        self._result_formatter = None
        self._search_service = None
        self._marker_scanners = {}
        self._reference_resolver = None
        self._search_posts_use_case = None
        logger.info("Container reset")


# Global container instance
container = Container()
