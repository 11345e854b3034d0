"""Test cases for dependency injection container."""

import pytest

from post_finder.application.use_cases import FindMarkedPostsUseCase, SearchPostsUseCase
from post_finder.container import Container
from post_finder.domain.entities import Marker
from post_finder.domain.repositories import DocumentRepository
from post_finder.domain.services import (
    PushdownMarkerScanner, ReferenceResolver, ScanStrategy, SearchService, VerificationMarkerScanner
)
from post_finder.exceptions import ConfigurationError
from post_finder.infrastructure.storage import SqliteDocumentStore


class TestContainer:
    """Test dependency injection container."""

    def test_container_creation(self):
        container = Container(db_path=":memory:")

        assert container._document_repository is None
        assert container._search_service is None

    def test_singleton_behavior(self, test_container):
        assert test_container.document_repository() is test_container.document_repository()
        assert test_container.search_service() is test_container.search_service()
        assert test_container.reference_resolver() is test_container.reference_resolver()
        assert test_container.search_posts_use_case() is test_container.search_posts_use_case()

    def test_types(self, test_container):
        assert isinstance(test_container.document_repository(), DocumentRepository)
        assert isinstance(test_container.document_repository(), SqliteDocumentStore)
        assert isinstance(test_container.search_service(), SearchService)
        assert isinstance(test_container.reference_resolver(), ReferenceResolver)
        assert isinstance(test_container.search_posts_use_case(), SearchPostsUseCase)
        assert isinstance(test_container.find_marked_posts_use_case(), FindMarkedPostsUseCase)
        assert test_container.marker() == Marker("dmg/post-finder")

    def test_default_scanner_is_pushdown(self, test_container):
        assert isinstance(test_container.marker_scanner(), PushdownMarkerScanner)

    def test_scanners_cached_per_strategy(self, test_container):
        verification = test_container.marker_scanner("verification")

        assert isinstance(verification, VerificationMarkerScanner)
        assert test_container.marker_scanner(ScanStrategy.VERIFICATION) is verification
        assert test_container.marker_scanner("pushdown") is not verification

    def test_use_case_uses_requested_strategy(self, test_container):
        use_case = test_container.find_marked_posts_use_case("verification")
        assert isinstance(use_case.scanner, VerificationMarkerScanner)

    def test_unknown_strategy(self, test_container):
        with pytest.raises(ConfigurationError):
            test_container.marker_scanner("regex")

    def test_reset(self, test_container):
        repo = test_container.document_repository()
        test_container.reset()

        assert test_container._document_repository is None
        assert test_container._marker_scanners == {}
        repo.close()
