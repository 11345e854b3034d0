"""Test cases for resolving and rendering stored references."""

import pytest

from post_finder.domain.entities import MAX_DOCUMENT_ID, PostStatus, Reference, RenderedFragment
from post_finder.domain.services import ReferenceResolver, ResultFormatter

from conftest import make_document


class TestResolve:

    def test_unset_reference_never_touches_store(self, reference_resolver, mock_document_repository):
        assert reference_resolver.resolve(Reference()) is None
        assert reference_resolver.resolve(Reference(document_id=0)) is None
        assert mock_document_repository.calls == []

    def test_published_post(self, reference_resolver, mock_document_repository):
        mock_document_repository.save_document(make_document(42, title="Hello"))

        fragment = reference_resolver.resolve(Reference(document_id=42))

        assert fragment == RenderedFragment(title="Hello", url="https://example.test/?p=42")

    @pytest.mark.parametrize("status", [PostStatus.DRAFT, PostStatus.OTHER])
    def test_unpublished_post(self, reference_resolver, mock_document_repository, status):
        mock_document_repository.save_document(make_document(7, status=status))

        assert reference_resolver.resolve(Reference(document_id=7)) is None

    def test_missing_post(self, reference_resolver):
        assert reference_resolver.resolve(Reference(document_id=999)) is None

    @pytest.mark.parametrize("document_id", [MAX_DOCUMENT_ID + 1, 10 ** 20])
    def test_id_beyond_store_range(self, sqlite_store, formatter, document_id):
        resolver = ReferenceResolver(sqlite_store, formatter)

        assert resolver.resolve(Reference(document_id=document_id)) is None
        assert resolver.render(Reference(document_id=document_id)) == ""

    def test_reference_follows_current_title(self, reference_resolver, mock_document_repository):
        mock_document_repository.save_document(make_document(3, title="Old"))
        mock_document_repository.save_document(make_document(3, title="New"))

        assert reference_resolver.resolve(Reference(document_id=3)).title == "New"


class TestRender:

    def test_render_published(self, reference_resolver, mock_document_repository):
        mock_document_repository.save_document(make_document(42, title="Hello"))

        html = reference_resolver.render(Reference(document_id=42))

        assert html == (
            '<p class="dmg-read-more">Read More: '
            '<a href="https://example.test/?p=42">Hello</a></p>'
        )

    def test_render_escapes_title(self, reference_resolver, mock_document_repository):
        mock_document_repository.save_document(make_document(5, title='Fish & <b>Chips</b>'))

        html = reference_resolver.render(Reference(document_id=5))

        assert "Fish &amp; &lt;b&gt;Chips&lt;/b&gt;" in html
        assert "<b>" not in html

    def test_render_escapes_url(self, mock_document_repository):
        formatter = ResultFormatter("https://example.test", '{site_url}/?p={id}&x="y"')
        mock_document_repository.save_document(make_document(5))

        html = ReferenceResolver(mock_document_repository, formatter).render(Reference(document_id=5))

        assert 'href="https://example.test/?p=5&amp;x=&quot;y&quot;"' in html

    @pytest.mark.parametrize("reference", [Reference(), Reference(document_id=404)])
    def test_render_unresolved_is_empty(self, reference_resolver, reference):
        assert reference_resolver.render(reference) == ""

    def test_render_draft_is_empty(self, reference_resolver, mock_document_repository):
        mock_document_repository.save_document(make_document(8, status=PostStatus.DRAFT))

        assert reference_resolver.render(Reference(document_id=8)) == ""
