"""Resolution and rendering of stored "Read More" references."""

import html
from typing import Optional

from ..entities import Reference, RenderedFragment
from ..repositories import DocumentRepository
from .result_formatter import ResultFormatter
from ...logging_config import get_logger

logger = get_logger(__name__)

READ_MORE_TEMPLATE = '<p class="dmg-read-more">Read More: <a href="{url}">{title}</a></p>'


class ReferenceResolver:
    """Dereference a stored post id for display.

    Unset, missing and unpublished references all degrade to nothing so
    that the surrounding content still renders.
    """

    def __init__(self, document_repository: DocumentRepository, formatter: ResultFormatter):
        self._document_repo = document_repository
        self._formatter = formatter

    def resolve(self, reference: Reference) -> Optional[RenderedFragment]:
        if not reference.is_set:
            return None
        document = self._document_repo.get_document(reference.document_id)
        if document is None or not document.is_published:
            logger.debug(f"Reference to post {reference.document_id} is not displayable")
            return None
        return RenderedFragment(
            title=document.title,
            url=self._formatter.permalink(document.id),
        )

    def render(self, reference: Reference) -> str:
        """HTML for the reference, or an empty string when it does not resolve."""
        fragment = self.resolve(reference)
        if fragment is None:
            return ""
        return READ_MORE_TEMPLATE.format(
            url=html.escape(fragment.url, quote=True),
            title=html.escape(fragment.title, quote=False),
        )
