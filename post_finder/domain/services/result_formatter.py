"""Projection of posts into their public search-result shape."""

from ..entities import Document, SearchResultItem


class ResultFormatter:
    """Build ``{id, title, url}`` items and permalinks.

    The title is the raw stored title. The consumer of the search API
    escapes it when rendering; escaping here would double-escape titles
    containing ``&``, ``<`` and the like. Anything that writes the title
    straight into markup must escape it itself.
    """

    def __init__(self, site_url: str, permalink_template: str = "{site_url}/?p={id}"):
        self._site_url = site_url.rstrip("/")
        self._permalink_template = permalink_template

    def permalink(self, document_id: int) -> str:
        return self._permalink_template.format(site_url=self._site_url, id=document_id)

    def format(self, document: Document) -> SearchResultItem:
        return SearchResultItem(
            id=document.id,
            title=document.title,
            url=self.permalink(document.id),
        )
