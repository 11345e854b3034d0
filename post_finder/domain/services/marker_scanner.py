"""Marker scan strategies.

Two interchangeable ways of finding the published posts in a date window
whose content embeds a block marker:

``PushdownMarkerScanner``
    Pushes a literal "content contains the marker prefix" predicate into
    the store next to the status/date filter and gets ids straight back.
    One pass at the storage layer, no post bodies transferred. It also
    counts text that merely starts like a marker (a longer block name, an
    unterminated or malformed delimiter) as a hit. That false-positive risk
    is accepted for roughly a third of the latency.

``VerificationMarkerScanner``
    Fetches every published post in the window in fixed-size batches and
    runs the block parser over each body, emitting only posts that hold a
    genuine delimiter. No false positives, but cost grows with the number
    of candidates rather than the number of matches.

Both return ids in ascending order and raise ``StoreUnavailable`` without
partial output when the store fails.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List

from ..entities import Marker, ScanWindow
from ..repositories import DocumentRepository
from .block_parser import contains_marker
from ...exceptions import ConfigurationError
from ...logging_config import get_logger

logger = get_logger(__name__)


class ScanStrategy(Enum):
    """Marker scan strategies."""
    PUSHDOWN = "pushdown"
    VERIFICATION = "verification"


class MarkerScanner(ABC):
    """Find published post ids in a window whose content embeds a marker."""

    strategy: ScanStrategy

    def __init__(self, document_repository: DocumentRepository):
        self._document_repo = document_repository

    def scan(self, window: ScanWindow, marker: Marker) -> List[int]:
        if window.is_empty:
            logger.warning(f"Scan window is inverted ({window.after} > {window.before}); nothing to scan")
            return []
        ids = self._scan(window, marker)
        logger.info(
            f"{self.strategy.value} scan for {marker.block_name} "
            f"between {window.after} and {window.before}: {len(ids)} match(es)"
        )
        return ids

    @abstractmethod
    def _scan(self, window: ScanWindow, marker: Marker) -> List[int]:
        pass


class PushdownMarkerScanner(MarkerScanner):
    """Literal prefix match evaluated by the store. May over-report."""

    strategy = ScanStrategy.PUSHDOWN

    def _scan(self, window: ScanWindow, marker: Marker) -> List[int]:
        return self._document_repo.find_published_ids_containing(window, marker.prefix)


class VerificationMarkerScanner(MarkerScanner):
    """Batch-fetch candidates and confirm each with the block parser."""

    strategy = ScanStrategy.VERIFICATION

    def __init__(self, document_repository: DocumentRepository, batch_size: int = 100):
        super().__init__(document_repository)
        if batch_size < 1:
            raise ConfigurationError(
                message="Scan batch size must be positive",
                details={"batch_size": batch_size}
            )
        self.batch_size = batch_size

    def _scan(self, window: ScanWindow, marker: Marker) -> List[int]:
        matches: List[int] = []
        last_id = 0
        candidates = 0
        while True:
            batch = self._document_repo.list_published_in_window(
                window, limit=self.batch_size, after_id=last_id
            )
            if not batch:
                break
            candidates += len(batch)
            matches.extend(doc.id for doc in batch if contains_marker(doc.content, marker))
            last_id = batch[-1].id
            if len(batch) < self.batch_size:
                break
        logger.debug(f"Verified {candidates} candidate(s), {len(matches)} confirmed")
        return matches


def create_marker_scanner(
    strategy,
    document_repository: DocumentRepository,
    batch_size: int = 100
) -> MarkerScanner:
    """Build the scanner for ``strategy`` (a ScanStrategy or its string value)."""
    try:
        strategy = ScanStrategy(strategy)
    except ValueError:
        raise ConfigurationError(
            message=f"Unknown scan strategy: {strategy!r}",
            details={"allowed": [s.value for s in ScanStrategy]}
        ) from None

    if strategy is ScanStrategy.VERIFICATION:
        return VerificationMarkerScanner(document_repository, batch_size=batch_size)
    return PushdownMarkerScanner(document_repository)
