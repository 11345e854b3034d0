"""Domain services package."""

from .result_formatter import ResultFormatter
from .search_service import SearchService
from .marker_scanner import (
    MarkerScanner,
    PushdownMarkerScanner,
    VerificationMarkerScanner,
    ScanStrategy,
    create_marker_scanner
)
from .reference_resolver import ReferenceResolver

__all__ = [
    'ResultFormatter',
    'SearchService',
    'MarkerScanner',
    'PushdownMarkerScanner',
    'VerificationMarkerScanner',
    'ScanStrategy',
    'create_marker_scanner',
    'ReferenceResolver'
]
