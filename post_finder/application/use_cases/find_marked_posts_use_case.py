"""Use case for the bulk marker scan."""

from datetime import date
from typing import List, Optional

from ...domain.entities import Marker, ScanWindow
from ...domain.services import MarkerScanner
from ...exceptions import InvalidArgument


def parse_scan_date(value: str, option: str) -> date:
    """Parse a ``YYYY-MM-DD`` command-line date."""
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        raise InvalidArgument(
            message=f"{option} must be a date in YYYY-MM-DD format, got {value!r}",
            details={"option": option, "value": value}
        ) from None


class FindMarkedPostsUseCase:
    """Find posts in a date window that embed the configured marker."""

    def __init__(self, scanner: MarkerScanner, marker: Marker, default_days: int = 30):
        self._scanner = scanner
        self._marker = marker
        self._default_days = default_days

    @property
    def scanner(self) -> MarkerScanner:
        return self._scanner

    def window_for(self, date_after: Optional[str] = None, date_before: Optional[str] = None,
                   today: Optional[date] = None) -> ScanWindow:
        """Build the scan window; missing bounds default to the last N days."""
        default = ScanWindow.last_days(self._default_days, today=today)
        after = parse_scan_date(date_after, "--date-after") if date_after else default.after
        before = parse_scan_date(date_before, "--date-before") if date_before else default.before
        return ScanWindow(after=after, before=before)

    def execute(self, window: ScanWindow) -> List[int]:
        return self._scanner.scan(window, self._marker)
