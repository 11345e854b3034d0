"""Post Finder: search and bulk-scan posts for Read More references."""

__version__ = "1.0.0"
