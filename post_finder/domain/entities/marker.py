"""Marker entity: the block delimiter that denotes an attached reference."""

from __future__ import annotations
import re
from dataclasses import dataclass

_BLOCK_NAME_RE = re.compile(r'^(?:[a-z][a-z0-9_-]*/)?[a-z][a-z0-9_-]*$')


@dataclass(frozen=True)
class Marker:
    """A block marker such as ``<!-- wp:dmg/post-finder {"postId":12} /-->``."""
    block_name: str

    def __post_init__(self) -> None:
        if not _BLOCK_NAME_RE.match(self.block_name):
            raise ValueError(f"Invalid block name: {self.block_name!r}")

    @property
    def prefix(self) -> str:
        """Literal text every delimiter of this block starts with."""
        return f"<!-- wp:{self.block_name}"
