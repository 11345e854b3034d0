"""Structured detection of block delimiters in post content.

Block markers are HTML comments of the form::

    <!-- wp:namespace/name {"json": "attrs"} /-->      (void)
    <!-- wp:namespace/name {"json": "attrs"} -->       (opener)
    <!-- /wp:namespace/name -->                        (closer)

Unlike a substring test, a delimiter is only recognised when the block name
ends where the delimiter says it does, the comment is terminated, and any
attributes are a JSON object.
"""

from __future__ import annotations
import json
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator

from ..entities import Marker

_DELIMITER_RE = re.compile(
    r'<!--\s+(?P<closer>/)?wp:(?P<name>[a-z][a-z0-9_-]*(?:/[a-z][a-z0-9_-]*)?)\s+'
    r'(?:(?P<attrs>\{(?:[^}]|\}(?!\s+/?-->))*\})\s+)?'
    r'(?P<void>/)?-->',
    re.DOTALL,
)


class DelimiterKind(Enum):
    OPENER = "opener"
    VOID = "void"
    CLOSER = "closer"


@dataclass(frozen=True)
class BlockDelimiter:
    """One parsed block comment."""
    name: str
    kind: DelimiterKind
    attrs: Dict[str, Any] = field(default_factory=dict)
    offset: int = 0


def normalize_block_name(name: str) -> str:
    """Blocks without a namespace belong to ``core``."""
    return name if "/" in name else f"core/{name}"


def iter_block_delimiters(content: str) -> Iterator[BlockDelimiter]:
    """Yield every well-formed block delimiter in ``content``.

    Delimiters whose attributes are not a JSON object are skipped.
    """
    pos = 0
    while True:
        match = _DELIMITER_RE.search(content, pos)
        if match is None:
            return
        pos = match.end()
        if match.group("closer"):
            kind = DelimiterKind.CLOSER
        elif match.group("void"):
            kind = DelimiterKind.VOID
        else:
            kind = DelimiterKind.OPENER

        attrs: Any = {}
        raw_attrs = match.group("attrs")
        if raw_attrs:
            try:
                attrs = json.loads(raw_attrs)
            except ValueError:
                attrs = None
            if not isinstance(attrs, dict):
                # Bad attributes may have swallowed later delimiters; rescan inside them
                pos = match.start() + 4
                continue

        yield BlockDelimiter(
            name=normalize_block_name(match.group("name")),
            kind=kind,
            attrs=attrs,
            offset=match.start(),
        )


def contains_marker(content: str, marker: Marker) -> bool:
    """True when ``content`` holds a genuine opening or void delimiter for ``marker``."""
    target = normalize_block_name(marker.block_name)
    return any(
        delimiter.name == target and delimiter.kind is not DelimiterKind.CLOSER
        for delimiter in iter_block_delimiters(content)
    )
