"""Search predicates: one per SearchRequest field, combined with AND.

Every predicate matches when its filter is None or empty. Title prefixes and
content substrings are OR'd within their list, and all comparisons are
case-sensitive. The created range is inclusive at both ends.
"""

from collections.abc import Collection
from datetime import datetime
from typing import Optional

from docstore.models import Document, SearchRequest


def matches_title_prefixes(doc: Document, title_prefixes: Optional[list[str]]) -> bool:
    """True if the title starts with any of title_prefixes."""
    return not title_prefixes or any(doc.title.startswith(p) for p in title_prefixes)


def matches_contains_contents(doc: Document, contains_contents: Optional[list[str]]) -> bool:
    """True if the content contains any of contains_contents."""
    return not contains_contents or any(c in doc.content for c in contains_contents)


def matches_author_ids(doc: Document, author_ids: Optional[Collection[str]]) -> bool:
    return not author_ids or doc.author.id in author_ids


def matches_created_from(doc: Document, created_from: Optional[datetime]) -> bool:
    return created_from is None or doc.created >= created_from


def matches_created_to(doc: Document, created_to: Optional[datetime]) -> bool:
    return created_to is None or doc.created <= created_to


def matches(doc: Document, request: SearchRequest) -> bool:
    """True if doc satisfies every filter set on request."""
    return (
        matches_title_prefixes(doc, request.title_prefixes)
        and matches_contains_contents(doc, request.contains_contents)
        and matches_author_ids(doc, request.author_ids)
        and matches_created_from(doc, request.created_from)
        and matches_created_to(doc, request.created_to)
    )
