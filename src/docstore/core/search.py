"""Search criteria evaluation: one predicate per SearchRequest dimension"""

from datetime import datetime
from typing import Optional

from docstore.core.models import Document, SearchRequest


def matches_title(title: Optional[str], prefixes: Optional[list[str]]) -> bool:
    """True if no prefixes are given or title starts with any of them. None title never matches."""
    if not prefixes:
        return True
    if title is None:
        return False
    return any(title.startswith(p) for p in prefixes)


def matches_content(content: Optional[str], needles: Optional[list[str]]) -> bool:
    """True if no substrings are given or content contains any of them. None content never matches."""
    if not needles:
        return True
    if content is None:
        return False
    return any(n in content for n in needles)


def matches_author(doc: Document, author_ids: Optional[list[str]]) -> bool:
    """True if no author ids are given or the document's author id is one of them."""
    if not author_ids:
        return True
    return doc.author is not None and doc.author.id in author_ids


def matches_created(
    created: Optional[datetime],
    created_from: Optional[datetime],
    created_to: Optional[datetime],
    ) -> bool:
    """Inclusive range check; an open side is unconstrained. None created fails any set bound."""
    if created_from is None and created_to is None:
        return True
    if created is None:
        return False
    if created_from is not None and created < created_from:
        return False
    if created_to is not None and created > created_to:
        return False
    return True


def matches(doc: Document, request: SearchRequest) -> bool:
    """AND across all dimensions of request, OR within each multi-valued one."""
    return (
        matches_title(doc.title, request.title_prefixes)
        and matches_content(doc.content, request.contains_contents)
        and matches_author(doc, request.author_ids)
        and matches_created(doc.created, request.created_from, request.created_to)
    )
