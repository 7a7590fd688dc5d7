"""Document, author and search request records"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes as UTC so every stored timestamp is comparable."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Author(BaseModel):
    """Embedded author value; the same author may appear on many documents."""
    id: Optional[str] = None
    name: Optional[str] = None


class Document(BaseModel):
    """A stored document. id and created are filled in by the store on save."""
    model_config = ConfigDict(validate_assignment=True)

    id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[Author] = None
    created: Optional[datetime] = None

    @field_validator("created")
    @classmethod
    def created_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)


class SearchRequest(BaseModel):
    """Optional filter criteria; None or empty means no constraint on that dimension."""
    model_config = ConfigDict(validate_assignment=True)

    title_prefixes:    Optional[list[str]] = None
    contains_contents: Optional[list[str]] = None
    author_ids:        Optional[list[str]] = None
    created_from:      Optional[datetime] = None   # inclusive
    created_to:        Optional[datetime] = None   # inclusive

    @field_validator("created_from", "created_to")
    @classmethod
    def bounds_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)
