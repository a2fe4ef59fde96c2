"""Document, author and search request data models"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes as UTC so they compare against store timestamps."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Author(BaseModel):
    """The author of a document, embedded by value."""
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    id: str
    name: str = ""


class Document(BaseModel):
    """A stored document. id and created are filled in by the store on save."""
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    id: Optional[str] = None
    title: str
    content: str
    author: Author
    created: Optional[datetime] = None

    @field_validator("created")
    @classmethod
    def normalize_created(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)


class SearchRequest(BaseModel):
    """Optional search filters; an absent or empty field matches everything."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title_prefixes:    Optional[list[str]] = Field(default=None, description="Title starts with any of these")
    contains_contents: Optional[list[str]] = Field(default=None, description="Content contains any of these")
    author_ids:        Optional[set[str]]  = Field(default=None, description="Author id is one of these")
    created_from:      Optional[datetime]  = Field(default=None, description="Inclusive lower bound")
    created_to:        Optional[datetime]  = Field(default=None, description="Inclusive upper bound")

    @field_validator("created_from", "created_to")
    @classmethod
    def normalize_bounds(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)
