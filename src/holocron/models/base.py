"""Base Pydantic models for upstream entities and page envelopes.

This module defines the structures shared by every resource: the common
identity fields of an upstream entity, the internal ``PageEnvelope`` rebuilt
from the upstream's cursor-paged responses, and the caller-facing ``Page``.
"""

from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class SwapiEntity(BaseModel):
    """A base model for upstream catalog entities (films, people, ...).

    Records reach this model already flattened by the normalizer, so the only
    identity fields are the upstream-issued ``uid`` and the storage ``_id``.
    Unknown fields (``created``, ``edited``, relation lists, ...) are dropped
    so that new upstream fields never break decoding.

    Attributes:
        uid: Upstream identifier, coerced to a string.
        internal_id: The upstream's storage identifier (``_id``), if sent.
        url: Canonical upstream URL of the entity.
        search_field: Name of the attribute free-text searches match against.
    """

    search_field: ClassVar[str] = "name"

    uid: str
    internal_id: str | None = Field(default=None, alias="_id")
    url: str | None = None

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @field_validator("uid", "internal_id", mode="before")
    @classmethod
    def coerce_identifier(cls, v: Any) -> Any:
        """Accept integer identifiers, which some upstream mirrors emit."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class PageEnvelope(BaseModel, Generic[T]):
    """Internal page model rebuilt from a cursor-paged upstream response.

    ``next`` is opaque; a non-empty value is the only continuation signal.
    Missing metadata stays ``None`` and is read as 0 by the pagination bridge.
    """

    results: list[T] = Field(default_factory=list)
    total_records: int | None = None
    total_pages: int | None = None
    previous: str | None = None
    next: str | None = None
    message: str | None = None

    @property
    def has_next(self) -> bool:
        return bool(self.next and self.next.strip())

    @classmethod
    def empty(cls) -> "PageEnvelope[T]":
        """An envelope with no results and null metadata."""
        return cls()


class Page(BaseModel, Generic[T]):
    """Caller-facing page.

    ``page_number`` follows the caller's own convention (zero- or one-based)
    and is echoed back, never recomputed. The model serializes with camelCase
    aliases (``pageNumber``, ``totalElements``) for the outward API.

    ``truncated`` is set when the page was computed from a full scan that hit
    the page cap, meaning some upstream records were never seen.
    """

    content: list[T] = Field(default_factory=list)
    page_number: int
    page_size: int
    total_elements: int
    total_pages: int
    first: bool
    last: bool
    truncated: bool = False

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
