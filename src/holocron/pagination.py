"""Bridge between caller page conventions and the upstream's page/limit.

Callers count pages from 0 or from 1 (``BaseIndex``); the upstream always
counts from 1 and calls the page size ``limit``. ``PageRequest`` carries the
convention with the numbers so a zero-based page can never be passed where a
one-based one is expected.
"""

from enum import IntEnum
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ValidationError
from .models import Page, PageEnvelope


class BaseIndex(IntEnum):
    """The number a page convention gives its first page."""

    ZERO = 0
    ONE = 1


class PageRequest(BaseModel):
    """A page number and size, tagged with the convention they are expressed in."""

    number: int
    size: int = Field(ge=1)
    base: BaseIndex = BaseIndex.ZERO

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_number_against_base(self) -> Self:
        if self.number < self.base:
            raise ValueError(
                f"page {self.number} is below the first page ({int(self.base)}) "
                "of this convention"
            )
        return self

    @classmethod
    def of(cls, number: int, size: int, base: BaseIndex | int = BaseIndex.ZERO) -> Self:
        """Build a request, raising holocron's ``ValidationError`` on bad input."""
        try:
            return cls(number=number, size=size, base=BaseIndex(base))
        except (PydanticValidationError, ValueError) as e:
            raise ValidationError(f"Invalid page request: {e}") from e

    @classmethod
    def zero_based(cls, number: int, size: int) -> Self:
        return cls.of(number, size, BaseIndex.ZERO)

    @classmethod
    def one_based(cls, number: int, size: int) -> Self:
        return cls.of(number, size, BaseIndex.ONE)

    @property
    def offset(self) -> int:
        """Index of the first record of this page in the full sequence."""
        return (self.number - self.base) * self.size

    def to_upstream(self) -> tuple[int, int]:
        return to_upstream_page(self.number, self.size, self.base)


def to_upstream_page(
    page: int, size: int, base: BaseIndex | int = BaseIndex.ZERO
) -> tuple[int, int]:
    """Translate a caller page into the upstream's one-based ``(page, limit)``.

    >>> to_upstream_page(0, 10, BaseIndex.ZERO)
    (1, 10)
    >>> to_upstream_page(2, 10, BaseIndex.ONE)
    (2, 10)
    """
    return page - int(base) + 1, size


def to_internal_page(
    envelope: PageEnvelope[Any],
    page: int,
    size: int,
    base: BaseIndex | int = BaseIndex.ZERO,
) -> Page[Any]:
    """Rebuild a caller-facing ``Page`` from an upstream envelope.

    The page number is echoed, never inferred from the content. ``last`` is
    driven by the cursor alone, and the total always comes from this envelope,
    so a page past the end is an empty page that still reports the total.
    """
    return Page(
        content=list(envelope.results),
        page_number=page,
        page_size=size,
        total_elements=envelope.total_records or 0,
        total_pages=envelope.total_pages or 0,
        first=page == int(base),
        last=not envelope.has_next,
    )
