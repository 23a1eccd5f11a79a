"""In-memory filtering and pagination over fully materialized record lists.

Used where the upstream cannot search or paginate natively: the records are
aggregated first (by a full scan or a name/model query), then filtered with a
case-insensitive substring predicate and sliced into the caller's page.
"""

import math
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from .models import Page
from .pagination import BaseIndex

T = TypeVar("T")

Predicate = Callable[[Any], bool]


def text_contains(field: str, query: str) -> Predicate:
    """Predicate matching records whose ``field`` contains ``query``, ignoring case.

    A missing or ``None`` field never matches. Works on models and on mappings.
    """
    needle = query.casefold()

    def predicate(record: Any) -> bool:
        if isinstance(record, dict):
            value = record.get(field)
        else:
            value = getattr(record, field, None)
        if value is None:
            return False
        return needle in str(value).casefold()

    return predicate


def _unpaged(records: list[T], base: BaseIndex | int) -> Page[T]:
    return Page(
        content=records,
        page_number=int(base),
        page_size=len(records),
        total_elements=len(records),
        total_pages=1 if records else 0,
        first=True,
        last=True,
    )


def paginate(
    records: Sequence[T],
    page: int | None,
    size: int | None,
    base: BaseIndex | int = BaseIndex.ZERO,
) -> Page[T]:
    """Slice ``records`` into one page, preserving order.

    A page past the end is empty but keeps ``total_elements = len(records)``,
    which tells "out of range" apart from "nothing matched". Without a page or
    a positive size the whole sequence is returned as a single page.
    """
    items = list(records)
    if page is None or size is None or size <= 0:
        return _unpaged(items, base)

    total = len(items)
    total_pages = math.ceil(total / size)
    offset = (page - int(base)) * size
    first = page == int(base)
    if offset < 0 or offset >= total:
        return Page(
            content=[],
            page_number=page,
            page_size=size,
            total_elements=total,
            total_pages=total_pages,
            first=first,
            last=True,
        )

    end = min(offset + size, total)
    return Page(
        content=items[offset:end],
        page_number=page,
        page_size=size,
        total_elements=total,
        total_pages=total_pages,
        first=first,
        last=end >= total,
    )


def search_and_paginate(
    records: Sequence[T],
    predicate: Predicate,
    page: int | None,
    size: int | None,
    base: BaseIndex | int = BaseIndex.ZERO,
) -> Page[T]:
    """Filter ``records`` with ``predicate`` and return the requested page."""
    filtered = [record for record in records if predicate(record)]
    return paginate(filtered, page, size, base)
