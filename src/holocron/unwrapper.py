# holocron/unwrapper.py
"""Upstream response normalization.

The upstream answers in three shapes that depend on the query rather than on
the resource:

```json
{"result": [{"uid": "1", "_id": "a1", "properties": {"title": "A New Hope"}}]}
{"result": {"uid": "1", "properties": {"name": "Luke Skywalker"}}}
{"results": [{"uid": "1", "name": "Luke Skywalker", "url": "..."}],
 "total_records": 82, "total_pages": 9, "previous": null, "next": "..."}
```

Plain listings of some resources and every ``?name=``/``?model=`` query use the
flat ``result`` key (a list, or a single object for lookups by id), with the
payload nested under ``properties``. Paginated listings use ``results`` with
flat records and cursor metadata. The shape is detected once per response by
structure alone and then handled in one ``match``.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, TypeAlias, runtime_checkable

from .log_config import logger
from .models import PageEnvelope

RawRecord: TypeAlias = dict[str, Any]


@dataclass(frozen=True)
class FlatShape:
    """Body keyed by ``result``: no pagination metadata, items may nest ``properties``."""

    items: list[Any]


@dataclass(frozen=True)
class CursorPagedShape:
    """Body keyed by ``results``: flat records plus cursor metadata."""

    records: list[Any]
    total_records: Any = None
    total_pages: Any = None
    previous: Any = None
    next: Any = None
    message: Any = None


@dataclass(frozen=True)
class UnrecognizedShape:
    """Body matching none of the known shapes."""

    keys: list[str] = field(default_factory=list)


Shape: TypeAlias = FlatShape | CursorPagedShape | UnrecognizedShape


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    # A lookup by id returns a single object under "result".
    return [value]


def detect_shape(raw: Any) -> Shape:
    """Classify a decoded response body. ``result`` is checked before ``results``."""
    if not isinstance(raw, Mapping):
        return UnrecognizedShape(keys=[])
    if "result" in raw:
        return FlatShape(items=_as_list(raw["result"]))
    if "results" in raw:
        return CursorPagedShape(
            records=_as_list(raw["results"]),
            total_records=raw.get("total_records"),
            total_pages=raw.get("total_pages"),
            previous=raw.get("previous"),
            next=raw.get("next"),
            message=raw.get("message"),
        )
    return UnrecognizedShape(keys=sorted(str(k) for k in raw))


def merge_properties(item: Any) -> Any:
    """Flatten one flat-shape item into its effective record.

    With a ``properties`` mapping, the record is a copy of it with the outer
    ``uid`` and ``_id`` copied in; outer values win over inner ones. Without
    it, the item itself is the record. The input is never mutated. Non-mapping
    items are returned unchanged and left for the decoder to reject.
    """
    if not isinstance(item, Mapping):
        return item
    properties = item.get("properties")
    if not isinstance(properties, Mapping):
        return dict(item)
    merged = dict(properties)
    for key in ("uid", "_id"):
        if key in item:
            merged[key] = item[key]
    return merged


def _coerce_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        logger.warning(f"Could not coerce pagination value {value!r} to int.")
        return None


def _coerce_cursor(value: Any) -> str | None:
    if value is None:
        return None
    cursor = str(value).strip()
    return cursor or None


@runtime_checkable
class ResponseUnwrapper(Protocol):
    """Protocol for turning an upstream response body into flat records.

    The client and the full-scan aggregator only talk to this interface, so a
    different upstream with its own envelope can be supported by supplying a
    different implementation.
    """

    def normalize(self, response_json: Any) -> list[RawRecord]:
        """Return the flat records carried by the body, in upstream order."""
        ...

    def to_envelope(self, response_json: Any) -> PageEnvelope[Any]:
        """Return the records together with whatever pagination metadata exists."""
        ...

    def unwrap_single_item(self, response_json: Any) -> RawRecord | None:
        """Return the single record of a lookup response, or None."""
        ...

    def get_next_page_token(self, response_json: Any) -> str | None:
        """Return the continuation cursor, or None when no page follows."""
        ...

    def get_total_results(self, response_json: Any) -> int | None:
        """Return the upstream's total record count, if it reports one."""
        ...


class SwapiUnwrapper(ResponseUnwrapper):
    """``ResponseUnwrapper`` for the three upstream response shapes."""

    def normalize(self, response_json: Any) -> list[RawRecord]:
        """Produce the uniform sequence of flat records for any known shape.

        Unrecognized bodies yield an empty list and a warning; callers treat
        them as "no results".
        """
        match detect_shape(response_json):
            case FlatShape(items=items):
                return [merge_properties(item) for item in items]
            case CursorPagedShape(records=records):
                return list(records)
            case UnrecognizedShape(keys=keys):
                logger.warning(
                    f"Unrecognized upstream response shape (keys: {keys}). "
                    "Treating it as an empty result."
                )
                return []

    def to_envelope(self, response_json: Any) -> PageEnvelope[Any]:
        shape = detect_shape(response_json)
        records = self.normalize(response_json)
        if isinstance(shape, CursorPagedShape):
            return PageEnvelope[Any](
                results=records,
                total_records=_coerce_int(shape.total_records),
                total_pages=_coerce_int(shape.total_pages),
                previous=_coerce_cursor(shape.previous),
                next=_coerce_cursor(shape.next),
                message=shape.message if isinstance(shape.message, str) else None,
            )
        return PageEnvelope[Any](results=records)

    def unwrap_single_item(self, response_json: Any) -> RawRecord | None:
        records = self.normalize(response_json)
        return records[0] if records else None

    def get_next_page_token(self, response_json: Any) -> str | None:
        shape = detect_shape(response_json)
        if isinstance(shape, CursorPagedShape):
            return _coerce_cursor(shape.next)
        return None

    def get_total_results(self, response_json: Any) -> int | None:
        shape = detect_shape(response_json)
        if isinstance(shape, CursorPagedShape):
            return _coerce_int(shape.total_records)
        return None
