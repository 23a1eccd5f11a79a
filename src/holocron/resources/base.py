# holocron/resources/base.py
"""Resource mixins composing the client facade into per-resource operations.

Each concrete resource client inherits ``BaseResourceClient`` plus the mixins
matching what the upstream can do for that resource:

* ``GettableMixin``: lookup by uid.
* ``PageableMixin``: native upstream pagination through the page bridge.
* ``BufferedPageableMixin``: pagination emulated over a full scan, for
  resources the upstream returns in one un-paginated block.
* ``ScanSearchMixin``: free-text search emulated over a full scan.
* ``NameQuerySearchMixin`` / ``ModelQuerySearchMixin``: search delegated to the
  upstream ``?name=``/``?model=`` query, then re-filtered locally so matching
  is case-insensitive substring containment whatever the upstream does.

Page arguments follow the caller's convention, given by ``base`` (zero-based
by default). Passing no ``page``/``size`` to a search returns every match as
one page.
"""

from typing import TYPE_CHECKING, Any, Protocol

from ..constants import DEFAULT_PAGE_SIZE
from ..filtering import Predicate, paginate, search_and_paginate, text_contains
from ..log_config import logger
from ..models import Page, SwapiEntity
from ..pagination import BaseIndex, PageRequest, to_internal_page

if TYPE_CHECKING:
    from ..client import HolocronClient


class ResourceClientProtocol(Protocol):
    """Attributes the mixins rely on."""

    _api_client: "HolocronClient"
    _entity_path: str
    _entity_model: type[SwapiEntity]


class BaseResourceClient:
    """Base class for all resource clients.

    Attributes:
        _api_client: The ``HolocronClient`` facade used for upstream calls.
        _entity_path: Upstream path of the resource (e.g. "films"). Must be
            defined by concrete subclasses.
        _entity_model: Pydantic model records are decoded into.
    """

    _entity_path: str = ""
    _entity_model: type[SwapiEntity] = SwapiEntity

    def __init__(self, api_client: "HolocronClient"):
        if not self._entity_path:
            raise TypeError(f"{self.__class__.__name__} must define _entity_path")
        self._api_client = api_client
        logger.debug(f"{self.__class__.__name__} initialized for path: {self._entity_path}")

    @property
    def search_field(self) -> str:
        """Attribute free-text searches match against."""
        return self._entity_model.search_field


def _page_request(
    page: int | None, size: int | None, base: BaseIndex | int
) -> PageRequest | None:
    """A validated request, or None when the caller asked for everything."""
    if page is None or size is None or size <= 0:
        return None
    return PageRequest.of(page, size, base)


def _filtered_page(
    records: list[Any],
    predicate: Predicate,
    page: int | None,
    size: int | None,
    base: BaseIndex | int,
) -> Page[Any]:
    request = _page_request(page, size, base)
    if request is None:
        return search_and_paginate(records, predicate, None, None, base)
    return search_and_paginate(
        records, predicate, request.number, request.size, request.base
    )


class GettableMixin:
    """Lookup of a single entity by its upstream uid."""

    async def get(self: ResourceClientProtocol, uid: str) -> Any:
        """Return the entity, or None when the upstream cannot produce it."""
        logger.info(f"Fetching {self._entity_path} with uid: {uid}")
        return await self._api_client.fetch_by_id(
            self._entity_path, uid, self._entity_model
        )


class PageableMixin:
    """Pages served natively by the upstream's page/limit parameters."""

    async def list_page(
        self: ResourceClientProtocol,
        page: int | None = None,
        size: int = DEFAULT_PAGE_SIZE,
        base: BaseIndex | int = BaseIndex.ZERO,
    ) -> Page[Any]:
        """Return one page. ``page`` defaults to the first page of ``base``.

        Raises:
            ValidationError: If the page is below ``base`` or the size is not positive.
        """
        request = PageRequest.of(int(base) if page is None else page, size, base)
        upstream_page, limit = request.to_upstream()
        logger.info(
            f"Listing {self._entity_path}: page={request.number} (base {int(request.base)}), "
            f"size={request.size} -> upstream page={upstream_page}, limit={limit}"
        )
        envelope = await self._api_client.fetch_page(
            self._entity_path, upstream_page, limit, self._entity_model
        )
        return to_internal_page(envelope, request.number, request.size, request.base)


class BufferedPageableMixin:
    """Pages emulated over a full scan, for resources served in one block."""

    async def list_page(
        self: ResourceClientProtocol,
        page: int | None = None,
        size: int = DEFAULT_PAGE_SIZE,
        base: BaseIndex | int = BaseIndex.ZERO,
    ) -> Page[Any]:
        request = PageRequest.of(int(base) if page is None else page, size, base)
        logger.info(
            f"Listing {self._entity_path} in memory: page={request.number} "
            f"(base {int(request.base)}), size={request.size}"
        )
        scan = await self._api_client.scan_all(self._entity_path, self._entity_model)
        result = paginate(scan.items, request.number, request.size, request.base)
        return result.model_copy(update={"truncated": scan.truncated})


class ScanSearchMixin:
    """Free-text search over a full scan of the resource."""

    async def search(
        self: ResourceClientProtocol,
        text: str,
        page: int | None = None,
        size: int | None = None,
        base: BaseIndex | int = BaseIndex.ZERO,
    ) -> Page[Any]:
        """Case-insensitive substring search on the resource's search field."""
        field = self._entity_model.search_field
        logger.info(f"Searching {self._entity_path} by scan: {field} contains '{text}'")
        # Validate paging before spending a full scan on it.
        _page_request(page, size, base)
        scan = await self._api_client.scan_all(self._entity_path, self._entity_model)
        result = _filtered_page(scan.items, text_contains(field, text), page, size, base)
        return result.model_copy(update={"truncated": scan.truncated})


class NameQuerySearchMixin:
    """Free-text search through the upstream ``?name=`` query."""

    async def search(
        self: ResourceClientProtocol,
        text: str,
        page: int | None = None,
        size: int | None = None,
        base: BaseIndex | int = BaseIndex.ZERO,
    ) -> Page[Any]:
        """Case-insensitive substring search on ``name``."""
        logger.info(f"Searching {self._entity_path} by upstream name query: '{text}'")
        _page_request(page, size, base)
        records = await self._api_client.fetch_by_name(
            self._entity_path, text, self._entity_model
        )
        return _filtered_page(records, text_contains("name", text), page, size, base)


class ModelQuerySearchMixin:
    """Search through the upstream ``?model=`` query (starships and vehicles)."""

    async def search_by_model(
        self: ResourceClientProtocol,
        text: str,
        page: int | None = None,
        size: int | None = None,
        base: BaseIndex | int = BaseIndex.ZERO,
    ) -> Page[Any]:
        """Case-insensitive substring search on ``model``."""
        logger.info(f"Searching {self._entity_path} by upstream model query: '{text}'")
        _page_request(page, size, base)
        records = await self._api_client.fetch_by_model(
            self._entity_path, text, self._entity_model
        )
        return _filtered_page(records, text_contains("model", text), page, size, base)
