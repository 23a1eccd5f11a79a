from typing import TypeVar

import httpx
from pydantic import BaseModel

from .auth import AuthStrategy, NoAuth, StaticTokenAuth
from .base_client import BaseApiClient
from .config import HolocronSettings, get_settings
from .decoder import decode, decode_many
from .exceptions import FieldDecodeError, HolocronError, NotFoundError
from .log_config import logger
from .models import PageEnvelope
from .resources import FilmsClient, PeopleClient, StarshipsClient, VehiclesClient
from .scan import FullScanAggregator, ScanResult
from .unwrapper import ResponseUnwrapper, SwapiUnwrapper

ModelT = TypeVar("ModelT", bound=BaseModel)


class HolocronClient(BaseApiClient):
    """Asynchronous facade over the upstream Star Wars catalog API.

    Every upstream operation goes through one of five methods, and none of
    them raises: an upstream that fails, answers 404, or sends a body of an
    unknown shape produces an empty list, an empty envelope or ``None``, and
    the cause is logged. Records that fail to decode are dropped one by one.

    Resource clients built on these operations are available as properties.

    Typical usage:
    ```python
    async with HolocronClient() as client:
        luke = await client.people.get("1")
        page = await client.films.search("hope", page=0, size=10)
    ```

    Attributes:
        films (FilmsClient): Client for the films resource.
        people (PeopleClient): Client for the people resource.
        starships (StarshipsClient): Client for the starships resource.
        vehicles (VehiclesClient): Client for the vehicles resource.
    """

    def __init__(
        self,
        settings: HolocronSettings | None = None,
        auth_strategy: AuthStrategy | None = None,
        *,
        base_url: str | None = None,
        unwrapper: ResponseUnwrapper | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initializes the HolocronClient.

        Args:
            settings: Optional settings. If None, loaded via ``get_settings()``.
            auth_strategy: Optional explicit strategy. Otherwise a configured
                ``api_token`` selects StaticTokenAuth, else NoAuth.
            base_url: Overrides ``settings.base_url``.
            unwrapper: Overrides the default ``SwapiUnwrapper``.
            http_client: Optional pre-configured httpx.AsyncClient, left open on close.
        """
        self._settings: HolocronSettings = settings or get_settings()

        if auth_strategy is None:
            if self._settings.api_token:
                logger.info("Using Static Token authentication.")
                auth_strategy = StaticTokenAuth(token=self._settings.api_token)
            else:
                auth_strategy = NoAuth()

        super().__init__(
            settings=self._settings,
            auth_strategy=auth_strategy,
            base_url=base_url or self._settings.base_url,
            http_client=http_client,
        )

        self._response_unwrapper: ResponseUnwrapper = unwrapper or SwapiUnwrapper()
        self._scanner = FullScanAggregator(
            self,
            self._response_unwrapper,
            page_size=self._settings.full_scan_page_size,
            max_pages=self._settings.full_scan_max_pages,
            time_budget=self._settings.full_scan_time_budget,
        )

        self._films = FilmsClient(api_client=self)
        self._people = PeopleClient(api_client=self)
        self._starships = StarshipsClient(api_client=self)
        self._vehicles = VehiclesClient(api_client=self)

        logger.debug("HolocronClient initialized successfully.")

    @property
    def response_unwrapper(self) -> ResponseUnwrapper:
        return self._response_unwrapper

    @property
    def films(self) -> FilmsClient:
        return self._films

    @property
    def people(self) -> PeopleClient:
        return self._people

    @property
    def starships(self) -> StarshipsClient:
        return self._starships

    @property
    def vehicles(self) -> VehiclesClient:
        return self._vehicles

    # --- Upstream operations ---

    async def scan_all(self, resource: str, model: type[ModelT]) -> ScanResult[ModelT]:
        """Bounded full scan of ``resource``, including truncation details."""
        return await self._scanner.walk(resource, model)

    async def fetch_all(self, resource: str, model: type[ModelT]) -> list[ModelT]:
        """Every record of ``resource`` a bounded full scan can reach."""
        result = await self.scan_all(resource, model)
        return result.items

    async def fetch_by_id(
        self, resource: str, uid: str, model: type[ModelT]
    ) -> ModelT | None:
        """One record by upstream uid, or None if it cannot be produced."""
        path = f"{resource}/{uid}"
        try:
            body = await self.get_json(path)
        except NotFoundError:
            logger.info(f"{resource} '{uid}' not found upstream.")
            return None
        except HolocronError as e:
            logger.error(f"Error fetching {resource} with uid '{uid}': {e}")
            return None

        record = self._response_unwrapper.unwrap_single_item(body)
        if record is None:
            logger.warning(f"No record in upstream response for {resource} '{uid}'.")
            return None
        try:
            return decode(record, model)
        except FieldDecodeError as e:
            logger.warning(f"Could not decode {resource} '{uid}': {e}")
            return None

    async def fetch_page(
        self, resource: str, page: int, limit: int, model: type[ModelT]
    ) -> PageEnvelope[ModelT]:
        """One natively paginated upstream page (``page`` is one-based).

        On failure the envelope is empty with null metadata; it is never None.
        """
        try:
            body = await self.get_json(resource, params={"page": page, "limit": limit})
        except HolocronError as e:
            logger.error(f"Error fetching page {page} of {resource}: {e}")
            return PageEnvelope[model].empty()

        envelope = self._response_unwrapper.to_envelope(body)
        items = decode_many(envelope.results, model)
        logger.debug(f"Fetched page {page} of {resource}: {len(items)} record(s).")
        return PageEnvelope[model](
            results=items,
            total_records=envelope.total_records,
            total_pages=envelope.total_pages,
            previous=envelope.previous,
            next=envelope.next,
            message=envelope.message,
        )

    async def fetch_by_name(
        self, resource: str, name: str, model: type[ModelT]
    ) -> list[ModelT]:
        """Records matched by the upstream ``?name=`` query; [] on failure."""
        return await self._fetch_by_query(resource, "name", name, model)

    async def fetch_by_model(
        self, resource: str, model_query: str, model: type[ModelT]
    ) -> list[ModelT]:
        """Records matched by the upstream ``?model=`` query; [] on failure."""
        return await self._fetch_by_query(resource, "model", model_query, model)

    async def _fetch_by_query(
        self, resource: str, param: str, value: str, model: type[ModelT]
    ) -> list[ModelT]:
        try:
            body = await self.get_json(resource, params={param: value})
        except HolocronError as e:
            logger.error(f"Error querying {resource} with {param}='{value}': {e}")
            return []
        items = decode_many(self._response_unwrapper.normalize(body), model)
        logger.debug(f"Fetched {len(items)} {resource} record(s) with {param}='{value}'.")
        return items
