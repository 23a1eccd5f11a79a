# holocron/session.py
"""Main user-facing session class for the Star Wars catalog adapter."""

from .auth import AuthStrategy
from .client import HolocronClient
from .config import HolocronSettings, get_settings
from .log_config import configure_logging, logger
from .resources import FilmsClient, PeopleClient, StarshipsClient, VehiclesClient


class HolocronSession:
    """High-level entry point owning one ``HolocronClient``.

    The session configures logging at the settings' ``log_level``, builds the
    client and closes it when done. It supports asynchronous context
    management (`async with`).

    Example:
    ```python
    async with HolocronSession(timeout=10) as session:
        page = await session.people.list_page(0, size=10)
        hits = await session.films.search("hope")
    ```
    """

    def __init__(
        self,
        settings: HolocronSettings | None = None,
        auth_strategy: AuthStrategy | None = None,
        timeout: float | None = None,
        base_url: str | None = None,
    ):
        """Initializes the session and its underlying ``HolocronClient``.

        Args:
            settings: Optional settings; defaults to ``get_settings()``.
            auth_strategy: Optional strategy passed through to the client.
            timeout: Overrides the request timeout (seconds) for this session.
            base_url: Overrides the upstream base URL for this session.
        """
        current_settings = settings or get_settings()
        if timeout is not None:
            logger.debug(f"Overriding request timeout for this session to: {timeout}s")
            current_settings = current_settings.model_copy(
                update={"request_timeout": timeout}
            )

        configure_logging(current_settings.log_level)

        self._api_client = HolocronClient(
            settings=current_settings,
            auth_strategy=auth_strategy,
            base_url=base_url,
        )
        logger.info(
            f"HolocronSession initialized for API: {base_url or current_settings.base_url}"
        )

    @property
    def client(self) -> HolocronClient:
        """The underlying facade, for direct ``fetch_*`` calls."""
        return self._api_client

    @property
    def films(self) -> FilmsClient:
        return self._api_client.films

    @property
    def people(self) -> PeopleClient:
        return self._api_client.people

    @property
    def starships(self) -> StarshipsClient:
        return self._api_client.starships

    @property
    def vehicles(self) -> VehiclesClient:
        return self._api_client.vehicles

    async def close(self) -> None:
        """Closes the underlying HTTP client session."""
        await self._api_client.aclose()

    async def __aenter__(self) -> "HolocronSession":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
