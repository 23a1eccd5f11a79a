"""HTTP transport for holocron.

This module provides ``BaseApiClient``, which owns the ``httpx.AsyncClient``,
applies authentication and request hooks, and maps every way an HTTP exchange
can fail onto the exception hierarchy in :mod:`holocron.exceptions`. It knows
nothing about upstream response shapes; that is the unwrapper's job.
"""

import ssl
from collections.abc import Mapping
from http import HTTPStatus
from typing import Any, Self

import certifi
import httpx
import tenacity
from tenacity import AsyncRetrying, stop_after_attempt, wait_exponential

from .auth import AuthStrategy, NoAuth
from .config import HolocronSettings
from .exceptions import (
    APIError,
    AuthError,
    HolocronError,
    HolocronRequestError,
    NetworkError,
    NotFoundError,
    TimeoutError,
)
from .log_config import logger
from .types import RequestData


class BaseApiClient:
    """Asynchronous HTTP transport for the upstream API.

    Retries are a transport setting (``max_retries``) and are off by default:
    a failed request surfaces as an exception on the first attempt and the
    layer above decides what an empty result means.

    Attributes:
        _settings: Configuration settings for the client.
        _base_url: The base URL for API requests.
        _retryable_status_codes: HTTP status codes that trigger a retry when
            retries are enabled.
        _auth_strategy: Authentication strategy instance.
        _http_client: The underlying httpx.AsyncClient for making requests.
        _should_close_client: Whether this instance created (and so owns) _http_client.
    """

    DEFAULT_RETRYABLE_STATUS_CODES: frozenset[int] = frozenset(
        [429, 500, 502, 503, 504]
    )
    """Default set of HTTP status codes considered retryable."""

    def __init__(
        self,
        settings: HolocronSettings,
        auth_strategy: AuthStrategy | None = None,
        *,
        base_url: str,
        http_client: httpx.AsyncClient | None = None,
        retryable_status_codes: frozenset[int] = DEFAULT_RETRYABLE_STATUS_CODES,
    ):
        """Initialize the BaseApiClient.

        Args:
            settings: Configuration settings for the client behavior.
            auth_strategy: Optional authentication strategy. If None, uses NoAuth.
            base_url: The base URL for API requests.
            http_client: Optional pre-configured httpx.AsyncClient instance. It
                is not closed by ``aclose()``.
            retryable_status_codes: Set of HTTP status codes to retry on.
        """
        self._settings = settings
        self._base_url: str = base_url.rstrip("/")
        self._retryable_status_codes: frozenset[int] = retryable_status_codes

        self._auth_strategy: AuthStrategy = auth_strategy or NoAuth()
        logger.info(
            f"Using authentication strategy: {type(self._auth_strategy).__name__}"
        )

        self._should_close_client = http_client is None
        self._http_client = http_client or self._create_default_http_client()

        logger.debug(f"BaseApiClient initialized for {self._base_url}.")

    def _create_default_http_client(self) -> httpx.AsyncClient:
        """Create a default httpx.AsyncClient with configured settings."""
        try:
            ssl_context = ssl.create_default_context(cafile=certifi.where())
            verify_ssl: ssl.SSLContext | bool = ssl_context
            logger.debug("Using certifi SSL context.")
        except (OSError, ssl.SSLError):
            verify_ssl = True
            logger.warning(
                "certifi bundle could not be loaded. Using default SSL verification."
            )

        return httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._settings.request_timeout,
            verify=verify_ssl,
            headers={"User-Agent": self._settings.user_agent},
        )

    def _run_pre_request_hooks(self, request_data: RequestData) -> None:
        if not self._settings.pre_request_hooks:
            return
        hook_params: dict[str, Any] | None = (
            dict(request_data.params) if request_data.params is not None else None
        )
        hook_headers = httpx.Headers(request_data.headers)
        logger.debug(
            f"Executing {len(self._settings.pre_request_hooks)} pre-request hooks "
            f"for {request_data.method} {request_data.url}"
        )
        for hook in self._settings.pre_request_hooks:
            try:
                hook(request_data.method, request_data.url, hook_params, hook_headers)
            except Exception as e:
                logger.error(
                    f"Error executing pre-request hook {getattr(hook, '__name__', str(hook))}: {e}"
                )
        request_data.params = hook_params
        request_data.headers = {k: v for k, v in hook_headers.items()}

    def _run_post_request_hooks(self, response: httpx.Response, attempts: int) -> None:
        for hook in self._settings.post_request_hooks:
            try:
                hook(response, attempts)
            except Exception as e:
                logger.error(
                    f"Error executing post-request hook {getattr(hook, '__name__', str(hook))}: {e}"
                )

    async def _execute_single_request(self, request_data: RequestData) -> httpx.Response:
        """Execute a single HTTP request attempt.

        Raises:
            NotFoundError: On a 404 response.
            APIError: For other HTTP error responses (4xx/5xx).
            TimeoutError: If the request times out.
            NetworkError: For connection-level failures.
            HolocronRequestError: For any other httpx request failure.
        """
        request = request_data.build_request(self._http_client)
        await self._auth_strategy.async_authenticate(request)

        logger.debug(f"Sending request: {request.method} {request.url}")
        logger.trace(f"Request Headers: {request.headers}")

        try:
            response = await self._http_client.send(request)
        except httpx.TimeoutException as e:
            logger.error(f"Request timed out: {request.url}")
            raise TimeoutError("Request timed out", request=request) from e
        except httpx.NetworkError as e:
            logger.error(f"Network error occurred for {request.url}: {e}")
            raise NetworkError(
                f"Network error for {request.url}: {e}", request=request
            ) from e
        except httpx.RequestError as e:
            logger.error(f"HTTP request error for {request.url}: {e}")
            raise HolocronRequestError(
                f"HTTP request error for {request.url}: {e}", request=request
            ) from e

        logger.debug(f"Received response: {response.status_code} for {request.url}")

        if response.status_code == HTTPStatus.NOT_FOUND:
            raise NotFoundError("Resource not found", response=response, request=request)
        if response.status_code >= HTTPStatus.BAD_REQUEST:
            raise APIError(
                f"API request failed with status {response.status_code}",
                response=response,
                request=request,
            )
        return response

    def _should_retry_request(self, retry_state: tenacity.RetryCallState) -> bool:
        """Predicate for tenacity: retry timeouts, network errors and retryable statuses."""
        outcome = retry_state.outcome
        if not outcome or not outcome.failed:
            return False

        exc = outcome.exception()
        if isinstance(exc, TimeoutError | NetworkError):
            logger.warning(f"Retrying due to {type(exc).__name__}")
            return True
        if isinstance(exc, APIError) and exc.response is not None:
            status_code = exc.response.status_code
            if status_code in self._retryable_status_codes:
                logger.warning(f"Retrying due to status code {status_code}")
                return True
        return False

    async def _before_retry_sleep(self, retry_state: tenacity.RetryCallState) -> None:
        if not retry_state.outcome:
            return
        exc = retry_state.outcome.exception()
        sleep_time = (
            getattr(retry_state.next_action, "sleep", 0)
            if retry_state.next_action
            else 0
        )
        logger.info(
            f"Retrying request in {sleep_time:.2f} seconds after "
            f"{retry_state.attempt_number} attempt(s) due to: {type(exc).__name__} - {exc}"
        )

    async def _request_with_retry(
        self, request_data: RequestData
    ) -> tuple[httpx.Response, int]:
        """Send the request, retrying only if ``max_retries`` allows it.

        Returns:
            The HTTP response and the number of attempts made.
        """
        retry_strategy = AsyncRetrying(
            stop=stop_after_attempt(self._settings.max_retries + 1),
            wait=wait_exponential(multiplier=self._settings.backoff_factor),
            retry=self._should_retry_request,
            reraise=True,
            before_sleep=self._before_retry_sleep,
        )
        response = await retry_strategy(self._execute_single_request, request_data)
        return response, retry_strategy.statistics["attempt_number"]

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
    ) -> httpx.Response:
        """Perform an HTTP request against a path relative to the base URL.

        Returns:
            The successful (2xx/3xx) ``httpx.Response``.

        Raises:
            HolocronError: Any subclass describing why the exchange failed.
        """
        request_data = RequestData(
            method=method.upper(),
            url=f"{self._base_url}/{path.lstrip('/')}",
            params=params,
        )
        self._run_pre_request_hooks(request_data)

        try:
            response, attempts = await self._request_with_retry(request_data)
        except AuthError:
            raise
        except HolocronError as e:
            logger.debug(f"{method.upper()} {path} failed: {e}")
            raise
        except Exception as e:
            logger.exception(f"Unexpected error during request to {path}: {e}")
            raise HolocronError(
                f"An unexpected error occurred during request execution: {e}"
            ) from e

        self._run_post_request_hooks(response, attempts)
        return response

    async def get_json(
        self, path: str, *, params: Mapping[str, Any] | None = None
    ) -> Any:
        """GET ``path`` and decode the JSON body.

        Raises:
            HolocronRequestError: If the body is not valid JSON.
            HolocronError: For any transport failure (see ``request``).
        """
        response = await self.request("GET", path, params=params)
        try:
            return response.json()
        except ValueError as e:
            raise HolocronRequestError(
                f"Response body from {path} is not valid JSON", response=response
            ) from e

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._should_close_client and not self._http_client.is_closed:
            await self._http_client.aclose()
            logger.debug(f"BaseApiClient internal HTTP client closed. Client ID: {id(self)}.")
        await self._auth_strategy.async_close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        await self.aclose()
