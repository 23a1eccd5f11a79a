"""Authentication strategies applied to outgoing upstream requests.

The public upstream needs no credentials, so ``NoAuth`` is the default.
``StaticTokenAuth`` covers private mirrors that sit behind a bearer token.
"""

from typing import Protocol

import httpx

from .exceptions import ConfigurationError
from .log_config import logger


class AuthStrategy(Protocol):
    """Protocol for adding authentication information to an HTTP request."""

    async def async_authenticate(self, request: httpx.Request) -> None:
        """
        Modifies the request in place to add authentication information.

        Raises:
            AuthError: If authentication information cannot be obtained.
        """
        ...

    async def async_close(self) -> None:
        """Releases any resources held by the strategy. Must be idempotent."""
        ...


class NoAuth:
    """Implements the AuthStrategy protocol for requests requiring no authentication."""

    async def async_authenticate(self, request: httpx.Request) -> None:
        logger.trace("Using NoAuth strategy, no authentication applied.")

    async def async_close(self) -> None:
        """No resources to close for NoAuth."""


class StaticTokenAuth:
    """Implements AuthStrategy using a static Bearer token."""

    def __init__(self, token: str | None):
        """Initializes StaticTokenAuth with the provided API token.

        Raises:
            ConfigurationError: If the token is None or empty.
        """
        if not token:
            raise ConfigurationError("StaticTokenAuth requires a non-empty 'token'.")
        self._token: str = token
        logger.debug("StaticTokenAuth initialized.")

    async def async_authenticate(self, request: httpx.Request) -> None:
        """Adds the 'Authorization: Bearer <token>' header to the request."""
        logger.trace("Authenticating request using StaticTokenAuth.")
        request.headers["Authorization"] = f"Bearer {self._token}"

    async def async_close(self) -> None:
        """No resources to close for StaticTokenAuth."""
