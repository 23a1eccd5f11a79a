# holocron/types.py
"""Request data and hook type aliases shared by the transport and settings."""

from collections.abc import Callable, Mapping
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field


class RequestData(BaseModel):
    """Everything needed to build one upstream HTTP request."""

    method: str
    url: str
    params: Mapping[str, Any] | None = None
    headers: dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")

    def build_request(self, client: httpx.AsyncClient | None = None) -> httpx.Request:
        """Builds an httpx.Request, merging the client's default headers when given."""
        if client is not None:
            return client.build_request(
                method=self.method,
                url=self.url,
                params=self.params,
                headers=self.headers,
            )
        return httpx.Request(
            method=self.method,
            url=self.url,
            params=self.params,
            headers=self.headers,
        )


PreRequestHook = Callable[[str, str, dict[str, Any] | None, httpx.Headers], None]
"""Type alias for a pre-request hook.

Called before a request is sent with the method, the full URL, a mutable copy
of the query parameters and a mutable ``httpx.Headers``. Hooks modify the
arguments in place; their return value is ignored.
"""

PostRequestHook = Callable[[httpx.Response, int], None]
"""Type alias for a post-request hook.

Called with the successful ``httpx.Response`` and the number of attempts it
took. Useful for custom logging or metrics.
"""
