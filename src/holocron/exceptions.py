"""Exception classes for the holocron library.

Only the transport and the typed decoder raise these. The client facade
catches them at its boundary and turns them into empty or absent results.
"""

import httpx


class HolocronError(Exception):
    """Base exception class for all holocron errors."""

    def __init__(
        self,
        message: str,
        *,
        response: httpx.Response | None = None,
        request: httpx.Request | None = None,
    ):
        """Initializes the base exception.

        Args:
            message: The error message.
            response: Optional httpx.Response object associated with the error.
            request: Optional httpx.Request object associated with the error.
        """
        super().__init__(message)
        self.message = message
        self.response = response
        self.request = request

    def __str__(self) -> str:
        if self.response is not None:
            url_info = getattr(getattr(self.response, "request", None), "url", "N/A")
            return (
                f"{self.message} (Status: {self.response.status_code}, URL: {url_info})"
            )
        if isinstance(self.request, httpx.Request):
            return f"{self.message} (URL: {self.request.url})"
        return self.message


class APIError(HolocronError):
    """The upstream answered with a 4xx/5xx status."""


class NotFoundError(APIError):
    """The upstream answered 404 Not Found."""


class ValidationError(HolocronError):
    """Invalid caller input, such as a page number below the page base."""


class TimeoutError(HolocronError):
    """An upstream request did not complete within the configured timeout."""

    def __init__(self, message: str, *, request: httpx.Request | None = None):
        super().__init__(message, request=request, response=None)


class NetworkError(HolocronError):
    """A connection to the upstream could not be established or was lost."""

    def __init__(self, message: str, *, request: httpx.Request | None = None):
        super().__init__(message, request=request, response=None)


class HolocronRequestError(HolocronError):
    """Any other failure of the HTTP exchange, including bodies that are not JSON."""


class ConfigurationError(HolocronError):
    """Represents an error in the library's configuration."""

    def __init__(self, message: str):
        super().__init__(message, response=None)


class AuthError(HolocronError):
    """Raised when authentication information cannot be applied to a request."""


class FieldDecodeError(HolocronError):
    """A single normalized record could not be decoded into its entity model.

    Attributes:
        model_name: Name of the target model.
        record: The record that failed, kept for diagnostics.
    """

    def __init__(self, message: str, *, model_name: str, record: object = None):
        super().__init__(message)
        self.model_name = model_name
        self.record = record
