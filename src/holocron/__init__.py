"""holocron: an asynchronous adapter over the Star Wars catalog API."""

__version__ = "0.1.0"

from .auth import AuthStrategy, NoAuth, StaticTokenAuth
from .client import HolocronClient
from .config import HolocronSettings, get_settings
from .exceptions import (
    APIError,
    AuthError,
    ConfigurationError,
    FieldDecodeError,
    HolocronError,
    HolocronRequestError,
    NetworkError,
    NotFoundError,
    TimeoutError,
    ValidationError,
)
from .filtering import paginate, search_and_paginate, text_contains
from .models import (
    Film,
    Page,
    PageEnvelope,
    Person,
    Starship,
    SwapiEntity,
    Vehicle,
)
from .pagination import BaseIndex, PageRequest, to_internal_page, to_upstream_page
from .scan import FullScanAggregator, ScanResult
from .session import HolocronSession
from .unwrapper import ResponseUnwrapper, SwapiUnwrapper

__all__ = [
    # Core Client/Session
    "HolocronClient",
    "HolocronSession",
    "HolocronSettings",
    "get_settings",
    # Auth
    "AuthStrategy",
    "NoAuth",
    "StaticTokenAuth",
    # Exceptions
    "HolocronError",
    "APIError",
    "AuthError",
    "ConfigurationError",
    "FieldDecodeError",
    "HolocronRequestError",
    "NetworkError",
    "NotFoundError",
    "TimeoutError",
    "ValidationError",
    # Models
    "Film",
    "Page",
    "PageEnvelope",
    "Person",
    "Starship",
    "SwapiEntity",
    "Vehicle",
    # Normalization, paging and scans
    "BaseIndex",
    "FullScanAggregator",
    "PageRequest",
    "ResponseUnwrapper",
    "ScanResult",
    "SwapiUnwrapper",
    "paginate",
    "search_and_paginate",
    "text_contains",
    "to_internal_page",
    "to_upstream_page",
]
