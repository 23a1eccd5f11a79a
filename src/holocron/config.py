# holocron/config.py
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    MAX_SCAN_PAGES,
    SCAN_PAGE_SIZE,
    SWAPI_BASE_URL,
)
from .types import PostRequestHook, PreRequestHook


class HolocronSettings(BaseSettings):
    """
    User-configurable settings for the holocron client, loaded from
    environment variables (prefixed with 'HOLOCRON_') or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", "secrets.env"),
        env_file_encoding="utf-8",
        env_prefix="HOLOCRON_",
        extra="ignore",
        case_sensitive=False,
        arbitrary_types_allowed=True,  # Hook callables
    )

    # --- Upstream ---
    base_url: str = Field(
        default=SWAPI_BASE_URL, description="Base URL of the upstream catalog API"
    )
    api_token: str | None = Field(
        default=None,
        description="Optional bearer token, only needed for a private upstream mirror",
    )

    # --- Transport behavior ---
    request_timeout: float = Field(
        default=DEFAULT_TIMEOUT, description="Request timeout in seconds"
    )
    max_retries: int = Field(
        default=0,
        ge=0,
        description="Transport-level retries for transient failures (0 disables them)",
    )
    backoff_factor: float = Field(
        default=0.5, description="Exponential backoff factor between retries (seconds)"
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT, description="User-Agent header for requests"
    )

    # --- Full scans ---
    full_scan_page_size: int = Field(
        default=SCAN_PAGE_SIZE,
        gt=0,
        description="Upstream 'limit' used for every page of a full scan",
    )
    full_scan_max_pages: int = Field(
        default=MAX_SCAN_PAGES,
        gt=0,
        description=(
            "Hard cap on upstream pages per full scan. Resources larger than "
            "full_scan_page_size * full_scan_max_pages records are truncated."
        ),
    )
    full_scan_time_budget: float | None = Field(
        default=None,
        gt=0,
        description="Optional wall-clock budget in seconds for a single full scan",
    )

    # --- Logging ---
    log_level: str = Field(default="INFO", description="Loguru level for the session")

    # --- Hooks ---
    pre_request_hooks: list[PreRequestHook] = Field(
        default_factory=list,
        description="Hooks called before a request is sent.",
    )
    post_request_hooks: list[PostRequestHook] = Field(
        default_factory=list,
        description="Hooks called after a successful response is received.",
    )


@lru_cache
def get_settings() -> HolocronSettings:
    """
    Provides access to the holocron settings.

    Settings are loaded from environment variables or .env/secrets.env files.
    The instance is cached for performance.

    Returns:
        HolocronSettings: The settings instance.
    """
    return HolocronSettings()
