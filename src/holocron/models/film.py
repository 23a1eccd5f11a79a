"""Pydantic model for films."""

from datetime import date
from typing import ClassVar

from .base import SwapiEntity


class Film(SwapiEntity):
    """A film. Free-text search matches on ``title``."""

    search_field: ClassVar[str] = "title"

    title: str | None = None
    episode_id: int | None = None
    opening_crawl: str | None = None
    director: str | None = None
    producer: str | None = None
    release_date: date | None = None
