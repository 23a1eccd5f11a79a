"""Pydantic model for people."""

from .base import SwapiEntity


class Person(SwapiEntity):
    """A character. Physical measurements stay strings ("172", "unknown", "1,358")."""

    name: str | None = None
    height: str | None = None
    mass: str | None = None
    hair_color: str | None = None
    skin_color: str | None = None
    eye_color: str | None = None
    birth_year: str | None = None
    gender: str | None = None
    homeworld: str | None = None
