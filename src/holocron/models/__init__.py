"""Pydantic models for holocron entities and pages."""

from .base import Page, PageEnvelope, SwapiEntity
from .craft import Craft, Starship, Vehicle
from .film import Film
from .person import Person

__all__ = [
    "Craft",
    "Film",
    "Page",
    "PageEnvelope",
    "Person",
    "Starship",
    "SwapiEntity",
    "Vehicle",
]
