"""Pydantic models for starships and vehicles.

Both share the same technical sheet; only the class field differs. Numeric
looking values are kept as the upstream strings ("n/a", "unknown", "30-165").
"""

from .base import SwapiEntity


class Craft(SwapiEntity):
    """Fields common to starships and vehicles."""

    name: str | None = None
    model: str | None = None
    manufacturer: str | None = None
    cost_in_credits: str | None = None
    length: str | None = None
    crew: str | None = None
    passengers: str | None = None
    cargo_capacity: str | None = None


class Starship(Craft):
    starship_class: str | None = None


class Vehicle(Craft):
    vehicle_class: str | None = None
