# holocron/resources/__init__.py
"""Exposes the resource client classes."""

from .base import BaseResourceClient
from .films_client import FilmsClient
from .people_client import PeopleClient
from .starships_client import StarshipsClient
from .vehicles_client import VehiclesClient

__all__ = [
    "BaseResourceClient",
    "FilmsClient",
    "PeopleClient",
    "StarshipsClient",
    "VehiclesClient",
]
