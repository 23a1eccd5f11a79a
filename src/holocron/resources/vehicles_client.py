# holocron/resources/vehicles_client.py
"""Client for the vehicles resource."""

from typing import TYPE_CHECKING

from ..constants import Resource
from ..models import Vehicle
from .base import (
    BaseResourceClient,
    GettableMixin,
    ModelQuerySearchMixin,
    NameQuerySearchMixin,
    PageableMixin,
)

if TYPE_CHECKING:
    from ..client import HolocronClient


class VehiclesClient(
    GettableMixin,
    PageableMixin,
    NameQuerySearchMixin,
    ModelQuerySearchMixin,
    BaseResourceClient,
):
    """Client for the vehicles resource, searchable by name and by model."""

    _entity_path: str = Resource.VEHICLES.value
    _entity_model: type[Vehicle] = Vehicle

    def __init__(self, api_client: "HolocronClient"):
        super().__init__(api_client)
