# holocron/resources/starships_client.py
"""Client for the starships resource."""

from typing import TYPE_CHECKING

from ..constants import Resource
from ..models import Starship
from .base import (
    BaseResourceClient,
    GettableMixin,
    ModelQuerySearchMixin,
    NameQuerySearchMixin,
    PageableMixin,
)

if TYPE_CHECKING:
    from ..client import HolocronClient


class StarshipsClient(
    GettableMixin,
    PageableMixin,
    NameQuerySearchMixin,
    ModelQuerySearchMixin,
    BaseResourceClient,
):
    """Client for the starships resource.

    Besides ``get``, ``list_page`` and ``search`` (by name), starships can be
    searched by model with ``search_by_model``.
    """

    _entity_path: str = Resource.STARSHIPS.value
    _entity_model: type[Starship] = Starship

    def __init__(self, api_client: "HolocronClient"):
        super().__init__(api_client)
