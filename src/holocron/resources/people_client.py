# holocron/resources/people_client.py
"""Client for the people resource."""

from typing import TYPE_CHECKING

from ..constants import Resource
from ..models import Person
from .base import BaseResourceClient, GettableMixin, NameQuerySearchMixin, PageableMixin

if TYPE_CHECKING:
    from ..client import HolocronClient


class PeopleClient(GettableMixin, PageableMixin, NameQuerySearchMixin, BaseResourceClient):
    """Client for the people resource.

    Listing uses the upstream's native pagination; ``search`` goes through the
    upstream ``?name=`` query.
    """

    _entity_path: str = Resource.PEOPLE.value
    _entity_model: type[Person] = Person

    def __init__(self, api_client: "HolocronClient"):
        super().__init__(api_client)
