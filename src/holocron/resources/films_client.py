# holocron/resources/films_client.py
"""Client for the films resource.

The upstream serves films as a single un-paginated block and offers no name
query for them, so both listing and searching work over a full scan held in
memory. Searches match against ``title``.
"""

from typing import TYPE_CHECKING

from ..constants import Resource
from ..models import Film
from .base import BaseResourceClient, BufferedPageableMixin, GettableMixin, ScanSearchMixin

if TYPE_CHECKING:
    from ..client import HolocronClient


class FilmsClient(GettableMixin, BufferedPageableMixin, ScanSearchMixin, BaseResourceClient):
    """Client for the films resource (``get``, ``list_page``, ``search``)."""

    _entity_path: str = Resource.FILMS.value
    _entity_model: type[Film] = Film

    def __init__(self, api_client: "HolocronClient"):
        super().__init__(api_client)
