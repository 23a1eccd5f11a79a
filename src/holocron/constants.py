"""Constants used throughout holocron: upstream URL, resource paths and defaults."""

from enum import Enum

SWAPI_BASE_URL = "https://www.swapi.tech/api"

DEFAULT_TIMEOUT: float = 30.0
DEFAULT_PAGE_SIZE: int = 10

# A full scan reads at most MAX_SCAN_PAGES pages of SCAN_PAGE_SIZE records.
SCAN_PAGE_SIZE: int = 100
MAX_SCAN_PAGES: int = 10


class Resource(str, Enum):
    FILMS = "films"
    PEOPLE = "people"
    STARSHIPS = "starships"
    VEHICLES = "vehicles"


HOLOCRON_VERSION: str = "0.1.0"
DEFAULT_USER_AGENT: str = f"holocron/{HOLOCRON_VERSION}"
