# tests/conftest.py
import pytest
import pytest_asyncio
from dotenv import load_dotenv

from holocron.client import HolocronClient
from holocron.config import HolocronSettings, get_settings

from payloads import BASE_URL

# Load environment variables from .env file if it exists
load_dotenv()


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Each test sees settings freshly loaded from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> HolocronSettings:
    """Settings pinned to a fake upstream, independent of any local .env file."""
    return HolocronSettings(_env_file=None, base_url=BASE_URL, api_token=None)


@pytest_asyncio.fixture
async def client(settings: HolocronSettings):
    """A HolocronClient whose HTTP traffic is intercepted by ``httpx_mock``."""
    async with HolocronClient(settings=settings) as api_client:
        yield api_client
