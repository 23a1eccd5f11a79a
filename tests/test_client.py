"""Tests for the HolocronClient facade: every operation returns, none raises."""

import httpx
import pytest

from holocron.auth import NoAuth, StaticTokenAuth
from holocron.client import HolocronClient
from holocron.config import HolocronSettings
from holocron.models import Film, Person, Starship
from holocron.resources import FilmsClient, PeopleClient, StarshipsClient, VehiclesClient
from holocron.unwrapper import SwapiUnwrapper

from payloads import BASE_URL, cursor_page, flat_body, flat_item, people_page_url, person


@pytest.mark.asyncio
async def test_client_wires_resource_clients(client: HolocronClient):
    assert isinstance(client.films, FilmsClient)
    assert isinstance(client.people, PeopleClient)
    assert isinstance(client.starships, StarshipsClient)
    assert isinstance(client.vehicles, VehiclesClient)
    assert isinstance(client.response_unwrapper, SwapiUnwrapper)


def test_client_auth_selection():
    no_token = HolocronClient(settings=HolocronSettings(_env_file=None, api_token=None))
    assert isinstance(no_token._auth_strategy, NoAuth)
    with_token = HolocronClient(settings=HolocronSettings(_env_file=None, api_token="secret"))
    assert isinstance(with_token._auth_strategy, StaticTokenAuth)


# fetch_by_id
@pytest.mark.asyncio
async def test_fetch_by_id_merges_properties(client: HolocronClient, httpx_mock):
    httpx_mock.add_response(
        url=f"{BASE_URL}/people/1",
        json={"message": "ok", "result": flat_item("1", name="Luke Skywalker", height="172")},
    )

    luke = await client.fetch_by_id("people", "1", Person)

    assert isinstance(luke, Person)
    assert luke.uid == "1"
    assert luke.internal_id == "id-1"
    assert luke.name == "Luke Skywalker"
    assert luke.height == "172"


@pytest.mark.asyncio
async def test_fetch_by_id_not_found_is_none(client: HolocronClient, httpx_mock):
    httpx_mock.add_response(url=f"{BASE_URL}/people/999", status_code=404, json={"message": "not found"})
    assert await client.fetch_by_id("people", "999", Person) is None


@pytest.mark.asyncio
async def test_fetch_by_id_transport_failure_is_none(client: HolocronClient, httpx_mock):
    httpx_mock.add_exception(httpx.ConnectError("refused"), url=f"{BASE_URL}/people/1")
    assert await client.fetch_by_id("people", "1", Person) is None


@pytest.mark.asyncio
async def test_fetch_by_id_undecodable_record_is_none(client: HolocronClient, httpx_mock):
    httpx_mock.add_response(
        url=f"{BASE_URL}/films/1",
        json={"result": flat_item("1", title="A New Hope", episode_id="four")},
    )
    assert await client.fetch_by_id("films", "1", Film) is None


@pytest.mark.asyncio
async def test_fetch_by_id_unrecognized_body_is_none(client: HolocronClient, httpx_mock):
    httpx_mock.add_response(url=f"{BASE_URL}/films/1", json={"message": "ok"})
    assert await client.fetch_by_id("films", "1", Film) is None


# fetch_page
@pytest.mark.asyncio
async def test_fetch_page_decodes_and_keeps_metadata(client: HolocronClient, httpx_mock):
    httpx_mock.add_response(
        url=people_page_url(2, 2),
        json=cursor_page(
            [person("3", "R2-D2"), person("4", "Darth Vader")],
            next_url=f"{BASE_URL}/people?page=3&limit=2",
            total=82,
            pages=41,
        ),
    )

    envelope = await client.fetch_page("people", 2, 2, Person)

    assert [p.name for p in envelope.results] == ["R2-D2", "Darth Vader"]
    assert envelope.total_records == 82
    assert envelope.total_pages == 41
    assert envelope.has_next


@pytest.mark.asyncio
async def test_fetch_page_failure_is_empty_envelope(client: HolocronClient, httpx_mock):
    httpx_mock.add_response(url=people_page_url(1, 10), status_code=503)

    envelope = await client.fetch_page("people", 1, 10, Person)

    assert envelope is not None
    assert envelope.results == []
    assert envelope.total_records is None
    assert envelope.total_pages is None
    assert envelope.next is None


@pytest.mark.asyncio
async def test_fetch_page_partial_decode(client: HolocronClient, httpx_mock):
    httpx_mock.add_response(
        url=people_page_url(1, 3),
        json=cursor_page(
            [person("1", "Luke"), {"name": "no uid"}, person("3", "R2-D2")],
            next_url=None,
            total=3,
            pages=1,
        ),
    )

    envelope = await client.fetch_page("people", 1, 3, Person)

    assert [p.uid for p in envelope.results] == ["1", "3"]
    assert envelope.total_records == 3


# fetch_by_name / fetch_by_model
@pytest.mark.asyncio
async def test_fetch_by_name(client: HolocronClient, httpx_mock):
    httpx_mock.add_response(
        url=f"{BASE_URL}/people?name=sky",
        json=flat_body(flat_item("1", name="Luke Skywalker"), flat_item("11", name="Anakin Skywalker")),
    )

    people = await client.fetch_by_name("people", "sky", Person)

    assert [p.name for p in people] == ["Luke Skywalker", "Anakin Skywalker"]
    assert people[1].uid == "11"


@pytest.mark.asyncio
async def test_fetch_by_model_failure_is_empty(client: HolocronClient, httpx_mock):
    httpx_mock.add_exception(httpx.ReadTimeout("slow"), url=f"{BASE_URL}/starships?model=x-wing")
    assert await client.fetch_by_model("starships", "x-wing", Starship) == []


@pytest.mark.asyncio
async def test_fetch_by_model(client: HolocronClient, httpx_mock):
    httpx_mock.add_response(
        url=f"{BASE_URL}/starships?model=T-65",
        json=flat_body(flat_item("12", name="X-wing", model="T-65 X-wing")),
    )

    ships = await client.fetch_by_model("starships", "T-65", Starship)

    assert ships[0].model == "T-65 X-wing"


# fetch_all
@pytest.mark.asyncio
async def test_fetch_all_walks_every_page(client: HolocronClient, httpx_mock):
    httpx_mock.add_response(
        url=people_page_url(1, 100),
        json=cursor_page(
            [person("1", "Luke")], next_url=people_page_url(2, 100), total=2, pages=2
        ),
    )
    httpx_mock.add_response(
        url=people_page_url(2, 100),
        json=cursor_page([person("2", "C-3PO")], next_url=None, total=2, pages=2),
    )

    people = await client.fetch_all("people", Person)

    assert [p.name for p in people] == ["Luke", "C-3PO"]


@pytest.mark.asyncio
async def test_fetch_all_failure_is_empty(client: HolocronClient, httpx_mock):
    httpx_mock.add_response(url=people_page_url(1, 100), status_code=500)
    assert await client.fetch_all("people", Person) == []
