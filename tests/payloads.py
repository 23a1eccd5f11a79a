# tests/payloads.py
"""Upstream response bodies in the three shapes the catalog API uses."""

BASE_URL = "https://swapi.test/api"


def flat_item(uid: str, **properties) -> dict:
    """One item of a flat ``result`` body, payload nested under ``properties``."""
    return {"uid": uid, "_id": f"id-{uid}", "properties": properties}


def flat_body(*items: dict) -> dict:
    return {"message": "ok", "result": list(items)}


def cursor_page(
    records: list[dict], *, next_url: str | None, total: int | None, pages: int | None
) -> dict:
    """A cursor-paged ``results`` body."""
    return {
        "message": "ok",
        "total_records": total,
        "total_pages": pages,
        "previous": None,
        "next": next_url,
        "results": records,
    }


def person(uid: str, name: str) -> dict:
    return {"uid": uid, "name": name, "url": f"{BASE_URL}/people/{uid}"}


def people_page_url(page: int, limit: int) -> str:
    return f"{BASE_URL}/people?page={page}&limit={limit}"
