import pytest

from holocron.unwrapper import (
    CursorPagedShape,
    FlatShape,
    ResponseUnwrapper,
    SwapiUnwrapper,
    UnrecognizedShape,
    detect_shape,
    merge_properties,
)

from payloads import cursor_page, flat_body, flat_item, person


@pytest.fixture
def unwrapper():
    return SwapiUnwrapper()


def test_swapi_unwrapper_satisfies_protocol(unwrapper):
    assert isinstance(unwrapper, ResponseUnwrapper)


# Shape detection
def test_detect_flat_shape():
    shape = detect_shape(flat_body(flat_item("1", title="A New Hope")))
    assert isinstance(shape, FlatShape)
    assert len(shape.items) == 1


def test_detect_flat_shape_single_object_is_one_item_list():
    shape = detect_shape({"result": flat_item("1", name="Luke Skywalker")})
    assert isinstance(shape, FlatShape)
    assert shape.items == [flat_item("1", name="Luke Skywalker")]


def test_detect_cursor_paged_shape():
    body = cursor_page([person("1", "Luke")], next_url="next", total=82, pages=9)
    shape = detect_shape(body)
    assert isinstance(shape, CursorPagedShape)
    assert shape.total_records == 82
    assert shape.next == "next"


def test_result_key_wins_over_results():
    shape = detect_shape({"result": [], "results": [person("1", "Luke")]})
    assert isinstance(shape, FlatShape)


@pytest.mark.parametrize("body", [{"message": "ok"}, {}, None, [1, 2], "text"])
def test_detect_unrecognized_shape(body):
    assert isinstance(detect_shape(body), UnrecognizedShape)


def test_unrecognized_shape_lists_keys():
    shape = detect_shape({"message": "ok", "detail": "x"})
    assert shape.keys == ["detail", "message"]


# Property merge
def test_merge_properties_outer_identity_wins():
    item = {"uid": "1", "_id": "outer", "properties": {"uid": "99", "_id": "inner", "name": "Luke"}}
    assert merge_properties(item) == {"uid": "1", "_id": "outer", "name": "Luke"}


def test_merge_properties_does_not_mutate_input():
    item = flat_item("1", name="Luke")
    merge_properties(item)
    assert item == flat_item("1", name="Luke")


def test_merge_properties_without_properties_returns_item():
    item = {"uid": "1", "name": "Luke"}
    assert merge_properties(item) == item


def test_merge_properties_non_mapping_unchanged():
    assert merge_properties("garbage") == "garbage"


# normalize
def test_normalize_flat_merges_every_item(unwrapper):
    body = flat_body(flat_item("1", title="A New Hope"), flat_item("2", title="Empire"))
    records = unwrapper.normalize(body)
    assert records == [
        {"title": "A New Hope", "uid": "1", "_id": "id-1"},
        {"title": "Empire", "uid": "2", "_id": "id-2"},
    ]


def test_normalize_cursor_paged_returns_records_verbatim(unwrapper):
    records = [person("1", "Luke"), {"uid": "2", "properties": {"name": "C-3PO"}}]
    body = cursor_page(records, next_url=None, total=2, pages=1)
    assert unwrapper.normalize(body) == records


def test_normalize_preserves_order(unwrapper):
    body = flat_body(*(flat_item(str(i), name=f"n{i}") for i in range(5, 0, -1)))
    assert [r["uid"] for r in unwrapper.normalize(body)] == ["5", "4", "3", "2", "1"]


def test_normalize_unrecognized_is_empty(unwrapper):
    assert unwrapper.normalize({"message": "not found"}) == []


def test_normalize_null_result_is_empty(unwrapper):
    assert unwrapper.normalize({"result": None}) == []


# Envelope and metadata
def test_to_envelope_cursor_paged(unwrapper):
    body = cursor_page([person("1", "Luke")], next_url=" https://x/next ", total="82", pages=9)
    envelope = unwrapper.to_envelope(body)
    assert envelope.results == [person("1", "Luke")]
    assert envelope.total_records == 82
    assert envelope.total_pages == 9
    assert envelope.next == "https://x/next"
    assert envelope.has_next
    assert envelope.message == "ok"


def test_to_envelope_empty_cursor_means_no_next(unwrapper):
    envelope = unwrapper.to_envelope(cursor_page([], next_url="  ", total=0, pages=0))
    assert envelope.next is None
    assert not envelope.has_next


def test_to_envelope_flat_has_no_metadata(unwrapper):
    envelope = unwrapper.to_envelope(flat_body(flat_item("1", title="A New Hope")))
    assert len(envelope.results) == 1
    assert envelope.total_records is None
    assert envelope.next is None


def test_to_envelope_bad_total_is_none(unwrapper):
    envelope = unwrapper.to_envelope(cursor_page([], next_url=None, total="many", pages=None))
    assert envelope.total_records is None


def test_unwrap_single_item(unwrapper):
    record = unwrapper.unwrap_single_item({"result": flat_item("1", name="Luke")})
    assert record == {"name": "Luke", "uid": "1", "_id": "id-1"}


def test_unwrap_single_item_empty(unwrapper):
    assert unwrapper.unwrap_single_item({"message": "ok"}) is None


def test_next_page_token_and_total(unwrapper):
    body = cursor_page([], next_url="https://x/next", total=82, pages=9)
    assert unwrapper.get_next_page_token(body) == "https://x/next"
    assert unwrapper.get_total_results(body) == 82
    flat = flat_body(flat_item("1", name="Luke"))
    assert unwrapper.get_next_page_token(flat) is None
    assert unwrapper.get_total_results(flat) is None
