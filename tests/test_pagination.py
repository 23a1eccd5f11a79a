import doctest

import pytest

from holocron import pagination
from holocron.exceptions import ValidationError
from holocron.models import PageEnvelope
from holocron.pagination import BaseIndex, PageRequest, to_internal_page, to_upstream_page


def test_doctests():
    assert doctest.testmod(pagination).failed == 0


@pytest.mark.parametrize(
    ("page", "size", "base", "expected"),
    [
        (0, 10, BaseIndex.ZERO, (1, 10)),
        (3, 25, BaseIndex.ZERO, (4, 25)),
        (1, 10, BaseIndex.ONE, (1, 10)),
        (2, 10, BaseIndex.ONE, (2, 10)),
    ],
)
def test_to_upstream_page(page, size, base, expected):
    assert to_upstream_page(page, size, base) == expected


def test_page_request_rejects_page_below_base():
    with pytest.raises(ValidationError):
        PageRequest.one_based(0, 10)


def test_page_request_rejects_non_positive_size():
    with pytest.raises(ValidationError):
        PageRequest.zero_based(0, 0)


def test_page_request_offset_and_upstream():
    request = PageRequest.one_based(3, 20)
    assert request.offset == 40
    assert request.to_upstream() == (3, 20)
    assert PageRequest.zero_based(3, 20).to_upstream() == (4, 20)


def test_page_request_is_frozen():
    request = PageRequest.zero_based(0, 10)
    with pytest.raises(Exception):
        request.number = 5


def test_to_internal_page_single_page():
    envelope = PageEnvelope[dict](
        results=[{"uid": str(i)} for i in range(6)], total_records=6, total_pages=1, next=None
    )
    page = to_internal_page(envelope, 0, 10, BaseIndex.ZERO)
    assert len(page.content) == 6
    assert page.total_elements == 6
    assert page.total_pages == 1
    assert page.page_number == 0
    assert page.page_size == 10
    assert page.first is True
    assert page.last is True


def test_to_internal_page_middle_page_one_based():
    envelope = PageEnvelope[dict](
        results=[{"uid": "11"}], total_records=82, total_pages=9, next="https://x/next"
    )
    page = to_internal_page(envelope, 2, 10, BaseIndex.ONE)
    assert page.page_number == 2
    assert page.first is False
    assert page.last is False
    assert page.total_elements == 82


def test_to_internal_page_missing_metadata_reads_as_zero():
    page = to_internal_page(PageEnvelope.empty(), 0, 10)
    assert page.content == []
    assert page.total_elements == 0
    assert page.total_pages == 0
    assert page.last is True


def test_to_internal_page_past_the_end_keeps_total():
    envelope = PageEnvelope[dict](results=[], total_records=82, total_pages=9, next=None)
    page = to_internal_page(envelope, 20, 10)
    assert page.content == []
    assert page.total_elements == 82


def test_page_serializes_with_camel_case_aliases():
    page = to_internal_page(PageEnvelope.empty(), 0, 10)
    dumped = page.model_dump(by_alias=True)
    assert dumped["pageNumber"] == 0
    assert dumped["totalElements"] == 0
    assert "page_number" not in dumped
