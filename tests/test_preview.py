import asyncio

import pytest

from artbrowser.components.preview import ResultPreviewList
from artbrowser.core.error import InvalidQueryError, NetworkError

from conftest import FakeClient

NEXT = "https://api.harvardartmuseums.org/object?apikey=k&culture=dutch&page=2"
PREV = "https://api.harvardartmuseums.org/object?apikey=k&culture=dutch&page=1"


@pytest.fixture
def page_one():
    return {
        "info": {"totalrecords": 4, "pages": 2, "page": 1, "next": NEXT},
        "records": [{"id": 1, "title": "One"}, {"id": 2, "title": "Two"}],
    }


@pytest.fixture
def page_two():
    return {
        "info": {"totalrecords": 4, "pages": 2, "page": 2, "prev": PREV},
        "records": [{"id": 3, "title": "Three"}, {"id": 4}],
    }


def _preview(store, client):
    return ResultPreviewList(client, lambda: store.state.results, store.set_busy, store.set_results, store.set_featured)


def test_next_page_replaces_records_and_keeps_featured(store, transitions, page_one, page_two):
    store.set_results(page_one)
    store.set_featured(page_one["records"][0])
    transitions.clear()
    client = FakeClient(store=store, pages={NEXT: page_two})

    assert asyncio.run(_preview(store, client).next_page()) is True

    assert client.calls == [("lookup_page", NEXT)]
    assert client.busy_at_call == [True]
    assert store.state.results is page_two
    assert store.state.featured == {"id": 1, "title": "One"}
    assert [name for name, _ in transitions] == ["busy", "results", "busy"]


def test_previous_page_uses_prev_token(store, page_one, page_two):
    store.set_results(page_two)
    client = FakeClient(store=store, pages={PREV: page_one})

    asyncio.run(_preview(store, client).previous_page())

    assert store.state.results is page_one


def test_missing_token_is_a_no_op(store, transitions, page_one):
    store.set_results(page_one)
    transitions.clear()
    client = FakeClient(store=store)

    assert asyncio.run(_preview(store, client).previous_page()) is False
    assert client.calls == []
    assert transitions == []


def test_failed_page_keeps_current_results(store, page_one):
    store.set_results(page_one)
    client = FakeClient(store=store, error=NetworkError("HTTP 502"))

    asyncio.run(_preview(store, client).next_page())

    assert store.state.results is page_one
    assert store.state.busy is False


def test_select_features_record_synchronously(store, transitions, page_one):
    store.set_results(page_one)
    transitions.clear()
    preview = _preview(store, FakeClient(store=store))

    record = preview.select(1)

    assert record is page_one["records"][1]
    assert store.state.featured is record
    assert transitions == [("featured", record)]


def test_select_out_of_range(store, page_one):
    store.set_results(page_one)

    with pytest.raises(InvalidQueryError):
        _preview(store, FakeClient()).select(5)


def test_render_disables_missing_direction_and_marks_untitled(store, page_two):
    html = _preview(store, FakeClient()).render(page_two)

    assert 'action="/actions/page/previous"><button type="submit">Previous' in html
    assert 'action="/actions/page/next"><button type="submit" disabled>Next' in html
    assert "<h3>Three</h3>" in html
    assert "<h3>MISSING INFO</h3>" in html
    assert 'action="/actions/feature/1"' in html


def test_zero_title_is_a_heading_not_missing_info(store):
    html = _preview(store, FakeClient()).render({"info": {}, "records": [{"id": 9, "title": 0}]})

    assert "<h3>0</h3>" in html
    assert "MISSING INFO" not in html


def test_preview_headings_are_escaped(store):
    html = _preview(store, FakeClient()).render({"info": {}, "records": [{"id": 9, "title": "<b>Bold</b>"}]})

    assert "<h3>&lt;b&gt;Bold&lt;/b&gt;</h3>" in html
