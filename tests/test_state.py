import asyncio

from artbrowser.components.searchable import SearchableLink
from artbrowser.core.state import StateStore, UIState

from conftest import FakeClient


class GatedClient:
    """Each lookup value waits on its own event, so tests decide the settle order."""

    def __init__(self, envelopes):
        self.envelopes = envelopes
        self.gates = {value: asyncio.Event() for value in envelopes}

    async def lookup(self, field, value):
        await self.gates[value].wait()
        return self.envelopes[value]


def test_initial_state():
    state = StateStore().state

    assert state == UIState(busy=False, results={"info": {}, "records": []}, featured=None)


def test_mutations_replace_whole_fields(store):
    first = store.state
    records = [{"id": 1}]
    store.set_results({"info": {}, "records": records})

    assert store.state is not first
    assert first.results == {"info": {}, "records": []}
    assert store.state.results["records"] is records


def test_unsubscribed_listener_is_not_called(store):
    seen = []
    unsubscribe = store.subscribe(lambda state, name: seen.append(name))
    store.set_busy(True)
    unsubscribe()
    store.set_busy(False)

    assert seen == ["busy"]


def test_listener_receives_new_state_and_field_name(store):
    seen = []
    store.subscribe(lambda state, name: seen.append((state, name)))
    store.set_featured({"id": 7})

    [(state, name)] = seen
    assert name == "featured"
    assert state is store.state
    assert state.featured == {"id": 7}


def test_culture_lookup_end_to_end(store, transitions, dutch_envelope):
    client = FakeClient(store=store, envelope=dutch_envelope)
    link = SearchableLink("Culture", "Dutch", client, store.set_busy, store.set_results)

    asyncio.run(link.activate())

    assert client.busy_at_call == [True]
    assert store.state.to_dict() == {
        "busy": False,
        "results": {"info": {"total": 3}, "records": dutch_envelope["records"]},
        "featured": None,
    }


def test_overlapping_lookups_last_settle_wins(store):
    dutch = {"info": {"total": 1}, "records": [{"id": "dutch"}]}
    french = {"info": {"total": 1}, "records": [{"id": "french"}]}

    async def scenario():
        client = GatedClient({"Dutch": dutch, "French": french})
        first = SearchableLink("Culture", "Dutch", client, store.set_busy, store.set_results)
        second = SearchableLink("Culture", "French", client, store.set_busy, store.set_results)

        first_task = asyncio.create_task(first.activate())
        second_task = asyncio.create_task(second.activate())
        await asyncio.sleep(0)
        assert store.state.busy is True

        client.gates["French"].set()
        await second_task
        assert store.state.results is french
        # the Dutch lookup is still pending but busy already reads false
        assert store.state.busy is False

        client.gates["Dutch"].set()
        await first_task
        assert store.state.results is dutch
        assert store.state.busy is False

    asyncio.run(scenario())
