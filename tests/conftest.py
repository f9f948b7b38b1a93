import asyncio
from typing import Any, Dict, List, Optional

import pytest

from artbrowser.core.state import StateStore


class FakeClient:
    """In-memory QueryClient that records every call and the busy flag at call time."""

    def __init__(
        self,
        store: Optional[StateStore] = None,
        envelope: Optional[Dict[str, Any]] = None,
        error: Optional[Exception] = None,
        pages: Optional[Dict[str, Dict[str, Any]]] = None,
        vocabularies: Optional[Dict[str, List[str]]] = None,
    ) -> None:
        self.store = store
        self.envelope = envelope if envelope is not None else {"info": {}, "records": []}
        self.error = error
        self.pages = pages or {}
        self.vocabularies = vocabularies or {}
        self.calls: List[tuple] = []
        self.busy_at_call: List[bool] = []
        self.closed = False

    def _record(self, *call: Any) -> None:
        self.calls.append(call)
        if self.store is not None:
            self.busy_at_call.append(self.store.state.busy)

    async def lookup(self, field, value):
        self._record("lookup", field, value)
        await asyncio.sleep(0)
        if self.error:
            raise self.error
        return self.envelope

    async def lookup_page(self, token):
        self._record("lookup_page", token)
        await asyncio.sleep(0)
        if self.error:
            raise self.error
        return self.pages[token]

    async def search(self, keyword=None, classification=None, century=None):
        self._record("search", keyword, classification, century)
        if self.error:
            raise self.error
        return self.envelope

    async def vocabulary(self, kind):
        self._record("vocabulary", kind)
        if self.error:
            raise self.error
        return self.vocabularies.get(kind, [])

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def store():
    return StateStore()


@pytest.fixture
def transitions(store):
    """(field, new value) for every mutation of ``store``, in order."""
    seen: List[tuple] = []
    store.subscribe(lambda state, name: seen.append((name, getattr(state, name))))
    return seen


@pytest.fixture
def dutch_envelope():
    return {
        "info": {"total": 3},
        "records": [
            {"id": 1, "title": "Still Life"},
            {"id": 2, "title": "Tavern Scene"},
            {"id": 3, "title": "Winter Landscape"},
        ],
    }


@pytest.fixture
def painting():
    return {
        "id": 299843,
        "title": "Self-Portrait Dedicated to Paul Gauguin",
        "dated": "1888",
        "culture": "Dutch",
        "technique": "Painting",
        "medium": "OIL PAINT",
        "dimensions": "61.5 x 50.3 cm",
        "department": "Department of Modern and Contemporary Art",
        "division": "European and American Art",
        "contact": "am_moderncontemporary@harvard.edu",
        "creditline": "Bequest from the Collection of Maurice Wertheim, Class of 1906",
        "description": "",
        "people": [
            {"displayname": "Vincent van Gogh", "role": "Artist"},
            {"alphasort": "Unknown", "role": "Former owner"},
        ],
        "images": [
            {"baseimageurl": "https://nrs.harvard.edu/urn-3:HUAM:DDC251942", "alttext": "Portrait of the artist"},
        ],
    }
