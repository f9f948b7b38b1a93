from typing import Optional

from .templating import render_partial
from ..core.state import SetBusy, SetResults
from ..models.schema import SearchQuery
from ..retrievers.base import QueryClient
from ..search.searcher import run_lookup

LOOKUP_ACTION = "/actions/lookup"


class ActivationEvent:
    """The user gesture that activated a control."""

    def __init__(self, source: str = "") -> None:
        self.source = source
        self.default_prevented = False

    def prevent_default(self) -> None:
        self.default_prevented = True


class SearchableLink:
    """
    A facet label plus a control that searches the collection for that facet value.

    Only the two mutators the lookup needs are held; the link never sees the
    rest of the application state.
    """

    def __init__(self, field: str, value: str, client: QueryClient, set_busy: SetBusy, set_results: SetResults) -> None:
        self.query = SearchQuery(field, value)
        self._client = client
        self._set_busy = set_busy
        self._set_results = set_results

    @property
    def field(self) -> str:
        return self.query.field

    @property
    def value(self) -> str:
        return self.query.value

    def render(self) -> str:
        return render_partial("searchable.html", link=self, action=LOOKUP_ACTION)

    async def activate(self, event: Optional[ActivationEvent] = None) -> bool:
        """
        Search for this link's (field, value) and publish the results.

        Returns:
            True if the results were replaced, False if the lookup failed
        """
        if event is not None:
            event.prevent_default()
        return await run_lookup(
            lambda: self._client.lookup(self.field, self.value),
            self._set_busy,
            self._set_results,
            context={"field": self.field, "value": self.value},
        )

    def __repr__(self) -> str:
        return f"SearchableLink({self.field!r}, {self.value!r})"
