from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

from .searchable import SearchableLink
from .templating import render_partial
from ..core.state import SetBusy, SetResults
from ..models.schema import Record
from ..retrievers.base import QueryClient
from ..search.facets import FACETS, PEOPLE, SEARCHABLE, is_present, person_name


@dataclass
class Fact:
    """One row of the facts section; ``link`` is set for searchable facets."""

    label: str
    value: Any = None
    link: Optional[SearchableLink] = None


def _text(value: Any) -> str:
    return "" if value is None else str(value)


class FeatureDetail:
    """Detail panel for the featured record."""

    def __init__(self, client: QueryClient, set_busy: SetBusy, set_results: SetResults) -> None:
        self._client = client
        self._set_busy = set_busy
        self._set_results = set_results

    def _link(self, field: str, value: str) -> Fact:
        return Fact(field, value, SearchableLink(field, value, self._client, self._set_busy, self._set_results))

    def _facts(self, featured: Record) -> Iterator[Fact]:
        for facet in FACETS:
            value = featured.get(facet.name)
            if not is_present(value):
                continue
            if facet.kind == SEARCHABLE:
                yield self._link(facet.label, facet.search_value(value))
            elif facet.kind == PEOPLE:
                for person in value if isinstance(value, list) else [value]:
                    name = person_name(person)
                    if name:
                        yield self._link(facet.label, name)
            else:
                yield Fact(facet.label, value)

    def links(self, featured: Optional[Record]) -> List[SearchableLink]:
        """Every SearchableLink the panel shows for ``featured``, in display order."""
        if not featured:
            return []
        return [fact.link for fact in self._facts(featured) if fact.link is not None]

    @staticmethod
    def _images(featured: Record) -> List[Dict[str, str]]:
        images = featured.get("images")
        if not isinstance(images, list):
            return []
        return [
            {
                "src": _text(image.get("baseimageurl") or image.get("url")),
                "alt": _text(image.get("alttext") or image.get("description")),
            }
            for image in images
            if isinstance(image, dict)
        ]

    def context(self, featured: Optional[Record]) -> Dict[str, Any]:
        if featured is None:
            return {"featured": False}
        images = self._images(featured)
        return {
            "featured": True,
            "title": _text(featured.get("title")),
            "dated": _text(featured.get("dated")),
            "facts": list(self._facts(featured)),
            "images": images,
            "nothing_to_display": not images,
        }

    def render(self, featured: Optional[Record]) -> str:
        return render_partial("feature.html", **self.context(featured))
