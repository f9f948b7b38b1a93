"""
Facet policy for the feature panel: which record fields are shown, in what
order, and which of them link to a follow-up search.
"""
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

STATIC = "static"
SEARCHABLE = "searchable"
PEOPLE = "people"


def is_present(value: Any) -> bool:
    """
    Whether a record field has something worth showing.

    None is absent; strings must be non-blank; lists, tuples and dicts must be
    non-empty; numbers and booleans count whenever they are defined, so a
    legitimate ``0`` is still shown.
    """
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) > 0
    return True


@dataclass(frozen=True)
class Facet:
    name: str
    label: str
    kind: str = STATIC
    transform: Optional[Callable[[Any], str]] = None

    def search_value(self, value: Any) -> str:
        text = str(value)
        return self.transform(text) if self.transform else text


FACETS: List[Facet] = [
    Facet("description", "Description"),
    Facet("culture", "Culture", SEARCHABLE),
    Facet("style", "Style"),
    Facet("technique", "Technique", SEARCHABLE),
    Facet("medium", "Medium", SEARCHABLE, transform=str.lower),
    Facet("dimensions", "Dimensions"),
    Facet("people", "Person", PEOPLE),
    Facet("department", "Department"),
    Facet("division", "Division"),
    Facet("contact", "Contact"),
    Facet("creditline", "Credit line"),
]


def person_name(person: Any) -> Optional[str]:
    if not isinstance(person, dict):
        return None
    name = person.get("displayname") or person.get("name")
    return str(name).strip() if is_present(name) else None
