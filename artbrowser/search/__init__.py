"""Search module: lookup lifecycle and facet policy."""
from .facets import FACETS, Facet, is_present, person_name
from .searcher import run_lookup

__all__ = [
    "FACETS",
    "Facet",
    "is_present",
    "person_name",
    "run_lookup",
]
