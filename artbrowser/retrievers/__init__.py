"""
Retrievers module: collection API clients.
"""
from .base import BaseRetriever, QueryClient
from .harvard import HarvardArtRetriever

__all__ = [
    "BaseRetriever",
    "QueryClient",
    "HarvardArtRetriever",
]
