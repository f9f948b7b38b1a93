"""Art Browser - search and browse an art collection API."""
from .components import RootView, SearchableLink
from .core.config import APP_TITLE, DEFAULT_API_BASE, DEFAULT_PAGE_SIZE, get_api_config
from .core.server import create_app
from .core.state import StateStore, UIState
from .retrievers import HarvardArtRetriever, QueryClient

__all__ = [
    "create_app",
    "RootView",
    "SearchableLink",
    "StateStore",
    "UIState",
    "HarvardArtRetriever",
    "QueryClient",
    "APP_TITLE",
    "DEFAULT_API_BASE",
    "DEFAULT_PAGE_SIZE",
    "get_api_config",
]
