"""Components module: the views of the art browser."""
from .feature import FeatureDetail
from .loading import render_loading
from .preview import ResultPreviewList
from .root import RootView, StateResponse
from .search_form import SearchForm
from .searchable import ActivationEvent, SearchableLink
from .title import render_title

__all__ = [
    "ActivationEvent",
    "FeatureDetail",
    "ResultPreviewList",
    "RootView",
    "SearchForm",
    "SearchableLink",
    "StateResponse",
    "render_loading",
    "render_title",
]
