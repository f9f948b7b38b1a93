"""
Root view: owns the application state, wires children and mounts the routes.
"""
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import BaseModel

from .feature import FeatureDetail
from .loading import render_loading
from .preview import ResultPreviewList
from .search_form import SearchForm
from .searchable import ActivationEvent, SearchableLink
from .templating import render_partial, templates
from .title import render_title
from ..core.config import APP_TITLE, VOCABULARY_KINDS
from ..core.error import InvalidQueryError, log_error
from ..core.logger import get_logger
from ..core.state import StateStore, UIState
from ..retrievers.base import QueryClient

logger = get_logger()

PAGE_DIRECTIONS = ("next", "previous")


class StateResponse(BaseModel):
    busy: bool
    results: Dict[str, Any]
    featured: Optional[Dict[str, Any]] = None


class RootView:
    def __init__(self, client: QueryClient, store: Optional[StateStore] = None) -> None:
        self.client = client
        self.store = store or StateStore()
        self.vocabularies: Dict[str, List[str]] = {kind: [] for kind in VOCABULARY_KINDS}
        self._mounted = False

        store = self.store
        self.search_form = SearchForm(client, store.set_busy, store.set_results)
        self.preview = ResultPreviewList(
            client,
            lambda: store.state.results,
            store.set_busy,
            store.set_results,
            store.set_featured,
        )
        self.feature = FeatureDetail(client, store.set_busy, store.set_results)

    @property
    def state(self) -> UIState:
        return self.store.state

    def link(self, field: str, value: str) -> SearchableLink:
        """A SearchableLink bound to this view's busy and results mutators."""
        return SearchableLink(field, value, self.client, self.store.set_busy, self.store.set_results)

    async def load_vocabularies(self) -> None:
        for kind in VOCABULARY_KINDS:
            try:
                self.vocabularies[kind] = await self.client.vocabulary(kind)
            except Exception as e:
                log_error(e, logger, context={"vocabulary": kind}, level="WARNING")
                self.vocabularies[kind] = []

    def context(self) -> Dict[str, Any]:
        """Page context: each child rendered against the current state."""
        state = self.state
        return {
            "app_title": APP_TITLE,
            "title": render_title(),
            "search_form": self.search_form.render(self.vocabularies["classification"], self.vocabularies["century"]),
            "preview": self.preview.render(state.results),
            "feature": self.feature.render(state.featured),
            "loading": render_loading(state.busy),
        }

    def render(self) -> str:
        return render_partial("page.html", **self.context())

    def mount(self, app: FastAPI) -> FastAPI:
        """
        Attach the view routes to ``app``. A view is mounted once.

        Raises:
            RuntimeError: If this view was already mounted
        """
        if self._mounted:
            raise RuntimeError("RootView is already mounted")
        self._mounted = True
        view = self

        def back_home() -> RedirectResponse:
            return RedirectResponse(url="/", status_code=303)

        @app.get("/", response_class=HTMLResponse)
        async def index(request: Request) -> HTMLResponse:
            return templates.TemplateResponse(request, "page.html", view.context())

        @app.get("/state", response_model=StateResponse)
        async def state() -> Dict[str, Any]:
            return view.state.to_dict()

        @app.post("/actions/lookup")
        async def lookup(field: str = Form(""), value: str = Form("")) -> RedirectResponse:
            try:
                link = view.link(field, value)
            except InvalidQueryError as e:
                raise HTTPException(status_code=400, detail=str(e))
            await link.activate(ActivationEvent(source="lookup"))
            return back_home()

        @app.post("/actions/search")
        async def search(
            keyword: str = Form(""),
            classification: str = Form(""),
            century: str = Form(""),
        ) -> RedirectResponse:
            await view.search_form.submit(keyword=keyword, classification=classification, century=century)
            return back_home()

        @app.post("/actions/page/{direction}")
        async def page(direction: str) -> RedirectResponse:
            if direction not in PAGE_DIRECTIONS:
                raise HTTPException(status_code=404, detail=f"Unknown page direction: {direction}")
            if direction == "next":
                await view.preview.next_page()
            else:
                await view.preview.previous_page()
            return back_home()

        @app.post("/actions/feature/{index}")
        async def feature(index: int) -> RedirectResponse:
            try:
                view.preview.select(index)
            except InvalidQueryError as e:
                raise HTTPException(status_code=400, detail=str(e))
            return back_home()

        logger.info("RootView mounted")
        return app
