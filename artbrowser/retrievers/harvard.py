import threading
from typing import Any, Callable, Dict, List, Optional
from urllib.parse import urlsplit

import requests

from .base import BaseRetriever
from ..core.config import VOCABULARY_KINDS, VOCABULARY_SIZE, get_api_config, get_page_size, get_request_timeout
from ..core.error import DecodeError, InvalidQueryError, NetworkError
from ..core.logger import get_logger
from ..models.schema import ResultEnvelope, SearchQuery, build_envelope

logger = get_logger(__name__)


def _public_url(url: str) -> str:
    """Drop the query string so API keys never reach the logs."""
    parts = urlsplit(url)
    return f"{parts.scheme}://{parts.netloc}{parts.path}"


class HarvardArtRetriever(BaseRetriever):
    """
    QueryClient for the Harvard Art Museums object API.

    Pagination tokens are the absolute ``info.next`` / ``info.prev`` URLs the
    API returns; they already carry the API key and page parameters.

    Fetches run on executor threads and a requests.Session is not thread-safe,
    so every thread gets its own session from ``session_factory``.
    """

    def __init__(
        self,
        api_base: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        page_size: Optional[int] = None,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ) -> None:
        cfg = get_api_config()
        self.api_base = (api_base or cfg["api_base"]).rstrip("/")
        self.api_key = api_key if api_key is not None else cfg["api_key"]
        self.timeout = timeout if timeout is not None else get_request_timeout()
        self.page_size = page_size if page_size is not None else get_page_size()
        self._session_factory = session_factory
        self._local = threading.local()
        self._sessions: List[requests.Session] = []
        self._sessions_lock = threading.Lock()
        if not self.api_key:
            logger.warning("ART_API_KEY is not set; the collection API will reject requests")

    def _get_session(self) -> requests.Session:
        session = getattr(self._local, "session", None)
        if session is None:
            session = self._session_factory()
            session.headers.update({"User-Agent": "artbrowser/0.1", "Accept": "application/json"})
            self._local.session = session
            with self._sessions_lock:
                self._sessions.append(session)
        return session

    def _params(self, **params: Any) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.api_key:
            out["apikey"] = self.api_key
        out.update({k: v for k, v in params.items() if v is not None})
        return out

    def _get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        public = _public_url(url)
        try:
            response = self._get_session().get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise NetworkError(f"request to {public} failed: {exc}", details={"url": public}) from exc

        if response.status_code >= 400:
            raise NetworkError(
                f"request to {public} returned HTTP {response.status_code}",
                details={"url": public, "status": response.status_code},
            )

        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError(f"response from {public} is not valid JSON", details={"url": public}) from exc

    def _is_own_url(self, token: str) -> bool:
        base = urlsplit(self.api_base)
        target = urlsplit(token)
        return (
            target.scheme == base.scheme
            and target.netloc == base.netloc
            and target.path.startswith(base.path.rstrip("/") + "/")
        )

    def fetch_lookup(self, field: str, value: str) -> ResultEnvelope:
        query = SearchQuery(field, value)
        url = f"{self.api_base}/object"
        logger.info(f"Lookup {query.param}={query.value!r}")
        payload = self._get_json(url, self._params(**{query.param: query.value, "size": self.page_size}))
        return build_envelope(payload)

    def fetch_page(self, token: str) -> ResultEnvelope:
        if not isinstance(token, str) or not self._is_own_url(token):
            raise InvalidQueryError("page token does not point at the configured API", details={"base": self.api_base})
        logger.info(f"Fetching page {_public_url(token)}")
        return build_envelope(self._get_json(token))

    def fetch_search(
        self,
        keyword: Optional[str] = None,
        classification: Optional[str] = None,
        century: Optional[str] = None,
    ) -> ResultEnvelope:
        params = self._params(
            keyword=self._coerce_text(keyword),
            classification=self._coerce_text(classification),
            century=self._coerce_text(century),
            size=self.page_size,
        )
        logger.info(f"Search keyword={params.get('keyword')!r} classification={params.get('classification')!r} century={params.get('century')!r}")
        return build_envelope(self._get_json(f"{self.api_base}/object", params))

    def fetch_vocabulary(self, kind: str) -> List[str]:
        sort = VOCABULARY_KINDS.get(kind)
        if sort is None:
            raise InvalidQueryError(f"unknown vocabulary: {kind}", details={"kind": kind})
        envelope = build_envelope(
            self._get_json(f"{self.api_base}/{kind}", self._params(size=VOCABULARY_SIZE, sort=sort))
        )
        return [str(r["name"]) for r in envelope["records"] if r.get("name")]

    async def lookup(self, field: str, value: str) -> ResultEnvelope:
        return await self._run_blocking(self.fetch_lookup, field, value)

    async def lookup_page(self, token: str) -> ResultEnvelope:
        return await self._run_blocking(self.fetch_page, token)

    async def search(
        self,
        keyword: Optional[str] = None,
        classification: Optional[str] = None,
        century: Optional[str] = None,
    ) -> ResultEnvelope:
        return await self._run_blocking(self.fetch_search, keyword, classification, century)

    async def vocabulary(self, kind: str) -> List[str]:
        return await self._run_blocking(self.fetch_vocabulary, kind)

    def close(self) -> None:
        with self._sessions_lock:
            sessions, self._sessions = self._sessions, []
        for session in sessions:
            session.close()
        self._local = threading.local()
