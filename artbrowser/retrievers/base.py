"""
Base retriever classes and protocol definitions.
"""
import asyncio
import functools
from typing import Any, Callable, List, Optional, Protocol, TypeVar

from ..models.schema import ResultEnvelope

T = TypeVar("T")


class QueryClient(Protocol):
    """
    Protocol defining the interface the UI components use to reach the collection API.

    Every method may raise NetworkError or DecodeError.
    """

    async def lookup(self, field: str, value: str) -> ResultEnvelope:
        ...

    async def lookup_page(self, token: str) -> ResultEnvelope:
        ...

    async def search(
        self,
        keyword: Optional[str] = None,
        classification: Optional[str] = None,
        century: Optional[str] = None,
    ) -> ResultEnvelope:
        ...

    async def vocabulary(self, kind: str) -> List[str]:
        ...


class BaseRetriever:
    """
    Base class for retrievers with common utility methods.

    Subclasses implement blocking ``fetch_*`` methods; the async QueryClient
    methods run them in the event loop's default executor so the awaiting
    component is suspended without blocking the loop.
    """

    @staticmethod
    def _coerce_text(value: Any) -> Optional[str]:
        """
        Best-effort coercion of a form value to a query parameter.

        - None / "" / whitespace / "any" -> None
        - anything else -> stripped string
        """
        if value is None:
            return None
        s = str(value).strip()
        if not s or s.lower() == "any":
            return None
        return s

    async def _run_blocking(self, func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, functools.partial(func, *args, **kwargs))
