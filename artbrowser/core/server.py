from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI

from ..components.root import RootView
from .logger import get_logger
from ..retrievers.base import QueryClient
from ..retrievers.harvard import HarvardArtRetriever

logger = get_logger()


def load_env() -> None:
    """
    Load environment variables from the project root `.env`.

    Do not rely on current working directory (uvicorn may import the factory from anywhere).
    """
    project_root = Path(__file__).resolve().parents[2]
    env_path = project_root / ".env"
    if env_path.exists():
        load_dotenv(env_path)
        return

    # Fallback to CWD for compatibility
    cwd_env = Path.cwd() / ".env"
    if cwd_env.exists():
        load_dotenv(cwd_env)


def create_app(client: Optional[QueryClient] = None, root: Optional[RootView] = None) -> FastAPI:
    """
    Build the host application and mount the root view into it.

    Args:
        client: QueryClient to use; defaults to a HarvardArtRetriever configured from the environment
        root: Pre-built RootView (its own client wins over ``client``)

    Returns:
        FastAPI application with the view routes mounted
    """
    if root is None:
        if client is None:
            load_env()
            client = HarvardArtRetriever()
        root = RootView(client)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await root.load_vocabularies()
        logger.info(
            f"Loaded {len(root.vocabularies['classification'])} classifications, "
            f"{len(root.vocabularies['century'])} centuries"
        )
        try:
            yield
        finally:
            close = getattr(root.client, "close", None)
            if callable(close):
                close()
                logger.info("Closed collection client")

    app = FastAPI(
        title="Art Browser",
        description="Search and browse an art collection API",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.root = root
    root.mount(app)
    return app
