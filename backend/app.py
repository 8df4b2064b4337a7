import logging
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from fastapi import FastAPI

from backend.config import build_llm, get_config
from backend.routes import router
from luma_wisp.engine import LumaEngine
from luma_wisp.llm import LLM
from luma_wisp.storage import MemoryStore

load_dotenv(Path(__file__).parent.parent / ".env")

logger = logging.getLogger(__name__)


def create_app(
    store: MemoryStore | None = None,
    llm: LLM | None = None,
    config: dict[str, Any] | None = None,
) -> FastAPI:
    """Build the app around one store and one engine for its whole lifetime."""
    resolved = config or get_config()

    app = FastAPI(title="Luma Wisp")
    app.state.config = resolved
    app.state.store = store if store is not None else MemoryStore()
    app.state.engine = LumaEngine(llm if llm is not None else build_llm(resolved))
    app.include_router(router, prefix="/api")

    @app.get("/")
    async def root():
        return {"message": "Luma Wisp Backend API", "status": "running", "version": "1.0.0"}

    logger.info("Luma Wisp app created (environment=%s)", resolved["environment"])
    return app


# Default app instance for uvicorn (reads configuration from the environment)
app = create_app()
