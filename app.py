from __future__ import annotations

import contextlib
import logging

from fastapi import FastAPI
from fastapi.responses import JSONResponse, RedirectResponse

from dotenv import load_dotenv

from settings import get_settings

logger = logging.getLogger(__name__)


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    from endpoints.mcp_endpoints import mcp

    async with mcp.session_manager.run():
        yield


def create_app() -> FastAPI:
    load_dotenv("local.env")

    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from endpoints.mcp_endpoints import CONTRACT, mcp

    mcp.settings.streamable_http_path = "/"

    app = FastAPI(title=CONTRACT.registry.title, lifespan=lifespan)

    @app.get("/health")
    async def health():
        return JSONResponse({"status": "ok", "contract": CONTRACT.registry.title})

    @app.get("/metadata")
    async def contract_metadata():
        return JSONResponse(CONTRACT.registry.describe())

    @app.post("/mcp")
    async def mcp_redirect_post():
        return RedirectResponse(url="/mcp/", status_code=307)

    @app.get("/mcp")
    async def mcp_redirect_get():
        return RedirectResponse(url="/mcp/", status_code=307)

    app.mount("/mcp", mcp.streamable_http_app())

    logger.info("APP: %s v%s ready", CONTRACT.registry.title, CONTRACT.registry.version)
    return app


app = create_app()
