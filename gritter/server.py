"""FastAPI host serving the Gritter demo plus a health endpoint.

Launch:
    uvicorn gritter.server:app --host 0.0.0.0 --port 7860
"""

from __future__ import annotations

import logging
import os
import time

import gradio as gr
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from pydantic import BaseModel

from gritter import __version__
from gritter.app import PROJECT_ROOT, create_app
from gritter.config import GritterSettings

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    status: str
    version: str
    uptime_seconds: float


def create_server(settings: GritterSettings | None = None) -> FastAPI:
    """Build the FastAPI app with the Gradio demo mounted under ``mount_path``."""
    cfg = settings or GritterSettings()
    server = FastAPI(title="Gritter", version=__version__)
    server.state.start_time = time.time()

    @server.get("/api/health", response_model=HealthResponse, tags=["health"])
    async def health(request: Request) -> HealthResponse:
        """Return service health information."""
        start_time: float = getattr(request.app.state, "start_time", time.time())
        return HealthResponse(
            status="ok",
            version=__version__,
            uptime_seconds=round(time.time() - start_time, 1),
        )

    logger.info("Mounting Gritter demo at %s", cfg.mount_path)
    return gr.mount_gradio_app(server, create_app(cfg), path=cfg.mount_path)


load_dotenv(os.path.join(PROJECT_ROOT, ".env"))

app = create_server()
