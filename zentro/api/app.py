"""FastAPI host for the NiceGUI chat page.

``zentro.main`` mounts the UI on the application built here. The only
HTTP route of its own is a health check that also tells operators
whether the Gemini credential is configured.
"""

import logging
import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from zentro import __version__
from zentro.agent.config import DEFAULT_MODEL

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    model = os.getenv("GEMINI_MODEL", DEFAULT_MODEL)
    logger.info(f"Zentro {__version__} starting with model {model}")
    yield
    logger.info("Zentro stopped")


def create_app() -> FastAPI:
    """Build the host application.

    Returns:
        FastAPI application with CORS enabled and ``/health`` registered.
        The caller mounts the chat UI on it.
    """
    application = FastAPI(
        title="Zentro",
        description="Multimodal Gemini chat assistant with Google Search citations.",
        version=__version__,
        lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @application.get("/health")
    async def health_check() -> dict[str, str | bool]:
        """Report liveness, the configured model, and whether a key is set.

        The key is read per request, matching how each send rebuilds its
        configuration.
        """
        return {
            "status": "healthy",
            "service": "zentro",
            "version": __version__,
            "model": os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
            "api_key_configured": bool(os.getenv("GEMINI_API_KEY", "").strip()),
        }

    return application
