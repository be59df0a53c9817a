"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config.settings import settings
from src.api.routes import router
from src.chat import ChatProxy
from src.llm.gateway import LLMGateway

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup: build the chat proxy. Nothing to release on shutdown."""
    logging.basicConfig(level=logging.INFO)
    logger.info("Starting up...")

    if not settings.chat_enabled:
        logger.warning("GEMINI_API_KEY is not set; /api/chatbot will return 500")
    app.state.chat_proxy = ChatProxy(LLMGateway(), max_history_turns=settings.max_history_turns)

    yield

    logger.info("Shutting down...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(title="MG Accounting Tax Estimator", lifespan=lifespan)
    app.include_router(router)
    return app
