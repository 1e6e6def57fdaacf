"""FastAPI application entrypoint."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.adapters.inbound.http.errors import register_exception_handlers
from app.adapters.inbound.http.middleware import register_request_logging
from app.adapters.inbound.http.routes import router
from app.infrastructure.config.settings import settings
from app.infrastructure.wiring.container import close_container

# Load environment variables from .env file
load_dotenv()


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    yield
    await close_container()


def create_app() -> FastAPI:
    """
    Build the FastAPI application.

    Returns:
        Application with routes, error handlers and middleware installed
    """
    application = FastAPI(
        title="Education Consultancy API",
        description="Lead management and student document intake",
        version="0.1.0",
        lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_request_logging(application)
    register_exception_handlers(application)
    application.include_router(router)
    return application


app = create_app()
