"""FastAPI application."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
import logfire

from nameguard.interface.api.routes import health, login_events
from nameguard.util.di.container import create_container, setup_di
from nameguard.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log service start and close the container (and store pool) on shutdown."""
    logfire.info("Name binding guard enabled")
    yield
    await app.state.dishka_container.close()
    logfire.info("Name binding guard disabled")


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container when omitted
    """
    app_instance = FastAPI(
        title="nameguard",
        description="Binds player names to identity keys and rejects impersonating logins",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(login_events.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
